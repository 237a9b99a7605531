"""Candidate and job matching: raw scoring, forced ranking ladders, retrying job feed."""
from __future__ import annotations

__version__ = "0.3.0"

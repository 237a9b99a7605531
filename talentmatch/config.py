"""Load matching settings and env configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from talentmatch.log import get_logger

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "matching.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

CANDIDATE_LADDER: list[int] = [96, 91, 84, 78, 72, 65, 59, 53, 48, 44, 42, 41]
JOB_LADDER: list[int] = [95, 88, 82, 75, 68, 60, 52, 45, 41]


class ConfigError(ValueError):
    """Raised when matching.yaml or an env override holds an unusable value."""


@dataclass
class RawWeights:
    skills: float = 0.5
    experience: float = 0.3
    location: float = 0.2


@dataclass
class LocationRules:
    """String rules for the location tiers of the raw score.

    A pair of locations whose city segments differ still earns the
    ``region_score`` tier when both contain the same region marker.
    """

    region_markers: list[str] = field(default_factory=lambda: ["MN"])
    exact_score: float = 100.0
    region_score: float = 60.0
    other_score: float = 20.0


@dataclass
class RetrySettings:
    max_retries: int = 3
    base_delay_ms: int = 800


@dataclass
class FeedSettings:
    network_failure_rate: float = 0.05
    refresh_batch: int = 50
    load_more_batch: int = 50
    initial_generated: int = 45
    latency_ms: int = 0


@dataclass
class MatchSettings:
    weights: RawWeights = field(default_factory=RawWeights)
    location: LocationRules = field(default_factory=LocationRules)
    candidate_ladder: list[int] = field(default_factory=lambda: list(CANDIDATE_LADDER))
    job_ladder: list[int] = field(default_factory=lambda: list(JOB_LADDER))
    candidate_jitter: int = 1
    retry: RetrySettings = field(default_factory=RetrySettings)
    feed: FeedSettings = field(default_factory=FeedSettings)
    seed: int | None = None


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def ensure_dirs() -> None:
    for d in (REPORTS_DIR,):
        d.mkdir(parents=True, exist_ok=True)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        log.debug("No settings file at %s, using defaults", path)
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path.name} is not valid YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"{path.name} must contain a mapping, got {type(data).__name__}")
    return data


def _validate_ladder(name: str, ladder: list[int]) -> list[int]:
    if not ladder:
        raise ConfigError(f"{name} must not be empty")
    values = [int(v) for v in ladder]
    if any(v < 0 or v > 100 for v in values):
        raise ConfigError(f"{name} values must lie in [0, 100]")
    if any(a < b for a, b in zip(values, values[1:])):
        raise ConfigError(f"{name} must be non-increasing: {values}")
    return values


def _env_int(key: str) -> int | None:
    raw = get_env(key)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{key} must be an integer, got {raw!r}") from exc


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    value = data.get(name)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"{name} must be a mapping, got {type(value).__name__}")
    return value


def _build_settings(data: dict[str, Any]) -> MatchSettings:
    settings = MatchSettings()

    weights = _section(data, "weights")
    settings.weights = RawWeights(
        skills=float(weights.get("skills", settings.weights.skills)),
        experience=float(weights.get("experience", settings.weights.experience)),
        location=float(weights.get("location", settings.weights.location)),
    )

    loc = _section(data, "location")
    defaults = LocationRules()
    markers = loc.get("region_markers", defaults.region_markers)
    if not isinstance(markers, list):
        raise ConfigError("location.region_markers must be a list")
    settings.location = LocationRules(
        region_markers=[str(m) for m in markers],
        exact_score=float(loc.get("exact_score", defaults.exact_score)),
        region_score=float(loc.get("region_score", defaults.region_score)),
        other_score=float(loc.get("other_score", defaults.other_score)),
    )

    ladders = _section(data, "ladders")
    settings.candidate_ladder = _validate_ladder(
        "ladders.candidates", ladders.get("candidates", settings.candidate_ladder)
    )
    settings.job_ladder = _validate_ladder("ladders.jobs", ladders.get("jobs", settings.job_ladder))
    settings.candidate_jitter = int(data.get("candidate_jitter", settings.candidate_jitter))
    if settings.candidate_jitter < 0:
        raise ConfigError("candidate_jitter must be >= 0")

    retry = _section(data, "retry")
    settings.retry = RetrySettings(
        max_retries=int(retry.get("max_retries", settings.retry.max_retries)),
        base_delay_ms=int(retry.get("base_delay_ms", settings.retry.base_delay_ms)),
    )

    feed = _section(data, "feed")
    fd = FeedSettings()
    settings.feed = FeedSettings(
        network_failure_rate=float(feed.get("network_failure_rate", fd.network_failure_rate)),
        refresh_batch=int(feed.get("refresh_batch", fd.refresh_batch)),
        load_more_batch=int(feed.get("load_more_batch", fd.load_more_batch)),
        initial_generated=int(feed.get("initial_generated", fd.initial_generated)),
        latency_ms=int(feed.get("latency_ms", fd.latency_ms)),
    )
    if not 0.0 <= settings.feed.network_failure_rate <= 1.0:
        raise ConfigError("feed.network_failure_rate must lie in [0, 1]")

    if data.get("seed") is not None:
        settings.seed = int(data["seed"])
    return settings


def load_settings(path: Path | None = None) -> MatchSettings:
    """Merge matching.yaml over defaults, then apply TALENTMATCH_* env overrides.

    Any unusable value, including a wrongly typed one, raises ConfigError.
    """
    path = path or SETTINGS_PATH
    data = _read_yaml(path)
    try:
        settings = _build_settings(data)
    except ConfigError:
        raise
    except (ValueError, TypeError) as exc:
        raise ConfigError(f"{path.name}: {exc}") from exc

    # Env overrides
    max_retries = _env_int("TALENTMATCH_MAX_RETRIES")
    if max_retries is not None:
        settings.retry.max_retries = max_retries
    base_delay = _env_int("TALENTMATCH_BASE_DELAY_MS")
    if base_delay is not None:
        settings.retry.base_delay_ms = base_delay
    seed = _env_int("TALENTMATCH_SEED")
    if seed is not None:
        settings.seed = seed

    if settings.retry.max_retries < 1:
        raise ConfigError("retry.max_retries must be >= 1")
    if settings.retry.base_delay_ms < 0:
        raise ConfigError("retry.base_delay_ms must be >= 0")

    return settings

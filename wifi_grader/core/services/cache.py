"""
Score memoization for WiFi Grader.

Scores are cached under a fingerprint of the observation. Two strategies:

    FULL     every field that feeds the calculator (default)
    PARTIAL  (ssid, protocol, enterprise, PMF) only

PARTIAL is kept for acquisition loops that re-observe the same access point.
It lets distinct observations share one cached score (for example the same
SSID seen at a different signal strength), so it is never the default.

The cache is not thread-safe: guard shared instances with a lock or use one
instance per thread.
"""

from __future__ import annotations

import hashlib
import logging
from enum import Enum
from typing import Callable, Dict, Optional

from wifi_grader.core.domain.models import NetworkObservation
from wifi_grader.core.services.scoring import ScoreCalculator

logger = logging.getLogger(__name__)


class FingerprintStrategy(str, Enum):
    FULL = "full"
    PARTIAL = "partial"


# Fields read by the scoring components
SCORING_FIELDS = (
    "security",
    "is_enterprise",
    "is_guest_network",
    "frequency",
    "channel",
    "channel_width",
    "supports_pmf",
    "supports_owe",
    "supports_wps",
    "is_hidden",
    "signal_strength",
    "max_data_rate",
    "vendor",
    "is_rogue_ap",
    "is_evil_twin",
    "is_typo_squatting",
    "has_anomalous_behavior",
    "beacon_interval",
    "responds_to_probes",
)

PARTIAL_FIELDS = ("ssid", "security", "is_enterprise", "supports_pmf")


def _encode(value) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def compute_fingerprint(
    observation: NetworkObservation,
    strategy: FingerprintStrategy = FingerprintStrategy.FULL,
) -> str:
    """Derive the cache key for an observation."""
    if strategy == FingerprintStrategy.PARTIAL:
        return "|".join(_encode(getattr(observation, name)) for name in PARTIAL_FIELDS)

    parts = []
    for name in SCORING_FIELDS:
        encoded = _encode(getattr(observation, name))
        if name == "vendor":
            # vendor matching is case-insensitive
            encoded = encoded.lower()
        parts.append(f"{name}={encoded}")
    return hashlib.sha256("|".join(parts).encode("utf-8")).hexdigest()


class ScoreCache:
    """Fingerprint -> score table in front of a scorer. First write wins."""

    def __init__(
        self,
        scorer: Optional[Callable[[NetworkObservation], int]] = None,
        strategy: FingerprintStrategy = FingerprintStrategy.FULL,
    ):
        self.scorer = scorer if scorer is not None else ScoreCalculator().score
        self.strategy = FingerprintStrategy(strategy)
        self._scores: Dict[str, int] = {}
        self.hits = 0
        self.misses = 0

    def get_cached_score(self, observation: NetworkObservation) -> int:
        key = compute_fingerprint(observation, self.strategy)

        cached = self._scores.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        score = self.scorer(observation)
        self._scores[key] = score
        logger.debug(f"Cached score {score} for {observation.ssid or '<hidden>'} ({self.strategy.value} key)")
        return score

    __call__ = get_cached_score

    def clear_cache(self) -> None:
        """Remove every entry unconditionally."""
        removed = len(self._scores)
        self._scores.clear()
        self.hits = 0
        self.misses = 0
        logger.debug(f"Score cache cleared ({removed} entries)")

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, observation: NetworkObservation) -> bool:
        return compute_fingerprint(observation, self.strategy) in self._scores

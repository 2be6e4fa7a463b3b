"""
Security ranking for WiFi Grader.

Ordering rule: when two scores are close, prefer non-rogue, then enterprise,
then PMF-capable networks; otherwise order by descending score.

A pairwise "within N points" comparator is not transitive, so each
observation gets a single sort key instead:

    (score bucket, not rogue, enterprise, PMF, score)

where the bucket is the score rounded half-up to the nearest tie_window.
Scores more than tie_window apart always land in different buckets and are
ordered by score alone.
"""

from __future__ import annotations

import logging
import math
import time
from typing import Callable, Iterable, Optional

from wifi_grader.core.domain.models import NetworkObservation
from wifi_grader.core.services.scoring import ScoreCalculator

logger = logging.getLogger(__name__)

DEFAULT_TIE_WINDOW = 5

# Collections larger than this get their ranking time logged
LARGE_COLLECTION = 100

RankKey = tuple[int, bool, bool, bool, int]


def score_bucket(score: int, tie_window: int = DEFAULT_TIE_WINDOW) -> int:
    """Round a score half-up to the nearest multiple of tie_window."""
    return int(math.floor(score / tie_window + 0.5)) * tie_window


def rank_key(
    observation: NetworkObservation,
    score: int,
    tie_window: int = DEFAULT_TIE_WINDOW,
) -> RankKey:
    """Sort key for descending order."""
    return (
        score_bucket(score, tie_window),
        not observation.is_rogue_ap,
        observation.is_enterprise,
        observation.supports_pmf,
        score,
    )


class Ranker:
    """Orders observations by security, best first."""

    def __init__(
        self,
        scorer: Optional[Callable[[NetworkObservation], int]] = None,
        tie_window: int = DEFAULT_TIE_WINDOW,
    ):
        if tie_window <= 0:
            raise ValueError("tie_window must be positive")
        self.scorer = scorer if scorer is not None else ScoreCalculator().score
        self.tie_window = tie_window

    def rank_with_scores(
        self, observations: Iterable[NetworkObservation]
    ) -> list[tuple[NetworkObservation, int]]:
        """Ranked (observation, score) pairs; each observation is scored once."""
        start = time.perf_counter()

        scored = [(observation, self.scorer(observation)) for observation in observations]
        scored.sort(
            key=lambda pair: rank_key(pair[0], pair[1], self.tie_window),
            reverse=True,
        )

        if len(scored) > LARGE_COLLECTION:
            elapsed_us = (time.perf_counter() - start) * 1e6
            logger.info(f"Ranked {len(scored)} networks in {elapsed_us:.0f} microseconds")
        return scored

    def rank_by_security_descending(
        self, observations: Iterable[NetworkObservation]
    ) -> list[NetworkObservation]:
        """New list of observations, most secure first. The input is not modified."""
        return [observation for observation, _ in self.rank_with_scores(observations)]

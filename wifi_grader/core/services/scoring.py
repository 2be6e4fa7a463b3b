"""
Security score calculation for WiFi Grader.

Final score = round(sum of weighted component contributions), clamped to
[0, 100]. Intermediate components may be negative or exceed their nominal
weight; only the final value is bounded.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from wifi_grader.core.domain.models import NetworkObservation
from wifi_grader.core.services.components import COMPONENTS, SubScore

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


@dataclass(frozen=True)
class ScoreBreakdown:
    """Complete score decomposition for one observation."""
    components: tuple[SubScore, ...]

    @property
    def weighted_total(self) -> float:
        """Sum of all component contributions, before clamping."""
        return sum(component.contribution for component in self.components)

    @property
    def score(self) -> int:
        return clamp_score(self.weighted_total)

    def get(self, name: str) -> Optional[SubScore]:
        for component in self.components:
            if component.name == name:
                return component
        return None

    def get_negative_contributors(self) -> list[SubScore]:
        return [c for c in self.components if c.contribution < 0]


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round halves up."""
    bounded = max(float(MIN_SCORE), min(float(MAX_SCORE), value))
    return int(math.floor(bounded + 0.5))


ScoreObserver = Callable[[NetworkObservation, ScoreBreakdown], None]


def logging_observer(observation: NetworkObservation, breakdown: ScoreBreakdown) -> None:
    """Observer that traces every score computation at DEBUG level."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    parts = ", ".join(f"{c.name}={c.contribution:.2f}" for c in breakdown.components)
    logger.debug(
        f"Scored {observation.ssid or '<hidden>'} ({observation.security.display_name}): "
        f"{parts}, total={breakdown.weighted_total:.2f}, score={breakdown.score}"
    )


class ScoreCalculator:
    """Pure, stateless security scorer.

    An optional observer is called with every breakdown; the caller that
    supplies it owns its lifecycle.
    """

    def __init__(self, observer: Optional[ScoreObserver] = None):
        self.observer = observer

    def breakdown(self, observation: NetworkObservation) -> ScoreBreakdown:
        result = ScoreBreakdown(components=tuple(compute(observation) for compute in COMPONENTS))
        if self.observer is not None:
            self.observer(observation, result)
        return result

    def score(self, observation: NetworkObservation) -> int:
        """Security score in [0, 100]."""
        return self.breakdown(observation).score

    __call__ = score

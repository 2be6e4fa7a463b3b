"""
Network grading use case for WiFi Grader
"""

import logging
from typing import Iterable, List, Optional, Tuple

from wifi_grader.config.settings import WifiGraderSettings
from wifi_grader.core.domain.models import GradedNetwork, NetworkAssessment, NetworkObservation
from wifi_grader.core.services.assessment import assess_network
from wifi_grader.core.services.cache import ScoreCache
from wifi_grader.core.services.grading import GradeClassifier
from wifi_grader.core.services.ranking import DEFAULT_TIE_WINDOW, Ranker
from wifi_grader.core.services.scoring import ScoreBreakdown, ScoreCalculator, logging_observer
from wifi_grader.infrastructure.scanner import WifiScanner, create_scanner
from wifi_grader.utils.logger import log_performance

logger = logging.getLogger(__name__)


class NetworkGradingUseCase:
    """Scores, grades and ranks observed networks"""

    def __init__(
        self,
        scanner: Optional[WifiScanner] = None,
        calculator: Optional[ScoreCalculator] = None,
        cache: Optional[ScoreCache] = None,
        tie_window: int = DEFAULT_TIE_WINDOW,
    ):
        self.scanner = scanner
        self.calculator = calculator or ScoreCalculator()
        self.cache = cache
        self.classifier = GradeClassifier(self.scorer)
        self.ranker = Ranker(self.scorer, tie_window=tie_window)

    @classmethod
    def from_settings(
        cls,
        settings: WifiGraderSettings,
        scanner: Optional[WifiScanner] = None,
    ) -> "NetworkGradingUseCase":
        """Wire the use case from validated settings

        Per-score traces are attached when debug mode is on or the
        effective log level is DEBUG.
        """
        tracing = settings.debug or settings.logging.level == "DEBUG"
        calculator = ScoreCalculator(observer=logging_observer if tracing else None)
        cache = None
        if settings.cache.enabled:
            cache = ScoreCache(calculator.score, strategy=settings.cache.fingerprint)
        return cls(
            scanner=scanner or create_scanner(settings.scanner),
            calculator=calculator,
            cache=cache,
            tie_window=settings.ranking.tie_window,
        )

    @property
    def scorer(self):
        """Score function in use: the cache when present, else the calculator"""
        return self.cache.get_cached_score if self.cache is not None else self.calculator.score

    @log_performance
    def grade(self, observations: Iterable[NetworkObservation]) -> List[GradedNetwork]:
        """Rank observations and attach score, grade and 1-based rank"""
        ranked = self.ranker.rank_with_scores(observations)
        graded = [
            GradedNetwork(
                rank=position,
                observation=observation,
                score=score,
                grade=self.classifier.classify(score),
            )
            for position, (observation, score) in enumerate(ranked, start=1)
        ]
        logger.info(f"Graded {len(graded)} networks")
        if self.cache is not None:
            logger.debug(f"Score cache: {len(self.cache)} entries, "
                         f"{self.cache.hits} hits, {self.cache.misses} misses")
        return graded

    def scan_and_grade(self) -> List[GradedNetwork]:
        """Acquire observations from the scanner and grade them"""
        if self.scanner is None:
            self.scanner = create_scanner()
        logger.info(f"Scanning networks using {self.scanner.platform_name}")
        return self.grade(self.scanner.scan())

    def inspect(
        self,
        observation: NetworkObservation,
        rank: int = 1,
    ) -> Tuple[GradedNetwork, NetworkAssessment, ScoreBreakdown]:
        """Detailed view of one network: grade, assessment and score breakdown"""
        breakdown = self.calculator.breakdown(observation)
        score = self.scorer(observation)
        graded = GradedNetwork(
            rank=rank,
            observation=observation,
            score=score,
            grade=self.classifier.classify(score),
        )
        return graded, assess_network(observation, score), breakdown

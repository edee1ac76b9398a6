from __future__ import annotations

from abc import ABC, abstractmethod

from ...targets.model import TargetConfig
from ..model import PeriodTotals


class ScoreCalculator(ABC):
    """Calculator interface (Strategy Pattern for achievement scoring)."""

    @abstractmethod
    def component_percentages(self, totals: PeriodTotals, targets: TargetConfig) -> tuple[float, float, float, float]:
        raise NotImplementedError

    @abstractmethod
    def weighted(self, components: tuple[float, float, float, float]) -> float:
        raise NotImplementedError

"""Domain model for generated insights."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Literal

InsightType = Literal["anomaly", "trend", "budget", "recommendation"]
InsightSeverity = Literal["info", "warning", "critical", "positive"]


@dataclass(frozen=True)
class Insight:
    """Discrete finding produced by one of the insight detectors.

    Attributes:
        details: Raw figures the finding was derived from.
        acknowledged: Always False when produced; callers flip it later.
    """

    id: str
    type: InsightType
    title: str
    summary: str
    severity: InsightSeverity
    created_at: datetime
    details: dict[str, Any] = field(default_factory=dict)
    acknowledged: bool = False


__all__ = ["InsightType", "InsightSeverity", "Insight"]

"""Domain models for savings goal projections."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Literal

from .records import Goal


@dataclass(frozen=True)
class GoalProgressPoint:
    """Projected goal balance after a month of contributions."""

    month: int
    balance: Decimal
    date: date


@dataclass(frozen=True)
class GoalSimulation:
    """Month-by-month projection toward a goal.

    ``months_to_target`` and ``estimated_completion`` are None when the goal
    can never be reached with the current contribution.
    """

    goal: Goal
    months_to_target: int | None
    estimated_completion: date | None
    monthly_progress: list[GoalProgressPoint]
    is_achievable: bool


@dataclass(frozen=True)
class GoalProgress:
    percentage: Decimal
    remaining: Decimal
    is_completed: bool


@dataclass(frozen=True)
class GoalRecommendation:
    """Suggested change that would make a goal reachable on time."""

    type: Literal["increase_contribution", "extend_deadline"]
    title: str
    description: str
    new_value: Decimal | date


__all__ = [
    "GoalProgressPoint",
    "GoalSimulation",
    "GoalProgress",
    "GoalRecommendation",
]

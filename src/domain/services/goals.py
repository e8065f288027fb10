"""Domain services for savings goal projections."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
import math

from src.domain.models import (
    Goal,
    GoalProgress,
    GoalProgressPoint,
    GoalRecommendation,
    GoalSimulation,
)
from src.utils.date_utils import add_months, months_between
from src.utils.decimal_utils import ZERO, coerce_decimal

INFINITY = Decimal("Infinity")


def calculate_goal_progress(goal: Goal) -> GoalProgress:
    """Return the completed share of a goal, capped at 100%."""
    target = coerce_decimal(goal.target_amount)
    current = coerce_decimal(goal.current_amount)
    percentage = current / target * 100 if target else Decimal("100")
    return GoalProgress(
        percentage=min(Decimal("100"), percentage),
        remaining=max(ZERO, target - current),
        is_completed=current >= target,
    )


def simulate_goal_progress(
    goal: Goal,
    today: date | None = None,
) -> GoalSimulation:
    """Project monthly contributions until the goal is reached.

    Args:
        goal: Goal to project.
        today: Start of the projection; defaults to today.

    Returns:
        GoalSimulation: Months needed, completion date and the monthly
        progress series. A goal without contributions is not achievable
        and has no completion estimate.
    """
    reference = today or date.today()
    target = coerce_decimal(goal.target_amount)
    contribution = coerce_decimal(goal.monthly_contribution)
    balance = coerce_decimal(goal.current_amount)
    remaining = target - balance

    if remaining <= 0:
        return GoalSimulation(
            goal=goal,
            months_to_target=0,
            estimated_completion=reference,
            monthly_progress=[],
            is_achievable=True,
        )
    if contribution <= 0:
        return GoalSimulation(
            goal=goal,
            months_to_target=None,
            estimated_completion=None,
            monthly_progress=[],
            is_achievable=False,
        )

    months_needed = math.ceil(remaining / contribution)
    progress: list[GoalProgressPoint] = []
    for month in range(1, months_needed + 1):
        balance += contribution
        progress.append(
            GoalProgressPoint(
                month=month,
                balance=min(balance, target),
                date=add_months(reference, month),
            )
        )
        if balance >= target:
            break

    estimated_completion = add_months(reference, months_needed)
    is_achievable = (
        goal.target_date is None or estimated_completion <= goal.target_date
    )
    return GoalSimulation(
        goal=goal,
        months_to_target=months_needed,
        estimated_completion=estimated_completion,
        monthly_progress=progress,
        is_achievable=is_achievable,
    )


def calculate_required_monthly_savings(
    current_amount: Decimal,
    target_amount: Decimal,
    target_date: date,
    today: date | None = None,
) -> Decimal:
    """Return the monthly contribution needed to hit the target on time.

    Infinity is returned when fewer than one full month remains.
    """
    months = months_between(today or date.today(), target_date)
    if months <= 0:
        return INFINITY
    remaining = coerce_decimal(target_amount) - coerce_decimal(current_amount)
    return max(ZERO, remaining / months)


def get_goal_recommendations(
    goal: Goal,
    today: date | None = None,
) -> list[GoalRecommendation]:
    """Suggest how to reach a goal that misses its target date."""
    reference = today or date.today()
    simulation = simulate_goal_progress(goal, today=reference)
    if simulation.is_achievable or goal.target_date is None:
        return []

    recommendations: list[GoalRecommendation] = []
    required = calculate_required_monthly_savings(
        goal.current_amount,
        goal.target_amount,
        goal.target_date,
        today=reference,
    )
    if required.is_finite():
        recommendations.append(
            GoalRecommendation(
                type="increase_contribution",
                title="Increase Monthly Savings",
                description=(
                    f"To reach your goal by "
                    f"{goal.target_date:%b %d, %Y}, increase monthly "
                    f"contribution to {required:.2f}"
                ),
                new_value=required.quantize(
                    Decimal("1"),
                    rounding=ROUND_HALF_UP,
                ),
            )
        )
    if simulation.estimated_completion is not None:
        recommendations.append(
            GoalRecommendation(
                type="extend_deadline",
                title="Extend Target Date",
                description=(
                    f"Keep current contribution and extend target date to "
                    f"{simulation.estimated_completion:%b %d, %Y}"
                ),
                new_value=simulation.estimated_completion,
            )
        )
    return recommendations


__all__ = [
    "calculate_goal_progress",
    "simulate_goal_progress",
    "calculate_required_monthly_savings",
    "get_goal_recommendations",
]

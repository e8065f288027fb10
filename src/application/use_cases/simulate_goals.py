"""Use case to project progress toward every savings goal."""

from datetime import date

from src.application.ports.records_repository import FinancialRecordsPort
from src.domain.models import GoalSimulation
from src.domain.services.goals import simulate_goal_progress
from src.infrastructure.logging.logger import get_app_logger


class SimulateGoalsUseCase:
    """Simulate monthly contributions for each goal of a user."""

    def __init__(
        self,
        records_repository: FinancialRecordsPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing the user's records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> list[GoalSimulation]:
        """Return one simulation per goal, in repository order."""
        goals = self._records_repository.fetch_goals()
        simulations = [
            simulate_goal_progress(goal, today=today) for goal in goals
        ]
        unreachable = [
            simulation.goal.id
            for simulation in simulations
            if not simulation.is_achievable
        ]
        if unreachable:
            self._logger.warning(
                f"Goals not achievable with current contributions: "
                f"{', '.join(unreachable)}"
            )
        self._logger.info(f"Simulated {len(simulations)} goals")
        return simulations


__all__ = ["SimulateGoalsUseCase", "GoalSimulation"]

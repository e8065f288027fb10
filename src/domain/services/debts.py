"""Domain services for debt amortization and payoff strategies.

Every simulation stops after ``MAX_SIMULATION_MONTHS`` months. Reaching the
ceiling with a balance left is reported through ``paid_off=False``; callers
must read it as "not payable under the current plan".
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import MAX_SIMULATION_MONTHS
from src.domain.models import (
    Debt,
    DebtPayment,
    DebtPayoffSimulation,
    DebtPayoffStrategy,
    PayoffScheduleEntry,
    StrategyComparison,
    StrategyDebtMonth,
    StrategyMonth,
    StrategyName,
)
from src.utils.decimal_utils import ZERO, coerce_decimal


def calculate_debt_payment(
    balance: Decimal,
    interest_rate: Decimal,
    payment: Decimal,
) -> DebtPayment:
    """Split one monthly payment between interest and principal.

    Args:
        balance: Balance at the start of the month.
        interest_rate: Annual interest rate as a fraction.
        payment: Amount paid this month.

    Returns:
        DebtPayment: Interest accrued, principal repaid (between zero and
        the balance) and the balance left.
    """
    interest = balance * (coerce_decimal(interest_rate) / 12)
    principal_paid = max(ZERO, min(payment - interest, balance))
    return DebtPayment(
        interest=interest,
        principal_paid=principal_paid,
        remaining_balance=max(ZERO, balance - principal_paid),
    )


def simulate_debt_payoff(
    debt: Debt,
    extra_payment: Decimal = ZERO,
    max_months: int = MAX_SIMULATION_MONTHS,
) -> DebtPayoffSimulation:
    """Amortize a single debt month by month.

    Args:
        debt: Debt to repay.
        extra_payment: Amount paid on top of the minimum payment each month.
        max_months: Iteration ceiling.

    Returns:
        DebtPayoffSimulation: Monthly schedule and totals. ``paid_off`` is
        False when the ceiling was reached with a balance left.
    """
    balance = coerce_decimal(debt.current_balance)
    payment = coerce_decimal(debt.minimum_payment) + coerce_decimal(
        extra_payment
    )
    schedule: list[PayoffScheduleEntry] = []
    total_interest = ZERO
    month = 0

    while balance > 0 and month < max_months:
        month += 1
        result = calculate_debt_payment(balance, debt.interest_rate, payment)
        total_interest += result.interest
        balance = result.remaining_balance
        schedule.append(
            PayoffScheduleEntry(
                month=month,
                payment=result.principal_paid + result.interest,
                principal=result.principal_paid,
                interest=result.interest,
                balance=balance,
            )
        )

    return DebtPayoffSimulation(
        months=month,
        total_interest=total_interest,
        total_paid=sum((entry.payment for entry in schedule), ZERO),
        final_balance=balance,
        paid_off=balance <= 0,
        schedule=schedule,
    )


def simulate_snowball_strategy(
    debts: Sequence[Debt],
    extra_payment: Decimal = ZERO,
) -> DebtPayoffStrategy:
    """Simulate paying the smallest balance first."""
    ordered = sorted(
        debts,
        key=lambda debt: coerce_decimal(debt.current_balance),
    )
    return _simulate_strategy(
        ordered,
        coerce_decimal(extra_payment),
        "snowball",
    )


def simulate_avalanche_strategy(
    debts: Sequence[Debt],
    extra_payment: Decimal = ZERO,
) -> DebtPayoffStrategy:
    """Simulate paying the highest interest rate first."""
    ordered = sorted(
        debts,
        key=lambda debt: coerce_decimal(debt.interest_rate),
        reverse=True,
    )
    return _simulate_strategy(
        ordered,
        coerce_decimal(extra_payment),
        "avalanche",
    )


def compare_strategies(
    debts: Sequence[Debt],
    extra_payment: Decimal = ZERO,
) -> StrategyComparison:
    """Run both strategies with the same extra payment and compare them.

    Returns:
        StrategyComparison: Both simulations, the snowball-minus-avalanche
        interest difference and the recommended strategy (avalanche when it
        saves interest, snowball otherwise).
    """
    snowball = simulate_snowball_strategy(debts, extra_payment)
    avalanche = simulate_avalanche_strategy(debts, extra_payment)
    savings = snowball.total_interest_paid - avalanche.total_interest_paid
    return StrategyComparison(
        snowball=snowball,
        avalanche=avalanche,
        recommendation="avalanche" if savings > 0 else "snowball",
        savings=savings,
    )


def _simulate_strategy(
    ordered: list[Debt],
    extra_payment: Decimal,
    strategy: StrategyName,
) -> DebtPayoffStrategy:
    # Priority order is fixed up front; paid-off debts simply drop out.
    balances = [coerce_decimal(debt.current_balance) for debt in ordered]
    schedule: list[StrategyMonth] = []
    total_interest = ZERO
    month = 0

    while any(balance > 0 for balance in balances) and (
        month < MAX_SIMULATION_MONTHS
    ):
        month += 1
        target = next(
            index for index, balance in enumerate(balances) if balance > 0
        )
        entries: list[StrategyDebtMonth] = []
        for index, debt in enumerate(ordered):
            if balances[index] <= 0:
                entries.append(
                    StrategyDebtMonth(
                        id=debt.id,
                        name=debt.name,
                        balance=ZERO,
                        payment=ZERO,
                    )
                )
                continue
            payment = coerce_decimal(debt.minimum_payment)
            if index == target:
                payment += extra_payment
            result = calculate_debt_payment(
                balances[index],
                debt.interest_rate,
                payment,
            )
            total_interest += result.interest
            balances[index] = result.remaining_balance
            entries.append(
                StrategyDebtMonth(
                    id=debt.id,
                    name=debt.name,
                    balance=result.remaining_balance,
                    payment=payment,
                )
            )
        schedule.append(StrategyMonth(month=month, debts=entries))

    return DebtPayoffStrategy(
        strategy=strategy,
        debts=list(ordered),
        extra_payment=extra_payment,
        months_to_payoff=month,
        total_interest_paid=total_interest,
        paid_off=all(balance <= 0 for balance in balances),
        schedule=schedule,
    )


__all__ = [
    "calculate_debt_payment",
    "simulate_debt_payoff",
    "simulate_snowball_strategy",
    "simulate_avalanche_strategy",
    "compare_strategies",
]

"""Tests for the debt payoff simulator."""

from decimal import Decimal

import pytest

from src.domain.constants import MAX_SIMULATION_MONTHS
from src.domain.models import Debt
from src.domain.services.debts import (
    calculate_debt_payment,
    compare_strategies,
    simulate_avalanche_strategy,
    simulate_debt_payoff,
    simulate_snowball_strategy,
)


def _debt(debt_id: str, balance: str, rate: str, minimum: str) -> Debt:
    return Debt(
        id=debt_id,
        name=debt_id.upper(),
        current_balance=Decimal(balance),
        interest_rate=Decimal(rate),
        minimum_payment=Decimal(minimum),
    )


def test_payment_splits_interest_and_principal() -> None:
    result = calculate_debt_payment(
        Decimal("1000"),
        Decimal("0.12"),
        Decimal("100"),
    )

    assert result.interest == Decimal("10")
    assert result.principal_paid == Decimal("90")
    assert result.remaining_balance == Decimal("910")


def test_payment_never_repays_more_than_balance() -> None:
    result = calculate_debt_payment(Decimal("50"), Decimal("0"), Decimal("80"))

    assert result.principal_paid == Decimal("50")
    assert result.remaining_balance == 0


def test_payoff_converges_when_payment_exceeds_interest() -> None:
    """Payments above the monthly interest must reach exactly zero."""
    simulation = simulate_debt_payoff(_debt("card", "1000", "0.12", "100"))

    assert simulation.paid_off is True
    assert simulation.final_balance == 0
    assert simulation.months < MAX_SIMULATION_MONTHS
    assert simulation.schedule[-1].balance == 0
    assert simulation.schedule[0].interest == Decimal("10")
    assert simulation.schedule[0].principal == Decimal("90")
    assert simulation.months == len(simulation.schedule)


def test_extra_payment_shortens_payoff() -> None:
    debt = _debt("card", "1000", "0.12", "100")

    baseline = simulate_debt_payoff(debt)
    accelerated = simulate_debt_payoff(debt, extra_payment=Decimal("100"))

    assert accelerated.months < baseline.months
    assert accelerated.total_interest < baseline.total_interest


def test_zero_rate_payoff_totals() -> None:
    simulation = simulate_debt_payoff(_debt("loan", "300", "0", "100"))

    assert simulation.months == 3
    assert simulation.total_interest == 0
    assert simulation.total_paid == Decimal("300")


@pytest.mark.parametrize("minimum", ["10", "5", "0"])
def test_payoff_hits_ceiling_when_payment_does_not_cover_interest(
    minimum: str,
) -> None:
    """Non-convergence is reported, never silently truncated."""
    simulation = simulate_debt_payoff(_debt("card", "1000", "0.12", minimum))

    assert simulation.months == MAX_SIMULATION_MONTHS
    assert simulation.final_balance > 0
    assert simulation.paid_off is False


def test_paid_debt_needs_no_months() -> None:
    simulation = simulate_debt_payoff(_debt("done", "0", "0.2", "50"))

    assert simulation.months == 0
    assert simulation.paid_off is True
    assert simulation.schedule == []


def test_strategies_order_debts() -> None:
    debts = [
        _debt("b", "2000", "0.20", "60"),
        _debt("a", "500", "0.05", "25"),
        _debt("c", "1000", "0.10", "30"),
    ]

    snowball = simulate_snowball_strategy(debts)
    avalanche = simulate_avalanche_strategy(debts)

    assert [debt.id for debt in snowball.debts] == ["a", "c", "b"]
    assert [debt.id for debt in avalanche.debts] == ["b", "c", "a"]


def test_extra_goes_to_first_remaining_debt_only() -> None:
    """Paid-off debts drop out and never receive the extra payment."""
    debts = [
        _debt("big", "1000", "0", "10"),
        _debt("small", "100", "0", "10"),
    ]

    result = simulate_snowball_strategy(debts, Decimal("100"))

    first, second = result.schedule[0], result.schedule[1]
    assert [(d.id, d.payment, d.balance) for d in first.debts] == [
        ("small", Decimal("110"), Decimal("0")),
        ("big", Decimal("10"), Decimal("990")),
    ]
    assert [(d.id, d.payment, d.balance) for d in second.debts] == [
        ("small", Decimal("0"), Decimal("0")),
        ("big", Decimal("110"), Decimal("880")),
    ]
    assert result.months_to_payoff == 10
    assert result.total_interest_paid == 0
    assert result.paid_off is True


def test_priority_order_is_fixed_from_initial_sort() -> None:
    """Extra keeps going to the first debt even after balances cross."""
    debts = [
        _debt("x", "200", "0", "0"),
        _debt("y", "300", "0", "250"),
    ]

    result = simulate_snowball_strategy(debts, Decimal("10"))

    second = {entry.id: entry for entry in result.schedule[1].debts}
    assert second["x"].payment == Decimal("10")
    assert second["x"].balance == Decimal("180")
    assert second["y"].balance == 0


def test_strategy_reports_non_convergence() -> None:
    result = simulate_avalanche_strategy([_debt("card", "1000", "0.12", "10")])

    assert result.months_to_payoff == MAX_SIMULATION_MONTHS
    assert result.paid_off is False


@pytest.mark.parametrize(
    "debts, extra",
    [
        (
            [
                ("b", "2000", "0.20", "60"),
                ("a", "500", "0.05", "25"),
                ("c", "1000", "0.10", "30"),
            ],
            "100",
        ),
        (
            [
                ("car", "8000", "0.06", "200"),
                ("card", "3000", "0.24", "90"),
            ],
            "150",
        ),
        (
            [
                ("one", "1200", "0.18", "50"),
                ("two", "900", "0.09", "40"),
                ("three", "4000", "0.15", "120"),
            ],
            "75",
        ),
    ],
)
def test_avalanche_never_pays_more_interest(debts, extra) -> None:
    """Interest-first ordering minimizes the interest paid."""
    comparison = compare_strategies(
        [_debt(*row) for row in debts],
        Decimal(extra),
    )

    assert (
        comparison.avalanche.total_interest_paid
        <= comparison.snowball.total_interest_paid
    )
    assert comparison.savings == (
        comparison.snowball.total_interest_paid
        - comparison.avalanche.total_interest_paid
    )


def test_comparison_recommends_avalanche_when_it_saves() -> None:
    debts = [
        _debt("b", "2000", "0.20", "60"),
        _debt("a", "500", "0.05", "25"),
    ]

    comparison = compare_strategies(debts, Decimal("100"))

    assert comparison.savings > 0
    assert comparison.recommendation == "avalanche"
    assert comparison.snowball.extra_payment == Decimal("100")
    assert comparison.avalanche.extra_payment == Decimal("100")


def test_comparison_defaults_to_snowball_without_savings() -> None:
    debts = [
        _debt("a", "500", "0", "50"),
        _debt("b", "900", "0", "50"),
    ]

    comparison = compare_strategies(debts, Decimal("20"))

    assert comparison.savings == 0
    assert comparison.recommendation == "snowball"

"""
Tests for equal-split balances and settlement transfers.
"""
import random
from decimal import Decimal

import pytest

from app.services.ledger_service import split_equally, minimize_transfers

D = Decimal


def _apply(balances, transfers):
    """Apply transfers to a {id: balance} mapping."""
    remaining = dict(balances)
    for t in transfers:
        remaining[t.from_id] += t.amount
        remaining[t.to_id] -= t.amount
    return remaining


def test_two_participants_one_expense():
    total, balances = split_equally([(1, "A"), (2, "B")], [(1, D("100"))])

    assert total == D("100.00")
    assert [(b.participant_id, b.total_paid, b.balance) for b in balances] == [
        (1, D("100.00"), D("50.00")),
        (2, D("0.00"), D("-50.00")),
    ]

    transfers = minimize_transfers([(b.participant_id, b.balance) for b in balances])
    assert [(t.from_id, t.to_id, t.amount) for t in transfers] == [(2, 1, D("50.00"))]


def test_rounding_residual_goes_to_first_creditor():
    participants = [(101, "Juan"), (102, "Maria"), (103, "Carlos")]
    payments = [(101, D("75.00")), (102, D("90.00")), (103, D("125.00"))]

    total, balances = split_equally(participants, payments)

    assert total == D("290.00")
    assert [b.balance for b in balances] == [D("-21.67"), D("-6.67"), D("28.34")]
    assert sum(b.balance for b in balances) == 0


def test_one_creditor_owed_by_two_debtors():
    participants = [(1, "A"), (2, "B"), (3, "C")]
    _, balances = split_equally(participants, [(3, D("90")), (1, D("10"))])

    transfers = minimize_transfers([(b.participant_id, b.balance) for b in balances])

    creditor = next(b for b in balances if b.balance > 0)
    assert len(transfers) == 2
    assert all(t.to_id == creditor.participant_id for t in transfers)
    assert sum(t.amount for t in transfers) == creditor.balance


def test_zero_expenses():
    total, balances = split_equally([(1, "A"), (2, "B")], [])

    assert total == 0
    assert all(b.balance == 0 and b.total_paid == 0 for b in balances)
    assert minimize_transfers([(b.participant_id, b.balance) for b in balances]) == []


def test_no_participants():
    total, balances = split_equally([], [])
    assert total == 0
    assert balances == []
    assert minimize_transfers([]) == []


def test_largest_debtor_pays_largest_creditor_first():
    transfers = minimize_transfers([(1, D("10")), (2, D("-30")), (3, D("25")), (4, D("-5"))])

    assert [(t.from_id, t.to_id, t.amount) for t in transfers] == [
        (2, 3, D("25")),
        (2, 1, D("5")),
        (4, 1, D("5")),
    ]


def test_largest_remaining_debtor_is_chosen_after_partial_transfer():
    transfers = minimize_transfers([(1, D("50")), (2, D("40")), (3, D("-60")), (4, D("-30"))])

    assert [(t.from_id, t.to_id, t.amount) for t in transfers] == [
        (3, 1, D("50")),
        (4, 2, D("30")),
        (3, 2, D("10")),
    ]


def test_ties_keep_input_order():
    _, balances = split_equally(
        [(1, "A"), (2, "B"), (3, "C"), (4, "D")],
        [(1, D("100")), (2, D("100"))],
    )
    transfers = minimize_transfers([(b.participant_id, b.balance) for b in balances])

    assert [(t.from_id, t.to_id, t.amount) for t in transfers] == [
        (3, 1, D("50.00")),
        (4, 2, D("50.00")),
    ]


@pytest.mark.parametrize("seed", range(25))
def test_settlement_properties(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 8)
    participants = [(i, f"P{i}") for i in range(1, n + 1)]
    payments = [
        (rng.randint(1, n), D(rng.randint(1, 100000)) / 100)
        for _ in range(rng.randint(0, 15))
    ]

    total, balances = split_equally(participants, payments)
    as_pairs = [(b.participant_id, b.balance) for b in balances]
    transfers = minimize_transfers(as_pairs)

    # balances sum to zero and follow the equal split up to rounding
    assert sum(b.balance for b in balances) == 0
    for b in balances:
        assert abs(b.balance - (b.total_paid - total / n)) <= D("0.01") * n

    # transfers settle everything, minimal count bound, all positive
    assert all(value == 0 for value in _apply(dict(as_pairs), transfers).values())
    assert len(transfers) <= n - 1
    assert all(t.amount > 0 for t in transfers)
    assert sum(t.amount for t in transfers) == sum(b.balance for b in balances if b.balance > 0)

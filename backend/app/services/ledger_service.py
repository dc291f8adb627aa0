"""
Ledger service: equal-split balances and settlement calculation.

Balances follow an equal-split model: every participant owes
``total / participant_count`` (rounded to cents) and is credited with
what they paid.  Any rounding residual is moved onto a single participant
so that balances always sum to exactly zero.
"""
import heapq
import logging
from typing import Dict, Iterable, List, Tuple
from decimal import Decimal
from app.core.utils import to_money
from app.models.trip import Trip
from app.schemas.settlement import (
    ParticipantSummary, TripSummary, PaymentInstruction, TripSettlement
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class ParticipantBalance:
    """Amount paid and net balance of one participant."""
    def __init__(self, participant_id: int, name: str, total_paid: Decimal, balance: Decimal):
        self.participant_id = participant_id
        self.name = name
        self.total_paid = total_paid
        self.balance = balance


class Transfer:
    """Represents a single transfer from a debtor to a creditor."""
    def __init__(self, from_id: int, to_id: int, amount: Decimal):
        self.from_id = from_id
        self.to_id = to_id
        self.amount = amount

    def __repr__(self) -> str:
        return f"Transfer({self.from_id} -> {self.to_id}: {self.amount})"


def split_equally(
    participants: List[Tuple[int, str]],
    payments: Iterable[Tuple[int, Decimal]],
) -> Tuple[Decimal, List[ParticipantBalance]]:
    """
    Compute per-participant balances under an equal split.

    Args:
        participants: (participant_id, name) pairs, in display order
        payments: (payer_id, amount) pairs, one per expense

    Returns:
        Total amount and one ParticipantBalance per participant, in the
        order given.
    """
    total = ZERO
    paid: Dict[int, Decimal] = {}
    for payer_id, amount in payments:
        amount = to_money(amount)
        total += amount
        paid[payer_id] = paid.get(payer_id, ZERO) + amount

    if not participants:
        return total, []

    fair_share = to_money(total / len(participants))

    balances = []
    for participant_id, name in participants:
        total_paid = paid.get(participant_id, ZERO)
        balances.append(ParticipantBalance(
            participant_id, name, total_paid, total_paid - fair_share
        ))

    # Rounding adjustment: push the residual onto the first creditor (or the first participant)
    residual = sum((b.balance for b in balances), ZERO)
    if residual != 0:
        target = next((b for b in balances if b.balance > 0), balances[0])
        target.balance -= residual
        logger.debug(
            "Moved rounding residual %s onto participant %s", residual, target.participant_id
        )

    return total, balances


def minimize_transfers(balances: List[tuple]) -> List[Transfer]:
    """
    Minimize the number of transfers needed to settle debts.

    Greedy: repeatedly pair the largest remaining debtor with the largest
    remaining creditor.  Ties go to the participant listed first.
    Produces at most ``len(balances) - 1`` transfers.
    """
    # Heaps keyed on (-amount, input position): the largest amount pops first
    creditors = [(-bal, pos, pid) for pos, (pid, bal) in enumerate(balances) if bal > 0]
    debtors = [(bal, pos, pid) for pos, (pid, bal) in enumerate(balances) if bal < 0]
    heapq.heapify(creditors)
    heapq.heapify(debtors)

    transfers = []

    while creditors and debtors:
        neg_credit, cred_pos, creditor_id = heapq.heappop(creditors)
        neg_debt, debt_pos, debtor_id = heapq.heappop(debtors)
        cred_amount = -neg_credit
        debt_amount = -neg_debt

        # Transfer the minimum of what's owed and what's needed
        transfer_amount = min(cred_amount, debt_amount)
        transfers.append(Transfer(debtor_id, creditor_id, transfer_amount))

        if cred_amount > transfer_amount:
            heapq.heappush(creditors, (transfer_amount - cred_amount, cred_pos, creditor_id))
        if debt_amount > transfer_amount:
            heapq.heappush(debtors, (transfer_amount - debt_amount, debt_pos, debtor_id))

    return transfers


def _trip_balances(trip: Trip) -> Tuple[Decimal, List[ParticipantBalance]]:
    participants = [(p.id, p.name) for p in trip.participants]
    payments = [(e.payer_id, e.amount) for e in trip.expenses]
    return split_equally(participants, payments)


def build_summary(trip: Trip) -> TripSummary:
    """Build the summary (total and per-participant balances) of a trip."""
    total, balances = _trip_balances(trip)
    return TripSummary(
        trip_id=trip.id,
        trip_name=trip.name,
        currency=trip.currency,
        total_amount=total,
        participants=[
            ParticipantSummary(
                id=b.participant_id,
                name=b.name,
                total_paid=b.total_paid,
                balance=b.balance,
            )
            for b in balances
        ],
    )


def build_settlement(trip: Trip) -> TripSettlement:
    """Build the list of transfers that settles every balance of a trip."""
    _, balances = _trip_balances(trip)
    names = {b.participant_id: b.name for b in balances}
    transfers = minimize_transfers([(b.participant_id, b.balance) for b in balances])

    logger.info(
        "Settlement for trip %s: %d participants, %d transfers",
        trip.id, len(balances), len(transfers)
    )

    return TripSettlement(
        trip_id=trip.id,
        trip_name=trip.name,
        currency=trip.currency,
        payments=[
            PaymentInstruction(
                payer_id=t.from_id,
                payer_name=names.get(t.from_id, ""),
                receiver_id=t.to_id,
                receiver_name=names.get(t.to_id, ""),
                amount=t.amount,
            )
            for t in transfers
        ],
    )

"""Per-company timeline of orders and notes for the detail view."""
from __future__ import annotations

from typing import Iterable, List

from stoneledger.core.models import Note, Order, TimelineEvent


def company_timeline(
    company_id: str, orders: Iterable[Order], notes: Iterable[Note]
) -> List[TimelineEvent]:
    """Return the company's orders and notes, newest first.

    Events with the same date keep orders ahead of notes, each in input order.
    """

    events = [
        TimelineEvent(
            id=f"order-{order.id}",
            company_id=order.company_id,
            event_type="order",
            event_at=order.start_date,
            summary=order.order_name,
            reference_id=order.id,
        )
        for order in orders
        if order.company_id == company_id
    ]
    events.extend(
        TimelineEvent(
            id=f"note-{note.id}",
            company_id=note.company_id,
            event_type="note",
            event_at=note.date,
            summary=note.content,
            reference_id=note.id,
        )
        for note in notes
        if note.company_id == company_id
    )
    return sorted(events, key=lambda event: event.event_at, reverse=True)

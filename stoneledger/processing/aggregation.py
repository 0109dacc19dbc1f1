"""Company rollup derived from the order stream."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List

from stoneledger.core.models import Company, Order


@dataclass
class _CompanyTotals:
    name: str
    order_count: int
    total_value_cents: int
    last_order_date: str


def aggregate_companies(orders: Iterable[Order]) -> List[Company]:
    """Fold orders into one :class:`Company` per company id.

    The display name is the first one seen for an id, ``last_order_date`` is
    the greatest ``start_date`` compared as text, and the result is sorted by
    total value, highest first. The sort is stable, so companies with equal
    totals stay in first-seen order.
    """

    totals: Dict[str, _CompanyTotals] = {}
    for order in orders:
        existing = totals.get(order.company_id)
        if existing is None:
            totals[order.company_id] = _CompanyTotals(
                name=order.company_name,
                order_count=1,
                total_value_cents=order.value_cents,
                last_order_date=order.start_date,
            )
            continue
        existing.order_count += 1
        existing.total_value_cents += order.value_cents
        if order.start_date > existing.last_order_date:
            existing.last_order_date = order.start_date

    companies = [
        Company(
            id=identifier,
            name=entry.name,
            order_count=entry.order_count,
            total_value_cents=entry.total_value_cents,
            last_order_date=entry.last_order_date,
        )
        for identifier, entry in totals.items()
    ]
    return sorted(companies, key=lambda company: company.total_value_cents, reverse=True)

"""Data models for the records rebuilt from the spreadsheet on every fetch."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


def _camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _camelize(values: Dict[str, Any]) -> Dict[str, Any]:
    return {_camel_case(key): value for key, value in values.items()}


@dataclass(frozen=True)
class Order:
    """A unit of purchased work read from the orders sheet."""

    id: str
    company_id: str
    company_name: str
    order_name: str = ""
    value_cents: int = 0
    clickup_link: str = ""
    start_date: str = ""
    due_date: str = ""
    turnaround_days: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Return the camelCase mapping served to the dashboard."""

        return _camelize(asdict(self))


@dataclass(frozen=True)
class Contact:
    """A person associated with a company."""

    id: str
    company_id: str
    company_name: str
    first_name: str = ""
    last_name: str = ""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    phone_raw: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _camelize(asdict(self))


@dataclass(frozen=True)
class Note:
    """A dated activity entry tied to a company."""

    id: str
    company_id: str
    company_name: str
    contact: str = ""
    date: str = ""
    author: str = ""
    content: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return _camelize(asdict(self))


@dataclass(frozen=True)
class Company:
    """Rollup of every order that references the same company id."""

    id: str
    name: str
    order_count: int
    total_value_cents: int
    last_order_date: str

    def to_dict(self) -> Dict[str, Any]:
        return _camelize(asdict(self))


@dataclass(frozen=True)
class TimelineEvent:
    """An order or a note placed on a company's timeline."""

    id: str
    company_id: str
    event_type: str
    event_at: str
    summary: str
    reference_id: str

    def to_dict(self) -> Dict[str, Any]:
        return _camelize(asdict(self))


@dataclass(frozen=True)
class DashboardData:
    """Everything one pipeline run hands to the presentation layer."""

    companies: List[Company] = field(default_factory=list)
    orders: List[Order] = field(default_factory=list)
    contacts: List[Contact] = field(default_factory=list)
    notes: List[Note] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-serializable payload ``{companies, orders, contacts, notes}``."""

        return {
            "companies": [company.to_dict() for company in self.companies],
            "orders": [order.to_dict() for order in self.orders],
            "contacts": [contact.to_dict() for contact in self.contacts],
            "notes": [note.to_dict() for note in self.notes],
        }

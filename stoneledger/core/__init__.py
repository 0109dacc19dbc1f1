"""Core building blocks for the stoneledger package."""
from stoneledger.core.errors import ConfigurationError, SourceFetchError
from stoneledger.core.ids import company_id, generate_id
from stoneledger.core.logging import configure_logging
from stoneledger.core.models import Company, Contact, DashboardData, Note, Order, TimelineEvent

__all__ = [
    "Company",
    "ConfigurationError",
    "Contact",
    "DashboardData",
    "Note",
    "Order",
    "SourceFetchError",
    "TimelineEvent",
    "company_id",
    "configure_logging",
    "generate_id",
]

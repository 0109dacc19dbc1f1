"""Tabular layouts used when exporting the dashboard payload to spreadsheets."""
from typing import Any, Dict, Iterable, List

from stoneledger.core.models import Company, Contact, DashboardData, Note, Order


COMPANY_HEADERS = ["Company_ID", "Company", "Orders", "Total_Value", "Last_Order_Date"]
ORDER_HEADERS = [
    "Order_ID",
    "Company_ID",
    "Company",
    "Order",
    "Value",
    "ClickUp_Link",
    "Start_Date",
    "Due_Date",
    "Turnaround_Days",
]
CONTACT_HEADERS = [
    "Contact_ID",
    "Company_ID",
    "Company",
    "First_Name",
    "Last_Name",
    "Full_Name",
    "Email",
    "Phone",
    "Phone_Raw",
]
NOTE_HEADERS = ["Note_ID", "Company_ID", "Company", "Contact", "Date", "Author", "Content"]


def format_cents(value: int) -> str:
    """Render integer cents as a plain two-decimal amount, e.g. ``1234.50``."""

    return f"{value // 100}.{value % 100:02d}"


def _clean_text(value: str) -> str:
    return " ".join(value.split())


def company_to_row(company: Company) -> Dict[str, Any]:
    return {
        "Company_ID": company.id,
        "Company": company.name,
        "Orders": company.order_count,
        "Total_Value": format_cents(company.total_value_cents),
        "Last_Order_Date": company.last_order_date,
    }


def order_to_row(order: Order) -> Dict[str, Any]:
    return {
        "Order_ID": order.id,
        "Company_ID": order.company_id,
        "Company": order.company_name,
        "Order": order.order_name,
        "Value": format_cents(order.value_cents),
        "ClickUp_Link": order.clickup_link,
        "Start_Date": order.start_date,
        "Due_Date": order.due_date,
        "Turnaround_Days": order.turnaround_days,
    }


def contact_to_row(contact: Contact) -> Dict[str, Any]:
    return {
        "Contact_ID": contact.id,
        "Company_ID": contact.company_id,
        "Company": contact.company_name,
        "First_Name": contact.first_name,
        "Last_Name": contact.last_name,
        "Full_Name": contact.full_name,
        "Email": contact.email,
        "Phone": contact.phone,
        "Phone_Raw": contact.phone_raw,
    }


def note_to_row(note: Note) -> Dict[str, Any]:
    return {
        "Note_ID": note.id,
        "Company_ID": note.company_id,
        "Company": note.company_name,
        "Contact": note.contact,
        "Date": note.date,
        "Author": note.author,
        "Content": _clean_text(note.content),
    }


def _rows(records: Iterable[Any], convert) -> List[Dict[str, Any]]:
    return [convert(record) for record in records]


def dashboard_to_tables(data: DashboardData) -> Dict[str, tuple[List[str], List[Dict[str, Any]]]]:
    """Return ``{sheet title: (headers, rows)}`` for every collection in the payload."""

    return {
        "companies": (COMPANY_HEADERS, _rows(data.companies, company_to_row)),
        "orders": (ORDER_HEADERS, _rows(data.orders, order_to_row)),
        "contacts": (CONTACT_HEADERS, _rows(data.contacts, contact_to_row)),
        "notes": (NOTE_HEADERS, _rows(data.notes, note_to_row)),
    }

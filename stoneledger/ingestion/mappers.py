"""Row mappers that turn raw sheet rows into typed records.

Every row is mapped in full before the required fields are checked, and the
surviving records keep the relative order of their source rows.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional, Sequence

from stoneledger.core.ids import company_id, generate_id
from stoneledger.core.models import Contact, Note, Order
from stoneledger.ingestion.common import clean_cell, parse_currency, parse_date, parse_days
from stoneledger.ingestion.schemas import (
    CONTACT_COLUMNS_FINAL_LIST,
    NOTE_COLUMNS,
    ORDER_COLUMNS,
    ColumnSchema,
)

NOTE_KEY_CONTENT_CHARS = 50

logger = logging.getLogger(__name__)

Row = Sequence[Any]


def order_from_row(row: Row, schema: ColumnSchema = ORDER_COLUMNS) -> Order:
    """Map one orders row; the company name may come back empty."""

    cells = schema.bind(row)
    company = clean_cell(cells.get("company"))
    order_name = clean_cell(cells.get("order_name"))
    link = clean_cell(cells.get("link"))
    return Order(
        id=generate_id(link or order_name),
        company_id=company_id(company),
        company_name=company,
        order_name=order_name,
        value_cents=parse_currency(cells.get("value")),
        clickup_link=link,
        start_date=parse_date(cells.get("start_date")),
        due_date=parse_date(cells.get("due_date")),
        turnaround_days=parse_days(cells.get("turnaround_days")),
    )


def _contact_key(
    natural_id: str, email: str, phone: str, company: str, full_name: str
) -> str:
    if natural_id:
        return natural_id
    if email:
        return generate_id(email)
    if phone:
        return generate_id(phone)
    return generate_id(f"{company}|{full_name}")


def contact_from_row(row: Row, schema: ColumnSchema = CONTACT_COLUMNS_FINAL_LIST) -> Contact:
    """Map one contacts row, filling the full name and id from the other fields."""

    cells = schema.bind(row)
    company = clean_cell(cells.get("company"))
    first_name = clean_cell(cells.get("first_name"))
    last_name = clean_cell(cells.get("last_name"))
    full_name = clean_cell(cells.get("full_name")) or f"{first_name} {last_name}".strip()
    email = clean_cell(cells.get("email"))
    phone = clean_cell(cells.get("phone"))
    phone_raw = clean_cell(cells.get("phone_raw")) or phone
    return Contact(
        id=_contact_key(clean_cell(cells.get("id")), email, phone, company, full_name),
        company_id=company_id(company),
        company_name=company,
        first_name=first_name,
        last_name=last_name,
        full_name=full_name,
        email=email,
        phone=phone,
        phone_raw=phone_raw,
    )


def note_from_row(row: Row, schema: ColumnSchema = NOTE_COLUMNS) -> Note:
    """Map one notes row; falls back to a key built from company, date and content."""

    cells = schema.bind(row)
    company = clean_cell(cells.get("company"))
    date = parse_date(cells.get("date"))
    content = clean_cell(cells.get("content"))
    natural_id = clean_cell(cells.get("id"))
    return Note(
        id=natural_id
        or generate_id(f"{company}|{date}|{content[:NOTE_KEY_CONTENT_CHARS]}"),
        company_id=company_id(company),
        company_name=company,
        contact=clean_cell(cells.get("contact")),
        date=date,
        author=clean_cell(cells.get("author")),
        content=content,
    )


def _log_dropped(entity: str, total: int, kept: int) -> None:
    if total != kept:
        logger.debug("Dropped %d of %d %s rows missing required fields", total - kept, total, entity)


def map_orders(rows: Iterable[Row], schema: Optional[ColumnSchema] = None) -> List[Order]:
    """Map order rows, keeping only orders that name a company."""

    mapped = [order_from_row(row, schema or ORDER_COLUMNS) for row in rows]
    orders = [order for order in mapped if order.company_name]
    _log_dropped("orders", len(mapped), len(orders))
    return orders


def map_contacts(rows: Iterable[Row], schema: Optional[ColumnSchema] = None) -> List[Contact]:
    """Map contact rows, keeping only contacts that name a company."""

    mapped = [contact_from_row(row, schema or CONTACT_COLUMNS_FINAL_LIST) for row in rows]
    contacts = [contact for contact in mapped if contact.company_name]
    _log_dropped("contacts", len(mapped), len(contacts))
    return contacts


def map_notes(rows: Iterable[Row], schema: Optional[ColumnSchema] = None) -> List[Note]:
    """Map note rows, keeping only notes with both a company and content."""

    mapped = [note_from_row(row, schema or NOTE_COLUMNS) for row in rows]
    notes = [note for note in mapped if note.company_name and note.content]
    _log_dropped("notes", len(mapped), len(notes))
    return notes

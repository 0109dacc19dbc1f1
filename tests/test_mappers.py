"""Row mappers normalize every row and drop the ones missing required fields."""
from stoneledger.core.ids import company_id, generate_id
from stoneledger.ingestion.mappers import (
    contact_from_row,
    map_contacts,
    map_notes,
    map_orders,
    order_from_row,
)
from stoneledger.ingestion.schemas import (
    CONTACT_COLUMNS_DIRECTORY,
    ORDER_COLUMNS_WITH_TURNAROUND,
)


def test_order_from_row_normalizes_every_field() -> None:
    order = order_from_row(["  Acme Inc ", "$1,234.50", "Order1", "http://x", "3/4/24", "12/25/2023"])

    assert order.id == "27qamy"
    assert order.company_id == company_id("Acme Inc")
    assert order.company_name == "Acme Inc"
    assert order.order_name == "Order1"
    assert order.value_cents == 123450
    assert order.clickup_link == "http://x"
    assert order.start_date == "2024-03-04"
    assert order.due_date == "2023-12-25"
    assert order.turnaround_days == 0


def test_order_id_falls_back_to_order_name_without_link() -> None:
    order = order_from_row(["acme inc", 50, "Order2", "", "1/5/24", "1/12/24"])

    assert order.id == "vu1cu4"
    assert order.value_cents == 5000


def test_map_orders_drops_rows_without_company_and_keeps_order(order_rows) -> None:
    orders = map_orders(order_rows)

    assert [order.order_name for order in orders] == ["Order1", "Order2", "Gravel run"]
    assert all(order.company_name for order in orders)


def test_map_orders_tolerates_short_and_malformed_rows() -> None:
    orders = map_orders([["Acme"], ["Globex", "lots", None, None, "sometime"], [], [None, 5]])

    assert [(order.company_name, order.value_cents, order.start_date) for order in orders] == [
        ("Acme", 0, ""),
        ("Globex", 0, "sometime"),
    ]


def test_map_orders_reads_turnaround_column() -> None:
    orders = map_orders(
        [["Acme", "$10", "A-1", "", "1/2/24", "1/9/24", "7"]], ORDER_COLUMNS_WITH_TURNAROUND
    )

    assert orders[0].turnaround_days == 7


def test_contact_ids_prefer_email_then_phone_then_company_and_name(contact_rows) -> None:
    contacts = map_contacts(contact_rows)

    assert [contact.id for contact in contacts] == ["50h42z", "col8na", "3n139t"]


def test_map_contacts_fills_full_name_and_raw_phone(contact_rows) -> None:
    contacts = map_contacts(contact_rows)

    jane, sam = contacts[0], contacts[1]
    assert jane.full_name == "Jane Doe"
    assert jane.phone_raw == jane.phone == "555-0100"
    assert sam.full_name == "Sam Smith"
    assert sam.company_id == company_id("globex")


def test_map_contacts_drops_rows_without_company(contact_rows) -> None:
    contacts = map_contacts(contact_rows)

    assert "nobody@example.com" not in [contact.email for contact in contacts]
    assert len(contacts) == 3


def test_directory_layout_uses_explicit_id_and_raw_phone() -> None:
    contact = contact_from_row(
        ["C-42", "Acme Inc", "Ann", "Lee", "", "ann@acme.test", "(555) 010-0000", "5550100000"],
        CONTACT_COLUMNS_DIRECTORY,
    )

    assert contact.id == "C-42"
    assert contact.full_name == "Ann Lee"
    assert contact.phone == "(555) 010-0000"
    assert contact.phone_raw == "5550100000"


def test_map_notes_requires_company_and_content(note_rows) -> None:
    notes = map_notes(note_rows)

    assert [note.id for note in notes] == ["N-1", "pxfquq"]
    assert notes[0].date == "2024-02-01"
    assert notes[0].contact == "Jane Doe"
    assert notes[1].company_id == "w7znga"


def test_note_fallback_id_uses_content_prefix() -> None:
    long_content = "x" * 80
    notes = map_notes(
        [
            ["", "Acme", "", "1/1/24", "Max", long_content],
            ["", "Acme", "", "1/1/24", "Max", long_content + " and more"],
        ]
    )

    assert notes[0].id == notes[1].id == generate_id(f"Acme|2024-01-01|{'x' * 50}")


def test_mapping_empty_input_returns_empty_lists() -> None:
    assert map_orders([]) == []
    assert map_contacts([]) == []
    assert map_notes([]) == []

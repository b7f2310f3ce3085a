from datetime import date

from chikitsamitra.utils.normalizers import (
    ALL_INDIA,
    normalize_faq,
    normalize_hospital,
    normalize_scheme,
    order_audiences,
    rows_only,
    unique_sorted,
)
from chikitsamitra.utils.validators import (
    is_within_booking_window,
    parse_date,
    validate_otp_format,
    validate_phone,
)


def test_hospital_aliases_first_non_empty_wins():
    record = normalize_hospital({"Name": "", "Hospital Name": " PMCH ", "state": "Bihar", "District": "Patna"})
    assert record.name == "PMCH"
    assert record.state == "Bihar"
    assert record.district == "Patna"


def test_hospital_long_header_alias():
    assert normalize_hospital({"Name (Hospital Name)": "KEM"}).name == "KEM"


def test_scheme_defaults():
    record = normalize_scheme({"Scheme": "JSY"})
    assert record.target_audience == ALL_INDIA
    assert record.title == "JSY"
    assert record.description == ""

    untitled = normalize_scheme({"state": "Kerala", "desc": "Aid"})
    assert untitled.title == "Untitled"
    assert untitled.target_audience == "Kerala"
    assert untitled.description == "Aid"


def test_scheme_row_round_trips_through_sheet_columns():
    record = normalize_scheme({"Target Audience": "Bihar", "Scheme Name": "CM Aid", "Description": "x"})
    assert normalize_scheme(record.to_row()) == record


def test_faq_aliases():
    assert normalize_faq({"Question": "Q1", "Answer": "A1"}).answer == "A1"
    assert normalize_faq({"q": "Q2", "a": "A2"}).question == "Q2"


def test_numbers_in_cells_become_text():
    assert normalize_hospital({"Name": 101, "State": "Goa"}).name == "101"


def test_unique_sorted_trims_and_dedupes():
    assert unique_sorted([" b", "a", "b ", "", None, "  "]) == ["a", "b"]


def test_order_audiences_puts_all_india_first():
    assert order_audiences(["Kerala", "All India", "Bihar", "Kerala"]) == ["All India", "Bihar", "Kerala"]
    assert order_audiences(["Kerala", "Bihar"]) == ["Bihar", "Kerala"]


def test_rows_only_drops_non_objects():
    assert rows_only([{"a": 1}, "x", 3, None]) == [{"a": 1}]
    assert rows_only(None) == []


def test_phone_must_be_ten_ascii_digits():
    assert validate_phone("9876543210")
    assert not validate_phone("987654321")
    assert not validate_phone("98765432100")
    assert not validate_phone("98765-43210")
    assert not validate_phone("٩٨٧٦٥٤٣٢١٠")
    assert not validate_phone(None)


def test_otp_format():
    assert validate_otp_format("123456")
    assert not validate_otp_format("12345")


def test_parse_date_rejects_impossible_dates():
    assert parse_date("2025-02-28") == date(2025, 2, 28)
    assert parse_date("2025-02-30") is None
    assert parse_date("28-02-2025") is None


def test_parse_date_takes_ascii_digits_only():
    assert parse_date("٢٠٢٥-٠٣-١٠") is None
    assert parse_date("２０２５-０３-１０") is None
    assert parse_date("२०२५-०३-१०") is None


def test_booking_window_is_inclusive():
    today = date(2025, 3, 10)
    assert is_within_booking_window("2025-03-10", today, 30)
    assert is_within_booking_window("2025-04-09", today, 30)
    assert not is_within_booking_window("2025-04-10", today, 30)
    assert not is_within_booking_window("2025-03-09", today, 30)

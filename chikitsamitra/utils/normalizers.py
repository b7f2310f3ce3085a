# chikitsamitra/utils/normalizers.py
#
# The directory sheets are maintained by hand and their column headers drift
# ("Name" vs "Hospital Name", "Target Audience" vs "state" ...). Every accepted
# spelling lives here, first match wins.

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from chikitsamitra.schemas.directory import FaqRecord, HospitalRecord, SchemeRecord

ALL_INDIA = "All India"

HOSPITAL_FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "name": ("Name", "name", "Hospital Name", "Name (Hospital Name)"),
    "state": ("State", "state"),
    "district": ("District", "district"),
}

SCHEME_FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "target_audience": ("Target Audience", "state", "State"),
    "title": ("Scheme Name", "scheme_name", "Scheme", "title"),
    "description": ("Description", "description", "desc"),
}

FAQ_FIELD_ALIASES: Dict[str, Sequence[str]] = {
    "question": ("question", "Question", "q"),
    "answer": ("answer", "Answer", "a"),
}


def pick_field(row: Mapping[str, Any], aliases: Sequence[str]) -> str:
    """First non-empty alias value, as a trimmed string."""
    for alias in aliases:
        value = row.get(alias)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def normalize_hospital(row: Mapping[str, Any]) -> HospitalRecord:
    return HospitalRecord(**{
        field: pick_field(row, aliases)
        for field, aliases in HOSPITAL_FIELD_ALIASES.items()
    })


def normalize_scheme(row: Mapping[str, Any]) -> SchemeRecord:
    fields = {
        field: pick_field(row, aliases)
        for field, aliases in SCHEME_FIELD_ALIASES.items()
    }
    fields["target_audience"] = fields["target_audience"] or ALL_INDIA
    fields["title"] = fields["title"] or "Untitled"
    return SchemeRecord(**fields)


def normalize_faq(row: Mapping[str, Any]) -> FaqRecord:
    question = pick_field(row, FAQ_FIELD_ALIASES["question"]) or "Question"
    return FaqRecord(question=question, answer=pick_field(row, FAQ_FIELD_ALIASES["answer"]))


def rows_only(rows: Optional[Iterable[Any]]) -> List[Mapping[str, Any]]:
    """Drop anything in a response body that is not a row object."""
    return [row for row in (rows or []) if isinstance(row, Mapping)]


def unique_sorted(values: Iterable[Any]) -> List[str]:
    """Trimmed, non-empty, de-duplicated, ascending."""
    cleaned = {str(value).strip() for value in values if value is not None}
    cleaned.discard("")
    return sorted(cleaned)


def same_text(left: str, right: str) -> bool:
    return left.strip().lower() == right.strip().lower()


def is_all_india(audience: Optional[str]) -> bool:
    return bool(audience) and same_text(audience, ALL_INDIA)


def order_audiences(audiences: Iterable[str]) -> List[str]:
    """Ascending, with the All India sentinel pulled to the front."""
    ordered = unique_sorted(audiences)
    if ALL_INDIA in ordered:
        ordered.remove(ALL_INDIA)
        ordered.insert(0, ALL_INDIA)
    return ordered

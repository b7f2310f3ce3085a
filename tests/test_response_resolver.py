import pytest

from chikitsamitra.config.knowledge_base_content import FALLBACK_RESPONSE, GREETING, KNOWLEDGE_BASE
from chikitsamitra.models.knowledge import KnowledgeEntry
from chikitsamitra.services.response_resolver import ResponseResolver, resolve


def response_for(keyword: str) -> str:
    for entry in KNOWLEDGE_BASE:
        if keyword in entry.keywords:
            return entry.response
    raise AssertionError(f"no entry for {keyword}")


def test_fever_message_gets_fever_advice():
    assert resolve("I have a fever") == response_for("fever")
    assert "hydrated" in resolve("I have a fever")


def test_unknown_message_gets_fallback():
    assert resolve("xyzzy") == FALLBACK_RESPONSE


def test_matching_is_case_insensitive_and_trimmed():
    assert resolve("   I HAVE A FEVER   ") == response_for("fever")


def test_blank_message_gets_fallback():
    assert resolve("") == FALLBACK_RESPONSE
    assert resolve("   ") == FALLBACK_RESPONSE


def test_first_entry_in_table_order_wins():
    resolver = ResponseResolver([
        KnowledgeEntry(("head",), "first"),
        KnowledgeEntry(("headache",), "second"),
    ], fallback="none")

    assert resolver.resolve("bad headache today") == "first"
    assert resolver.resolve("nothing here") == "none"


def test_keywords_match_as_substrings():
    resolver = ResponseResolver([KnowledgeEntry(("cough",), "cough advice")], fallback="none")
    assert resolver.resolve("my coughing will not stop") == "cough advice"


def test_table_keywords_are_normalized():
    assert len(KNOWLEDGE_BASE) == 165
    for entry in KNOWLEDGE_BASE:
        assert entry.keywords
        assert all(keyword == keyword.strip().lower() and keyword for keyword in entry.keywords)
        assert entry.response


def test_greeting_text():
    assert GREETING == "Hello! I'm ChikitsaMitra. How can I help you today?"


@pytest.mark.parametrize("keywords", [(), ("fever", "  ")])
def test_entry_rejects_empty_keywords(keywords):
    with pytest.raises(ValueError):
        KnowledgeEntry(keywords, "response")


def test_entry_lowercases_keywords():
    entry = KnowledgeEntry((" Chest Pain ",), "see a doctor")
    assert entry.keywords == ("chest pain",)
    assert entry.matches("sudden chest pain at night")

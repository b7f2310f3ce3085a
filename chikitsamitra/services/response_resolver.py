import logging
from typing import Iterable, Tuple

from chikitsamitra.config.knowledge_base_content import FALLBACK_RESPONSE, KNOWLEDGE_BASE
from chikitsamitra.models.knowledge import KnowledgeEntry

logger = logging.getLogger("chatbot")


class ResponseResolver:
    """
    Maps a free-text message to a canned advisory.

    Entries are scanned in table order and the first one with a keyword
    contained in the lower-cased message wins. Anything unmatched gets the
    fallback string.
    """

    def __init__(self, entries: Iterable[KnowledgeEntry] = KNOWLEDGE_BASE, fallback: str = FALLBACK_RESPONSE):
        self.entries: Tuple[KnowledgeEntry, ...] = tuple(entries)
        self.fallback = fallback

    def resolve(self, message: str) -> str:
        text = (message or "").strip().lower()
        if not text:
            return self.fallback

        for entry in self.entries:
            if entry.matches(text):
                logger.debug(f"Matched keywords {entry.keywords[:3]} for '{text[:40]}'")
                return entry.response

        logger.debug(f"No keyword match for '{text[:40]}'")
        return self.fallback


response_resolver = ResponseResolver()


def resolve(message: str) -> str:
    return response_resolver.resolve(message)

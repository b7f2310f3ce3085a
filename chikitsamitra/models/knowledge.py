from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class KnowledgeEntry:
    keywords: Tuple[str, ...]
    response: str

    def __post_init__(self):
        if not self.keywords:
            raise ValueError("Knowledge entry needs at least one keyword")
        normalized = tuple(keyword.strip().lower() for keyword in self.keywords)
        if not all(normalized):
            raise ValueError(f"Empty keyword in group {self.keywords!r}")
        object.__setattr__(self, "keywords", normalized)

    def matches(self, text: str) -> bool:
        """text must already be lower-cased"""
        return any(keyword in text for keyword in self.keywords)

from chikitsamitra.models.knowledge import KnowledgeEntry
from chikitsamitra.models.booking import AppointmentTimeline
from chikitsamitra.models.verification import VerificationStatus
from chikitsamitra.models.selector import SelectorPhase, SelectorState

__all__ = [
    "KnowledgeEntry",
    "AppointmentTimeline",
    "VerificationStatus",
    "SelectorPhase",
    "SelectorState",
]

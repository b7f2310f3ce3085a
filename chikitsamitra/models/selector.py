import enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Tuple


class SelectorPhase(str, enum.Enum):
    EMPTY = "empty"
    LOADING = "loading"
    POPULATED = "populated"


@dataclass
class SelectorState:
    """One dropdown: what it shows and what is currently chosen."""
    placeholder: str
    phase: SelectorPhase = SelectorPhase.EMPTY
    options: Tuple[str, ...] = field(default_factory=tuple)
    value: str = ""

    @property
    def disabled(self) -> bool:
        return not self.options

    def clear(self, placeholder: str) -> None:
        self.phase = SelectorPhase.EMPTY
        self.placeholder = placeholder
        self.options = ()
        self.value = ""

    def loading(self, placeholder: str) -> None:
        self.phase = SelectorPhase.LOADING
        self.placeholder = placeholder
        self.options = ()
        self.value = ""

    def populate(self, options: Iterable[str], placeholder: str) -> None:
        self.options = tuple(options)
        self.placeholder = placeholder
        self.value = ""
        self.phase = SelectorPhase.POPULATED if self.options else SelectorPhase.EMPTY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "phase": self.phase.value,
            "placeholder": self.placeholder,
            "options": list(self.options),
            "value": self.value,
            "disabled": self.disabled,
        }

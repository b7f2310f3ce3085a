# chikitsamitra/services/selector_service.py
#
# State -> district -> hospital dropdowns. Each level carries a generation
# number that every upstream change bumps; a fetch started under an older
# generation is dropped when it resolves, so a slow response for a previous
# selection can never overwrite the options of a newer one.

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Union

from chikitsamitra.models.selector import SelectorState
from chikitsamitra.services.directory_service import DirectoryClient

logger = logging.getLogger("selectors")

LEVELS = ("state", "district", "hospital")

Snapshot = Dict[str, Any]
ChangeCallback = Callable[[Snapshot], Union[None, Awaitable[None]]]


class InvalidSelectionError(ValueError):
    """A value that is not among the selector's current options."""


@dataclass(frozen=True)
class SelectorPlaceholders:
    choose_state: str
    state_first: str
    choose_district: str
    district_first: str
    choose_hospital: str
    loading_states: str = "Loading states..."
    loading_districts: str = "Loading districts..."
    loading_hospitals: str = "Loading hospitals..."


APPOINTMENT_FORM_PLACEHOLDERS = SelectorPlaceholders(
    choose_state="Choose a state",
    state_first="Choose a state first",
    choose_district="Choose district",
    district_first="Choose a district first",
    choose_hospital="Choose hospital",
)

HOSPITAL_FINDER_PLACEHOLDERS = SelectorPlaceholders(
    choose_state="Select state",
    state_first="Select district",
    choose_district="Select district",
    district_first="Select hospital",
    choose_hospital="Select hospital",
)


class CascadingSelector:

    def __init__(
        self,
        group: str,
        directory: DirectoryClient,
        placeholders: SelectorPlaceholders,
        on_change: Optional[ChangeCallback] = None,
    ):
        self.group = group
        self.directory = directory
        self.placeholders = placeholders
        self.on_change = on_change

        self.state = SelectorState(placeholders.loading_states)
        self.district = SelectorState(placeholders.state_first)
        self.hospital = SelectorState(placeholders.district_first)
        self._generation = {level: 0 for level in LEVELS}

    def snapshot(self) -> Snapshot:
        return {
            "group": self.group,
            "state": self.state.to_dict(),
            "district": self.district.to_dict(),
            "hospital": self.hospital.to_dict(),
        }

    async def _notify(self) -> None:
        if self.on_change is None:
            return
        result = self.on_change(self.snapshot())
        if inspect.isawaitable(result):
            await result

    def _bump(self, *levels: str) -> int:
        for level in levels:
            self._generation[level] += 1
        return self._generation[levels[0]]

    def _is_stale(self, level: str, generation: int) -> bool:
        if self._generation[level] != generation:
            logger.debug(f"[{self.group}] dropping stale {level} options (generation {generation})")
            return True
        return False

    @staticmethod
    def _check_option(selector: SelectorState, value: str, level: str) -> None:
        if value and value not in selector.options:
            raise InvalidSelectionError(f"'{value}' is not an available {level}")

    async def mount(self) -> None:
        """Load states; district and hospital start empty."""
        generation = self._bump("state", "district", "hospital")
        self.state.loading(self.placeholders.loading_states)
        self.district.clear(self.placeholders.state_first)
        self.hospital.clear(self.placeholders.district_first)
        await self._notify()

        states = await self.directory.list_states()
        if self._is_stale("state", generation):
            return
        self.state.populate(states, self.placeholders.choose_state)
        await self._notify()

    async def select_state(self, value: str) -> None:
        value = (value or "").strip()
        self._check_option(self.state, value, "state")

        generation = self._bump("district", "hospital")
        self.state.value = value
        self.hospital.clear(self.placeholders.district_first)
        if not value:
            self.district.clear(self.placeholders.state_first)
            await self._notify()
            return

        self.district.loading(self.placeholders.loading_districts)
        await self._notify()

        districts = await self.directory.list_districts(value)
        if self._is_stale("district", generation):
            return
        self.district.populate(districts, self.placeholders.choose_district)
        await self._notify()

    async def select_district(self, value: str) -> None:
        value = (value or "").strip()
        self._check_option(self.district, value, "district")

        generation = self._bump("hospital")
        self.district.value = value
        state = self.state.value
        if not state or not value:
            self.hospital.clear(self.placeholders.district_first)
            await self._notify()
            return

        self.hospital.loading(self.placeholders.loading_hospitals)
        await self._notify()

        hospitals = await self.directory.list_hospitals(state, value)
        if self._is_stale("hospital", generation):
            return
        self.hospital.populate(hospitals, self.placeholders.choose_hospital)
        await self._notify()

    async def select_hospital(self, value: str) -> None:
        value = (value or "").strip()
        self._check_option(self.hospital, value, "hospital")
        self.hospital.value = value
        await self._notify()

    async def select(self, field: str, value: str) -> None:
        """Dispatch a change event by field name."""
        handlers = {
            "state": self.select_state,
            "district": self.select_district,
            "hospital": self.select_hospital,
        }
        handler = handlers.get(field)
        if handler is None:
            raise InvalidSelectionError(f"Unknown field '{field}'")
        await handler(value)


def appointment_form_selector(directory: DirectoryClient, on_change: Optional[ChangeCallback] = None) -> CascadingSelector:
    return CascadingSelector("appointment", directory, APPOINTMENT_FORM_PLACEHOLDERS, on_change)


def hospital_finder_selector(directory: DirectoryClient, on_change: Optional[ChangeCallback] = None) -> CascadingSelector:
    return CascadingSelector("finder", directory, HOSPITAL_FINDER_PLACEHOLDERS, on_change)


SELECTOR_FACTORIES = {
    "appointment": appointment_form_selector,
    "finder": hospital_finder_selector,
}

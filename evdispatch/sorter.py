"""Priority sorter that turns a priority table into a dispatch order."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

__all__ = ["PrioritySorter", "TieBreak"]


class TieBreak(Enum):
    """How listeners with equal priority are ordered."""

    NAME = "name"
    REGISTRATION = "registration"


class PrioritySorter:
    """Order identifiers by integer priority with a deterministic tie-break."""

    def __init__(
        self,
        priorities: Mapping[str, int],
        tie_break: TieBreak = TieBreak.NAME,
    ) -> None:
        self._priorities = dict(priorities)
        self._tie_break = tie_break

    def sort(self) -> tuple[str, ...]:
        """Return identifiers from lowest to highest priority."""

        return self._ordered(descending=False)

    def sort_reverse(self) -> tuple[str, ...]:
        """Return identifiers from highest to lowest priority."""

        return self._ordered(descending=True)

    def _ordered(self, *, descending: bool) -> tuple[str, ...]:
        sign = -1 if descending else 1
        if self._tie_break is TieBreak.REGISTRATION:
            # dict preserves insertion order, so enumerate() is the registration index
            keyed = [
                (sign * priority, index, name)
                for index, (name, priority) in enumerate(self._priorities.items())
            ]
        else:
            keyed = [
                (sign * priority, name, name)
                for name, priority in self._priorities.items()
            ]
        return tuple(name for _, _, name in sorted(keyed))

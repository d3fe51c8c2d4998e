from __future__ import annotations

from typing import Sequence

from ..core.constants import DEFAULT_SUBCOMMITTEE_ORDER
from ..core.enums import SubcommitteeName


class SubcommitteeOrder:
    """Display rank of subcommittees.

    Names missing from the configured order sort after the listed ones,
    alphabetically.
    """

    def __init__(self, order: Sequence[str] = DEFAULT_SUBCOMMITTEE_ORDER):
        self._order = [SubcommitteeName(str(name).strip()).value for name in order]

    @property
    def names(self) -> list[str]:
        return list(self._order)

    def rank(self, name) -> tuple[int, str]:
        value = name.value if isinstance(name, SubcommitteeName) else str(name)
        try:
            return (self._order.index(value), value)
        except ValueError:
            return (len(self._order), value)

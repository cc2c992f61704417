"""Management of the staffs built while rendering."""

from __future__ import annotations

import logging

from tab_interpreter.renderer.options import StaffOptions
from tab_interpreter.renderer.staff import Staff

logger = logging.getLogger(__name__)


class StaffManager:
    """Owns the list of staffs and the global options applied to new ones.

    Only the most recently created staff is ever modified. A note added
    after that staff has tabs starts a new staff, so each staff holds
    exactly one declared set of strings.

    Examples
    --------
    >>> manager = StaffManager()
    >>> manager.add_note("E")
    >>> manager.add_tab("0")
    >>> manager.add_note("A")
    >>> len(manager.staffs)
    2
    """

    def __init__(self) -> None:
        self._staffs: list[Staff] = []
        self.options = StaffOptions()

    @property
    def staffs(self) -> tuple[Staff, ...]:
        return tuple(self._staffs)

    @property
    def current(self) -> Staff | None:
        """The staff that tab operations apply to, if any."""
        return self._staffs[-1] if self._staffs else None

    def add_note(self, note: str) -> None:
        """Add a note to the current staff, starting a new staff when needed."""
        staff = self.current
        if staff is None or staff.has_tabs:
            staff = self._create_staff()
        staff.add_note(note)

    def add_tab(self, tab: str) -> None:
        if (staff := self.current) is not None:
            staff.add_tab(tab)

    def add_empty(self) -> None:
        if (staff := self.current) is not None:
            staff.add_empty()

    def add_next(self) -> None:
        if (staff := self.current) is not None:
            staff.add_next()

    def add_spread_empty(self, amount: int) -> None:
        if (staff := self.current) is not None:
            staff.add_spread_empty(amount)

    def add_spread_next(self, amount: int) -> None:
        if (staff := self.current) is not None:
            staff.add_spread_next(amount)

    def set_options(self, options: str) -> None:
        """Set global options from an options block.

        Only staffs created afterwards use the new settings.

        Raises
        ------
        OptionsError
            If the options block contains invalid options.
        """
        self.options.set(options)

    def _create_staff(self) -> Staff:
        staff = Staff()
        # a fresh staff has no tabs, so these cannot fail
        staff.set_time_signature(self.options.time_signature)
        staff.set_time_fidelity(self.options.time_fidelity)
        self._staffs.append(staff)
        logger.debug("Started staff %d", len(self._staffs))
        return staff

    def __str__(self) -> str:
        return "".join(f"{staff}\n" for staff in self._staffs)

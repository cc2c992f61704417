"""A staff: the tab lines for one group of guitar strings."""

from __future__ import annotations

from tab_interpreter.errors import StaffStateError
from tab_interpreter.renderer.timing import DOWNBEAT, Time

BAR_LINE = "|"
EMPTY_CELL = "---"


class Staff:
    """Note names, tab lines and timing for one group of guitar strings.

    Strings are declared top note-name first, but the cursor starts on the
    last declared string and moves toward the first. One pass over every
    string is one beat. When rendered, the last-written line is shown at the
    top, so the first declared string ends up at the bottom.

    Parameters
    ----------
    time : Time | None
        Timing state for this staff. A default ``Time`` is used when omitted.

    Examples
    --------
    >>> staff = Staff()
    >>> for note in ("E", "A"):
    ...     staff.add_note(note)
    >>> staff.add_tab("3")
    >>> staff.add_tab("12")
    >>> staff.tabs
    ['|-12', '|-3-']
    >>> staff.time.total_beats_counted
    1
    """

    def __init__(self, time: Time | None = None) -> None:
        self.notes: list[str] = []
        self.tabs: list[str] = []
        self.time = time if time is not None else Time()
        self.has_tabs = False
        self.string_pos = 0

    def set_time_signature(self, signature: tuple[int, int]) -> None:
        """Set the time signature of the staff.

        Raises
        ------
        StaffStateError
            If tabs have already been added.
        """
        if self.has_tabs:
            msg = "Cannot set time signature after tabs have been added."
            raise StaffStateError(msg)
        self.time.set_signature(*signature)

    def set_time_fidelity(self, fidelity: int) -> None:
        """Set the beat fidelity of the staff.

        Raises
        ------
        StaffStateError
            If tabs have already been added.
        """
        if self.has_tabs:
            msg = "Cannot set fidelity after tabs have been added."
            raise StaffStateError(msg)
        self.time.set_fidelity(fidelity)

    def add_note(self, note: str) -> None:
        """Add a guitar string named ``note`` and move the cursor onto it.

        Raises
        ------
        StaffStateError
            If tabs have already been added.
        """
        if self.has_tabs:
            msg = "Cannot add note after tabs have been added."
            raise StaffStateError(msg)
        self.notes.append(note)
        self.tabs.append("")
        self.string_pos = len(self.notes) - 1

    def add_tab(self, tab: str) -> None:
        """Write a fret number on the string under the cursor."""
        # single char frets are written "-n-" and two char frets "-nn"
        self._write_cell(f"-{tab}-" if len(tab) == 1 else f"-{tab}")

    def add_empty(self) -> None:
        """Leave the string under the cursor empty for this beat."""
        self._write_cell(EMPTY_CELL)

    def add_next(self) -> None:
        """Fill every remaining string of the current beat with empty cells."""
        if not self.notes:
            return
        for _ in range(self.string_pos + 1):
            self.add_empty()

    def add_spread_empty(self, amount: int) -> None:
        for _ in range(amount):
            self.add_empty()

    def add_spread_next(self, amount: int) -> None:
        for _ in range(amount):
            self.add_next()

    def _write_cell(self, cell: str) -> None:
        if not self.notes:
            return
        self._check_beat()
        self.tabs[self.string_pos] += cell
        self.has_tabs = True
        self._update_string_pos()

    def _update_string_pos(self) -> None:
        if self.string_pos == 0:
            self.time.increment_beat()
            self.string_pos = len(self.notes) - 1
        else:
            self.string_pos -= 1

    def _check_beat(self) -> None:
        if self.time.beat == DOWNBEAT:
            self.tabs[self.string_pos] += BAR_LINE

    def __str__(self) -> str:
        lines = "".join(
            f"{note:<2} {tab}\n" for note, tab in zip(reversed(self.notes), self.tabs)
        )
        return f"{lines}\n{self.time}\n"

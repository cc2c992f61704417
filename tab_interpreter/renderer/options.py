"""Parsing of ``[name=value; ...]`` options blocks.

Options blocks set the time defaults used by staffs created after them::

    [time=3/4; fidelity=8]
"""

from __future__ import annotations

import logging
import re

from tab_interpreter.errors import OptionsError
from tab_interpreter.renderer.timing import Time

logger = logging.getLogger(__name__)

OPTION_SEPARATOR = ";"
VALUE_SEPARATOR = "="
SIGNATURE_SEPARATOR = "/"

UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str) -> int:
    """Parse a whole, non-negative integer.

    Raises
    ------
    ValueError
        If ``text`` is empty or contains anything but digits.

    Examples
    --------
    >>> parse_unsigned(" 16 ")
    16
    """
    text = text.strip()
    if not text:
        msg = "cannot parse integer from empty string"
        raise ValueError(msg)
    if not UNSIGNED_RE.fullmatch(text):
        msg = "invalid digit found in string"
        raise ValueError(msg)
    return int(text)


class StaffOptions:
    """Global staff defaults set through options blocks.

    Examples
    --------
    >>> options = StaffOptions()
    >>> options.set("time=3/4; fidelity=8")
    >>> options.time_signature, options.time_fidelity
    ((3, 4), 8)
    """

    def __init__(self) -> None:
        self.time = Time()

    @property
    def time_signature(self) -> tuple[int, int]:
        return self.time.signature

    @property
    def time_fidelity(self) -> int:
        return self.time.fidelity

    def set(self, options: str) -> None:
        """Apply every option in an options block.

        Valid options are applied even when others in the same block fail.

        Parameters
        ----------
        options : str
            The options text, without the surrounding brackets.

        Raises
        ------
        OptionsError
            If any option is malformed or unknown. Holds one message per
            failing option.
        """
        errors: list[str] = []
        for option in options.split(OPTION_SEPARATOR):
            try:
                self._parse_option(option)
            except ValueError as e:
                errors.append(str(e))

        if errors:
            raise OptionsError(errors)
        logger.debug(
            "Staff defaults now time=%d/%d fidelity=%d",
            *self.time_signature,
            self.time_fidelity,
        )

    def _parse_option(self, option: str) -> None:
        name, separator, value = option.strip().partition(VALUE_SEPARATOR)
        if not separator:
            msg = f'Option "{option.strip()}" has not been set to a value.'
            raise ValueError(msg)

        name = name.strip()
        if name == "time":
            self._parse_time_signature(value)
        elif name == "fidelity":
            self._parse_fidelity(value)
        else:
            msg = f'Option "{name}" does not exist.'
            raise ValueError(msg)

    def _parse_time_signature(self, time_signature: str) -> None:
        parts = time_signature.strip().split(SIGNATURE_SEPARATOR)
        if len(parts) < 2:
            msg = (
                f'Time signature option "{time_signature.strip()}" is improperly formatted. '
                "Format should equal \"n/n\" where 'n' is a whole integer."
            )
            raise ValueError(msg)

        numerator, denominator = parts[0].strip(), parts[1].strip()
        beats = dominant = None
        beats_error = dominant_error = None
        try:
            beats = parse_unsigned(numerator)
        except ValueError as e:
            beats_error = e
        try:
            dominant = parse_unsigned(denominator)
        except ValueError as e:
            dominant_error = e

        if beats_error and dominant_error:
            msg = (
                f'Could not parse time signature "{numerator}/{denominator}" into numbers: '
                f"{beats_error}; {dominant_error}"
            )
            raise ValueError(msg)
        if beats_error:
            msg = (
                f'Could not parse beats per measure (numerator) "{numerator}" '
                f"into a number: {beats_error}"
            )
            raise ValueError(msg)
        if dominant_error:
            msg = (
                f'Could not parse dominant beat (denominator) "{denominator}" '
                f"into a number: {dominant_error}"
            )
            raise ValueError(msg)

        self.time.set_signature(beats, dominant)

    def _parse_fidelity(self, fidelity: str) -> None:
        try:
            value = parse_unsigned(fidelity)
        except ValueError as e:
            msg = f'Could not parse beat fidelity "{fidelity.strip()}" into a number: {e}'
            raise ValueError(msg) from e
        self.time.set_fidelity(value)

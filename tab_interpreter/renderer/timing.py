"""Time signature and beat tracking for a staff."""

from __future__ import annotations

from tab_interpreter.config import (
    DEFAULT_BEATS_PER_MEASURE,
    DEFAULT_DOMINANT_BEAT,
    DEFAULT_FIDELITY,
)

# Subdivision labels keyed by their fraction of a beat
SUBDIVISION_LABELS: dict[float, str] = {
    0.25: "e",
    0.5: "&",
    0.75: "a",
}

DOWNBEAT = "1"

# Width of the "Nm " note-name column in front of every tab line
NOTE_COLUMN = "   "


class Time:
    """Keeps track of the time signature and smallest visible beat of a staff.

    Parameters
    ----------
    beats_per_measure : int
        Numerator of the time signature.
    dominant_beat : int
        Denominator of the time signature; the note value that gets one beat.
    fidelity : int
        The smallest subdivision tracked per measure (e.g., 16 for sixteenths).

    Examples
    --------
    >>> time = Time()
    >>> [time.beat_at(pos) for pos in range(4)]
    ['1', 'e', '&', 'a']
    """

    def __init__(
        self,
        beats_per_measure: int = DEFAULT_BEATS_PER_MEASURE,
        dominant_beat: int = DEFAULT_DOMINANT_BEAT,
        fidelity: int = DEFAULT_FIDELITY,
    ) -> None:
        self.set_signature(beats_per_measure, dominant_beat)
        self.set_fidelity(fidelity)
        self.current_beat = 0
        self.total_beats_counted = 0

    def set_signature(self, beats_per_measure: int, dominant_beat: int) -> None:
        """Set the time signature, clamping non-positive values to 1."""
        self.beats_per_measure = beats_per_measure if beats_per_measure > 0 else 1
        self.dominant_beat = dominant_beat if dominant_beat > 0 else 1

    @property
    def signature(self) -> tuple[int, int]:
        """The time signature as ``(beats_per_measure, dominant_beat)``."""
        return self.beats_per_measure, self.dominant_beat

    def set_fidelity(self, fidelity: int) -> None:
        """Set the beat fidelity (resolution), clamping non-positive values to 1."""
        self._fidelity = fidelity if fidelity > 0 else 1

    @property
    def fidelity(self) -> int:
        return self._fidelity

    @property
    def total_beats_per_measure(self) -> int:
        """Number of beats and fractional beats within one measure."""
        # a fidelity coarser than the dominant beat still counts one step per beat
        return self.beats_per_measure * max(1, self._fidelity // self.dominant_beat)

    @property
    def beat(self) -> str:
        """Label of the current beat: its number, "e", "&", "a" or "."."""
        return self.beat_at(self.current_beat)

    def beat_at(self, pos: int) -> str:
        """Label of the beat at ``pos`` within a measure.

        Parameters
        ----------
        pos : int
            Zero-based step within the measure.

        Returns
        -------
        str
            The 1-based beat number on a beat, "e", "&" or "a" for quarter
            subdivisions, and "." for any other subdivision.

        Examples
        --------
        >>> Time(fidelity=8).beat_at(3)
        '&'
        >>> Time(fidelity=12).beat_at(1)
        '.'
        """
        resolution = self._fidelity / self.dominant_beat
        step = max(1, int(resolution))
        beat_div = pos % step
        beat_index = pos // step

        if beat_div == 0:
            return str(beat_index + 1)
        return SUBDIVISION_LABELS.get(beat_div / resolution, ".")

    def increment_beat(self) -> None:
        """Move to the next beat, wrapping at the end of the measure."""
        self.current_beat = (self.current_beat + 1) % self.total_beats_per_measure
        self.total_beats_counted += 1

    def __str__(self) -> str:
        beats = [NOTE_COLUMN]
        per_measure = self.total_beats_per_measure
        for pos in range(self.total_beats_counted):
            label = self.beat_at(pos % per_measure)
            # keep the count aligned with the bar line on the tab lines
            if label == DOWNBEAT:
                beats.append(" ")
            beats.append(f" {label:<2}")
        return "".join(beats)

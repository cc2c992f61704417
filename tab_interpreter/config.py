"""Configuration for running the interpreter over files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

# Time defaults applied to every staff until an options block changes them
DEFAULT_BEATS_PER_MEASURE = 4
DEFAULT_DOMINANT_BEAT = 4
DEFAULT_FIDELITY = 16

OUTPUT_SUFFIX = ".txt"
OUTPUT_STEM_SUFFIX = "-output"


@dataclass(frozen=True)
class InterpreterConfig:
    """Input and output locations for one interpreter run.

    Parameters
    ----------
    input_path : Path
        The tab notation file to read.
    output_path : Path
        Where the rendered tablature is written.

    Examples
    --------
    >>> InterpreterConfig.from_paths("riff.tab").output_path.name
    'riff-output.txt'
    """

    input_path: Path
    output_path: Path

    @classmethod
    def from_paths(
        cls,
        input_path: str | Path,
        output_path: str | Path | None = None,
    ) -> InterpreterConfig:
        """Build a config, deriving the output path when none is given.

        The output always gets a ``.txt`` extension. Without an explicit
        output, the file is named ``<input stem>-output.txt`` in the current
        directory.
        """
        input_path = Path(input_path)
        if output_path is None:
            stem = input_path.stem
            output_path = Path(f"{stem}{OUTPUT_STEM_SUFFIX}" if stem else "output")
        return cls(input_path=input_path, output_path=Path(output_path).with_suffix(OUTPUT_SUFFIX))

"""Readers for line and job input files.

Line widths come from an external text layout service, so input arrives
as JSON produced by another program (or typed on the command line as
``TEXT:WIDTH``). Files are validated with pydantic before they reach the
generator.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from gooeyblob.domain import Line
from gooeyblob.exceptions import LineParseError


class LineInput(BaseModel):
    """One measured line of text."""

    text: str = ""
    width: float = Field(description="Measured rendered width in pixels")

    def to_line(self, index: int) -> Line:
        return Line(text=self.text, width=self.width, index=index)


class JobInput(BaseModel):
    """One blob to render in a batch."""

    id: str | int | None = None
    lines: list[LineInput] = Field(default_factory=list)
    options: dict[str, Any] = Field(default_factory=dict)

    def to_job(self, position: int) -> dict[str, Any]:
        """Convert to the picklable job dictionary used by BatchProcessor."""
        return {
            "id": str(self.id) if self.id is not None else f"job-{position}",
            "lines": [line.model_dump() for line in self.lines],
            "options": self.options,
        }


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise LineParseError(str(path), "file not found")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise LineParseError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        raise LineParseError(str(path), f"invalid JSON: {e.msg} (line {e.lineno})") from e


def parse_lines(data: Any, source: str = "<data>") -> list[Line]:
    """Validate decoded JSON as a list of lines.

    Accepts either a bare list of ``{"text", "width"}`` objects or an
    object with a ``"lines"`` key holding that list.

    Args:
        data: Decoded JSON
        source: Name used in error messages

    Returns:
        Lines indexed by their position

    Raises:
        LineParseError: If the data is not a valid line list
    """
    if isinstance(data, dict):
        if "lines" not in data:
            raise LineParseError(source, "expected a list or an object with a 'lines' key")
        data = data["lines"]
    if not isinstance(data, list):
        raise LineParseError(source, f"expected a list of lines, got {type(data).__name__}")

    try:
        items = [LineInput.model_validate(item) for item in data]
    except ValidationError as e:
        raise LineParseError(source, str(e)) from e

    return [item.to_line(i) for i, item in enumerate(items)]


def read_lines(path: Path) -> list[Line]:
    """Read lines from a JSON file.

    Args:
        path: JSON file path

    Returns:
        Lines in display order

    Raises:
        LineParseError: If the file is missing or invalid
    """
    return parse_lines(_load_json(path), source=str(path))


def read_jobs(path: Path) -> list[dict[str, Any]]:
    """Read batch jobs from a JSON file.

    Accepts a bare list of jobs or an object with a ``"jobs"`` key.

    Args:
        path: JSON file path

    Returns:
        Job dictionaries ready for BatchProcessor.process

    Raises:
        LineParseError: If the file is missing or invalid
    """
    data = _load_json(path)
    if isinstance(data, dict):
        data = data.get("jobs")
    if not isinstance(data, list):
        raise LineParseError(str(path), "expected a list of jobs or an object with a 'jobs' key")

    try:
        jobs = [JobInput.model_validate(item) for item in data]
    except ValidationError as e:
        raise LineParseError(str(path), str(e)) from e

    return [job.to_job(position) for position, job in enumerate(jobs)]


def parse_line_spec(spec: str, index: int = 0) -> Line:
    """Parse a ``TEXT:WIDTH`` command-line line spec.

    The width follows the last colon, so the text itself may contain
    colons. An empty text part makes an empty line.

    Examples:
        >>> parse_line_spec("Hello:120")
        Line(text='Hello', width=120.0, index=0)
        >>> parse_line_spec("09:30 start:88.5", index=2).width
        88.5

    Raises:
        LineParseError: If there is no colon or the width is not a number
    """
    text, sep, width = spec.rpartition(":")
    if not sep:
        raise LineParseError(spec, "expected TEXT:WIDTH")
    try:
        value = float(width)
    except ValueError as e:
        raise LineParseError(spec, f"width '{width}' is not a number") from e
    return Line(text=text, width=value, index=index)

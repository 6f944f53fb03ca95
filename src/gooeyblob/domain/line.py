"""Text line input supplied by the line layout provider.

Lines arrive already wrapped and measured. Gooeyblob never shapes or
measures text itself; it only consumes the widths it is given.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class Alignment(str, Enum):
    """Horizontal alignment of lines within the reference width."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Line:
    """A wrapped line of text with its measured pixel width.

    Attributes:
        text: Line content (only used to detect empty lines)
        width: Measured width in pixels
        index: Display position of the line within its block
    """

    text: str
    width: float
    index: int = 0

    def is_empty(self) -> bool:
        """Check if the line has no visible content.

        Returns:
            True for empty or whitespace-only text
        """
        return self.text.strip() == ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with text, width and index fields
        """
        return {
            "text": self.text,
            "width": self.width,
            "index": self.index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int | None = None) -> "Line":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with text and width, optionally index
            index: Overrides the stored index when given

        Returns:
            Line instance
        """
        return cls(
            text=str(data.get("text", "")),
            width=float(data["width"]),
            index=index if index is not None else int(data.get("index", 0)),
        )


def index_lines(lines: list[Line] | list[dict[str, Any]]) -> list[Line]:
    """Normalize raw or partially indexed lines into display order.

    The position in the input list is authoritative: a line's index is
    always its position, whatever index it carried before.

    Args:
        lines: Line objects or ``{"text", "width"}`` dictionaries

    Returns:
        Lines whose index matches their position
    """
    indexed: list[Line] = []
    for i, line in enumerate(lines):
        if isinstance(line, Line):
            indexed.append(Line(text=line.text, width=line.width, index=i))
        else:
            indexed.append(Line.from_dict(line, index=i))
    return indexed


class LineLayoutProvider(Protocol):
    """External collaborator that wraps and measures text.

    Implementations live outside this package (DOM measurement, font
    shaping engines, ...). Gooeyblob only depends on this contract.
    """

    def layout(self, text: str, max_width: float | None = None) -> list[Line]:
        """Return wrapped lines in display order with measured widths."""
        ...

"""Typed blocks produced from free-text model answers."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class BlockKind(str, Enum):
    """Structural role of a formatted block."""

    HEADING = "heading"
    SUBHEADING = "subheading"
    BULLET_POINT = "bullet_point"
    LINE_BREAK = "line_break"
    SECTION_BREAK = "section_break"
    TEXT = "text"


class InlineSpan(BaseModel):
    """Run of text inside a block, optionally emphasized."""

    model_config = ConfigDict(frozen=True)

    text: str
    emphasis: bool = False


class FormattedBlock(BaseModel):
    """One structurally tagged unit of a model answer.

    Break blocks carry no spans; every other kind carries at least one.
    """

    model_config = ConfigDict(frozen=True)

    kind: BlockKind
    spans: tuple[InlineSpan, ...] = ()

    @property
    def text(self) -> str:
        return "".join(span.text for span in self.spans)

    @classmethod
    def of(cls, kind: BlockKind, text: str) -> "FormattedBlock":
        """Block holding a single plain span."""
        return cls(kind=kind, spans=(InlineSpan(text=text),))

    @classmethod
    def line_break(cls) -> "FormattedBlock":
        return cls(kind=BlockKind.LINE_BREAK)

    @classmethod
    def section_break(cls) -> "FormattedBlock":
        return cls(kind=BlockKind.SECTION_BREAK)

"""Turn free-text model answers into typed FormattedBlock sequences.

Model output has no guaranteed format, so formatting is best effort and
total: unmatched text passes through as plain text and no input raises.

Rules, applied in priority order so earlier rules claim text first:
1. **span** becomes an emphasized inline span (its asterisks never start bullets)
2. Lines starting with a heading marker (#..######) become headings
3. Lines of uppercase words followed by a colon become subheadings
4. Bullet markers (* or • followed by whitespace, anywhere in a line; - at
   line start) each start a new bullet point
5. Two or more consecutive line breaks become one section break
6. A single line break before a subheading line becomes a section break
7. Other single line breaks become line breaks

Rule 7 only applies between two runs of plain text. Headings, subheadings and
bullet points always start on their own line, so a single line break next to
one of them is absorbed rather than emitted as a line break.

Usage:
    blocks = format_response("CREDIBILITY RATING: HIGH\\n\\nKEY FINDINGS:\\n* one * two")
    markdown = render_blocks(blocks)
"""

import re
from typing import Iterable

from verifact.schemas import BlockKind, FormattedBlock, InlineSpan

_EMPHASIS = re.compile(r"\*\*(.+?)\*\*")
_HEADING = re.compile(r"^\s*#{1,6}\s+(.*?)\s*#*\s*$")
_SUBHEADING = re.compile(r"^\s*([A-Z][A-Z /&-]*?)\s*:\s*(.*?)\s*$")
_BULLET = re.compile(r"(?:(?<=\s)|^)[*•](?=\s|$)")
_DASH_BULLET = re.compile(r"^\s*-\s+")
_LOWERCASE = re.compile(r"[a-z]")

_BLOCK_LEVEL = {BlockKind.HEADING, BlockKind.SUBHEADING, BlockKind.BULLET_POINT}


def _inline_spans(text: str) -> list[InlineSpan]:
    """Split text into plain and emphasized spans."""
    spans: list[InlineSpan] = []
    position = 0
    for match in _EMPHASIS.finditer(text):
        if match.start() > position:
            spans.append(InlineSpan(text=text[position:match.start()]))
        spans.append(InlineSpan(text=match.group(1), emphasis=True))
        position = match.end()
    if position < len(text):
        spans.append(InlineSpan(text=text[position:]))
    return spans


def _make_block(kind: BlockKind, spans: list[InlineSpan]) -> FormattedBlock | None:
    """Build a block with outer whitespace trimmed; None when nothing is left."""
    spans = [s for s in spans if s.text]
    if not spans:
        return None
    spans[0] = spans[0].model_copy(update={"text": spans[0].text.lstrip()})
    spans[-1] = spans[-1].model_copy(update={"text": spans[-1].text.rstrip()})
    spans = [s for s in spans if s.text]
    if not spans:
        return None
    return FormattedBlock(kind=kind, spans=tuple(spans))


def _split_bullets(text: str) -> list[FormattedBlock]:
    """Split a line into a leading text block and one block per bullet marker."""
    kind = BlockKind.TEXT
    dash = _DASH_BULLET.match(text)
    if dash:
        kind = BlockKind.BULLET_POINT
        text = text[dash.end():]

    blocks: list[FormattedBlock] = []
    current: list[InlineSpan] = []

    def flush() -> None:
        block = _make_block(kind, current)
        if block is not None:
            blocks.append(block)

    for span in _inline_spans(text):
        if span.emphasis:
            current.append(span)
            continue
        pieces = _BULLET.split(span.text)
        if pieces[0]:
            current.append(InlineSpan(text=pieces[0]))
        for piece in pieces[1:]:
            flush()
            kind = BlockKind.BULLET_POINT
            current = [InlineSpan(text=piece)] if piece else []
    flush()
    return blocks


def _after_label(line: str) -> str:
    """Text after the first colon, keeping the emphasis markers of the value."""
    pieces: list[str] = []
    found = False
    for span in _inline_spans(line):
        text = span.text
        if not found:
            if ":" not in text:
                continue
            found = True
            text = text.split(":", 1)[1]
            if not text:
                continue
        pieces.append(f"**{text}**" if span.emphasis else text)
    return "".join(pieces)


def _subheading(line: str) -> list[FormattedBlock] | None:
    """Blocks for a subheading line, or None when the line is not one."""
    plain = _EMPHASIS.sub(r"\1", line)
    match = _SUBHEADING.match(plain)
    if not match:
        return None

    label, rest = match.group(1), match.group(2)
    if not rest or (not _LOWERCASE.search(rest) and not _BULLET.search(rest)):
        return [FormattedBlock.of(BlockKind.SUBHEADING, plain.strip())]

    # Mixed-case value after the label: label is the subheading, value is body text
    return [FormattedBlock.of(BlockKind.SUBHEADING, f"{label}:")] + _split_bullets(_after_label(line))


def _format_line(line: str) -> tuple[list[FormattedBlock], bool]:
    """Format one line; the flag tells whether it is a subheading line."""
    heading = _HEADING.match(line)
    if heading:
        block = _make_block(BlockKind.HEADING, _inline_spans(heading.group(1)))
        return ([block] if block else []), False

    subheading = _subheading(line)
    if subheading is not None:
        return subheading, True

    return _split_bullets(line), False


def format_response(raw_answer: str) -> tuple[FormattedBlock, ...]:
    """
    Convert a model answer into an ordered sequence of formatted blocks.

    Args:
        raw_answer: Free text returned by the model

    Returns:
        Tuple of FormattedBlock; empty for blank input
    """
    if not raw_answer:
        return ()

    text = raw_answer.replace("\r\n", "\n").replace("\r", "\n").strip()
    blocks: list[FormattedBlock] = []
    newlines = 0

    for index, line in enumerate(text.split("\n")):
        if index:
            newlines += 1
        line_blocks, is_subheading = _format_line(line)
        if not line_blocks:
            continue

        if blocks:
            if newlines >= 2 or is_subheading:
                blocks.append(FormattedBlock.section_break())
            elif (
                blocks[-1].kind not in _BLOCK_LEVEL
                and line_blocks[0].kind not in _BLOCK_LEVEL
            ):
                blocks.append(FormattedBlock.line_break())

        blocks.extend(line_blocks)
        newlines = 0

    return tuple(blocks)


def _render_spans(spans: Iterable[InlineSpan]) -> str:
    return "".join(f"**{s.text}**" if s.emphasis else s.text for s in spans)


def render_blocks(blocks: Iterable[FormattedBlock]) -> str:
    """
    Render formatted blocks as Markdown text.

    Headings become "##" lines, subheadings bold lines, bullet points "-"
    items; section breaks leave a blank line.
    """
    out: list[str] = []

    def at_line_start() -> None:
        if out and not out[-1].endswith("\n"):
            out.append("\n")

    for block in blocks:
        if block.kind is BlockKind.HEADING:
            at_line_start()
            out.append(f"## {_render_spans(block.spans)}\n")
        elif block.kind is BlockKind.SUBHEADING:
            at_line_start()
            out.append(f"**{block.text}**\n")
        elif block.kind is BlockKind.BULLET_POINT:
            at_line_start()
            out.append(f"- {_render_spans(block.spans)}\n")
        elif block.kind is BlockKind.LINE_BREAK:
            out.append("\n")
        elif block.kind is BlockKind.SECTION_BREAK:
            at_line_start()
            out.append("\n")
        else:
            out.append(_render_spans(block.spans))

    rendered = "".join(out).strip()
    return re.sub(r"\n{3,}", "\n\n", rendered)

"""Formatted-text rendering of a credibility Report.

The report is laid out in three tabs (overview, content, source) followed by
red flags when any were raised. Presentation layers that show one tab at a
time keep the selected index themselves and map tab ids with select_tab().
"""

from verifact.formatting.response_formatter import render_blocks
from verifact.schemas import (
    FormattedAnalysis,
    ProbeUnavailable,
    Report,
    Translation,
)

REPORT_TABS: tuple[str, ...] = ("overview", "content", "source")


def select_tab(tab_id: str) -> int:
    """
    Map a tab identifier to its index in REPORT_TABS.

    Raises:
        ValueError: If the tab id is unknown
    """
    try:
        return REPORT_TABS.index(tab_id.strip().lower())
    except ValueError:
        raise ValueError(
            f"Unknown report tab {tab_id!r}; expected one of {', '.join(REPORT_TABS)}"
        ) from None


def _analysis_text(value: FormattedAnalysis | ProbeUnavailable) -> str:
    if isinstance(value, ProbeUnavailable):
        return f"_{value.message}_"
    return render_blocks(value.blocks)


def _section(title: str, body: str) -> str:
    return f"### {title}\n\n{body}"


def render_overview(report: Report) -> str:
    rating = report.publisher_rating
    return "\n\n".join([
        _section(
            "Publisher Rating",
            f"**{rating.rating}** | {rating.type} | {rating.bias.value} Bias",
        ),
        _section("AI Credibility Analysis", _analysis_text(report.credibility)),
        _section("Political Bias Analysis", _analysis_text(report.bias)),
    ])


def render_content(report: Report) -> str:
    sections = [
        _section("Sentiment Analysis", _analysis_text(report.sentiment)),
        _section("Fact vs Opinion", _analysis_text(report.fact_opinion)),
        _section("Key Points", _analysis_text(report.key_points)),
    ]
    translation = report.translation
    if isinstance(translation, Translation):
        if translation.translated:
            sections.append(_section(
                f"Translation ({translation.source_language} → {translation.target_language})",
                translation.text,
            ))
    else:
        sections.append(_section("Translation", f"_{translation.message}_"))
    return "\n\n".join(sections)


def render_source(report: Report) -> str:
    source = report.source_check
    dates = report.date_verification
    author = report.author_credibility

    date_line = dates.status.value
    if dates.date is not None:
        date_line += f"\n\nPublished: {dates.date.isoformat()} ({dates.days_old} days ago)"

    return "\n\n".join([
        _section("Domain", f"{source.domain or 'unknown'}: {source.status.label}"),
        _section("Date Verification", date_line),
        _section(
            "Author Credibility",
            f"**{author.status.value}** (score {author.score}/7)\n\nAuthor: {author.author}",
        ),
        _section("Find Related Coverage", _analysis_text(report.related_searches)),
    ])


def render_report(report: Report) -> str:
    """
    Render the whole report as Markdown grouped by tab.

    Returns:
        Markdown text; red flags are appended only when present
    """
    parts = [
        f"# VeriFact Analysis: {report.domain or 'unknown source'}",
        "## Overview",
        render_overview(report),
        "## Content",
        render_content(report),
        "## Source",
        render_source(report),
    ]
    if report.red_flags:
        flags = "\n".join(f"- {flag}" for flag in report.red_flags)
        parts.append(f"## Red Flags\n\n{flags}")
    return "\n\n".join(parts) + "\n"

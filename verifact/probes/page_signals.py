"""Page-structure credibility signals: publication date freshness and author credibility.

Both functions read only PageMetadata (plus the current time for the date
check) and are total: every input yields a value.
"""

from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as dateutil_parser
from loguru import logger

from verifact.config.settings import settings
from verifact.config.source_credibility import (
    AUTHOR_POINTS,
    BIO_POINTS,
    CONTACT_POINTS,
    HIGH_CREDIBILITY_SCORE,
    MEDIUM_CREDIBILITY_SCORE,
    UNKNOWN,
)
from verifact.schemas import (
    AuthorCredibility,
    AuthorIndicators,
    CredibilityLevel,
    DateStatus,
    DateVerification,
    PageMetadata,
)

_log = logger.bind(component="PageSignals")

# Fill-in values for missing date parts; every field differs between the two
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a date string, returning None when it is not a calendar date.

    Year, month and day must all be written out: dateutil fills missing parts
    from a default, so the value is parsed against two defaults that differ in
    each of them and rejected when the results disagree. Naive results are
    read as UTC so they compare against an aware "now".
    """
    try:
        parsed = dateutil_parser.parse(value, default=_DEFAULT_A)
        if parsed != dateutil_parser.parse(value, default=_DEFAULT_B):
            return None
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def find_publication_date(metadata: PageMetadata) -> Optional[datetime]:
    """First parseable date among the page's date candidates, in scan order."""
    for candidate in metadata.date_candidates:
        for value in candidate.values():
            parsed = parse_date(value)
            if parsed is not None:
                return parsed
    return None


def verify_date(
    metadata: PageMetadata,
    now: Optional[datetime] = None,
    outdated_after_days: Optional[int] = None,
) -> DateVerification:
    """
    Check how old the article is.

    Age is counted in whole days (floored). An article is potentially outdated
    when it is strictly older than the threshold, so exactly 30 days old is
    still recent and 31 days is outdated with the default threshold.

    Args:
        metadata: Page metadata holding date candidates
        now: Reference time (defaults to the current UTC time)
        outdated_after_days: Threshold in days (defaults to settings)

    Returns:
        DateVerification with status, date and age
    """
    published = find_publication_date(metadata)
    if published is None:
        _log.debug("No parseable publication date found")
        return DateVerification(status=DateStatus.NOT_FOUND)

    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    threshold = (
        settings.outdated_after_days if outdated_after_days is None else outdated_after_days
    )
    # Future-dated articles count as zero days old
    days_old = max(0, (now - published).days)
    status = DateStatus.POTENTIALLY_OUTDATED if days_old > threshold else DateStatus.RECENT

    return DateVerification(status=status, date=published.date(), days_old=days_old)


def check_author_credibility(metadata: PageMetadata) -> AuthorCredibility:
    """
    Score author credibility from presence of byline, contact link and bio.

    Scoring:
    - Author named: +3
    - Contact affordance (e.g. mailto link): +2
    - Author biography: +2

    Thresholds: >= 5 High, >= 3 Medium, otherwise Low.
    """
    author = (metadata.byline or "").strip() or UNKNOWN
    has_author = author != UNKNOWN

    score = 0
    if has_author:
        score += AUTHOR_POINTS
    if metadata.has_contact:
        score += CONTACT_POINTS
    if metadata.has_bio:
        score += BIO_POINTS

    if score >= HIGH_CREDIBILITY_SCORE:
        status = CredibilityLevel.HIGH
    elif score >= MEDIUM_CREDIBILITY_SCORE:
        status = CredibilityLevel.MEDIUM
    else:
        status = CredibilityLevel.LOW

    return AuthorCredibility(
        author=author,
        score=score,
        status=status,
        indicators=AuthorIndicators(
            has_author=has_author,
            has_contact=metadata.has_contact,
            has_bio=metadata.has_bio,
        ),
    )

"""Domain-level credibility signals: trusted-source allowlist and publisher ratings.

Both lookups are pure functions of the page hostname over the static tables in
verifact.config.source_credibility. Unknown domains produce the "Unknown"
sentinel values, never an error.

Usage:
    trust = check_source("www.reuters.com")
    rating = rate_publisher("www.reuters.com")
"""

from loguru import logger

from verifact.config.source_credibility import (
    PUBLISHER_RATINGS,
    TRUSTED_SOURCES,
    UNKNOWN,
)
from verifact.schemas import Bias, PublisherRating, SourceTrust, TrustStatus

_log = logger.bind(component="SourceSignals")


def normalize_domain(hostname: str) -> str:
    """Lowercase a hostname and strip a leading www. prefix."""
    domain = (hostname or "").strip().lower()
    if domain.startswith("www."):
        domain = domain[4:]
    return domain


def is_trusted_domain(hostname: str) -> bool:
    """True when any allowlisted domain occurs inside the hostname."""
    domain = (hostname or "").lower()
    return any(source in domain for source in TRUSTED_SOURCES)


def check_source(hostname: str) -> SourceTrust:
    """
    Check the page hostname against the trusted-source allowlist.

    Args:
        hostname: Page hostname, e.g. "www.bbc.com"

    Returns:
        SourceTrust with the lowercase hostname as domain
    """
    domain = (hostname or "").lower()
    trusted = is_trusted_domain(domain)
    return SourceTrust(
        domain=domain,
        is_trusted=trusted,
        status=TrustStatus.TRUSTED if trusted else TrustStatus.UNKNOWN,
    )


def rate_publisher(hostname: str) -> PublisherRating:
    """
    Look up the publisher rating for a hostname.

    The lookup is an exact match on the normalized domain, so subdomains other
    than www. are not rated.

    Args:
        hostname: Page hostname

    Returns:
        PublisherRating; unrated domains carry Unknown in rating, type and bias
    """
    domain = normalize_domain(hostname)
    entry = PUBLISHER_RATINGS.get(domain)

    if entry is None:
        _log.debug(f"No publisher rating for {domain or '<empty>'}")
        rating, publication_type, bias = UNKNOWN, UNKNOWN, Bias.UNKNOWN
    else:
        rating, publication_type, bias_label = entry
        bias = Bias(bias_label)

    return PublisherRating(
        domain=domain,
        rating=rating,
        type=publication_type,
        bias=bias,
        is_trusted=is_trusted_domain(domain),
    )

"""
Parser for HY-TEK Realtime Results event pages.

Each page holds one event's results as monospaced text inside a <pre> block.
This module isolates that text, classifies the race from its headline and
routes the block to the individual or relay parser.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup

from .metadata import extract_metadata, find_headline
from .models import EventResultSet, Session
from .race import classify_race
from .registry import INDIVIDUAL, RELAY, get_parser
from .sections import parse_sections

logger = logging.getLogger(__name__)


def can_parse(content: str) -> bool:
    """Check if this parser can handle the content."""
    return "HY-TEK'S MEET MANAGER" in content.upper() or re.search(r'Event \d+\s+', content) is not None


def extract_results_text(html: str) -> Optional[str]:
    """Return the text of the first <pre> block, or None if the page has none."""
    soup = BeautifulSoup(html, 'html.parser')
    pre = soup.find('pre')
    if pre is None:
        return None
    return pre.get_text()


def extract_event_name(html: str) -> Optional[str]:
    """Return the event headline of a page, e.g. "Event 3  Men 500 Yard Freestyle"."""
    text = extract_results_text(html)
    if text is None:
        return None
    return find_headline(text) or None


def parse_event_text(text: str, session: Session, event_name: str = None) -> EventResultSet:
    """
    Parse an already isolated results block.

    Args:
        text: Content of the page's <pre> block
        session: Prelims or finals, decided by the caller from the URL
        event_name: Name to report; defaults to the headline

    Returns:
        EventResultSet with individual or relay results
    """
    metadata = extract_metadata(text)
    race = classify_race(metadata.headline)
    if race is None:
        logger.warning(f"Could not classify race from headline: {metadata.headline!r}")

    if not event_name:
        event_name = metadata.headline

    kind = RELAY if race is not None and race.is_relay else INDIVIDUAL
    results = parse_sections(text, get_parser(kind))

    logger.debug(f"Parsed {len(results)} results for {event_name} ({session.value})")

    return EventResultSet(
        event_name=event_name,
        session=session,
        metadata=metadata,
        race=race,
        results=tuple(results),
    )


def parse_event_page(html: str, session: Session, event_name: str = None) -> EventResultSet:
    """
    Parse a full event page.

    A page without a <pre> block gives an empty result set rather than an
    error, since some pages only carry headers.
    """
    text = extract_results_text(html)
    if text is None:
        logger.warning(f"No <pre> block found for {event_name or 'event page'}")
        return EventResultSet(event_name=event_name or '', session=session)

    return parse_event_text(text, session, event_name)

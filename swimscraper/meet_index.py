"""
Meet index parsing for HY-TEK Realtime Results sites.

A meet lives at a base URL with an ``evtindex.htm`` page linking to one page
per event and session, named like ``240327F003.htm``: the character before the
three-digit event number is ``P`` for prelims or ``F`` for finals.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup

from .parsers.models import Session

logger = logging.getLogger(__name__)

INDEX_PAGE = 'evtindex.htm'
EVENT_SUFFIX = '.htm'

URL_TYPE_MEET = 'meet'
URL_TYPE_EVENT = 'event'

SESSION_CODES = tuple(session.code for session in Session)


def detect_url_type(url: str) -> str:
    """If a URL ends in .htm it is an event page, otherwise a meet."""
    if url.strip().rstrip('/').endswith(EVENT_SUFFIX):
        return URL_TYPE_EVENT
    return URL_TYPE_MEET


def index_url(base_url: str) -> str:
    return f"{base_url.rstrip('/')}/{INDEX_PAGE}"


def _session_code(filename: str) -> Optional[str]:
    code = filename[:-len(EVENT_SUFFIX)] if filename.endswith(EVENT_SUFFIX) else filename
    if len(code) < 4:
        return None
    return code[-4]


def session_from_url(url: str) -> Session:
    """
    Read the session from an event URL's filename.

    Raises:
        ValueError: if the filename carries no P/F session code
    """
    filename = url.strip().rstrip('/').rsplit('/', 1)[-1]
    code = _session_code(filename)
    if code not in SESSION_CODES:
        raise ValueError(f"Could not determine prelims/finals session from URL: {url}")
    return Session.from_code(code)


@dataclass
class EventLink:
    """One link from the meet index."""
    href: str
    url: str
    event_name: str
    event_number: int
    session: Session


def parse_event_link(href: str, text: str, base_url: str) -> Optional[EventLink]:
    """
    Build an EventLink from an index anchor, or None if it is not an event page.

    Link text looks like "3 Men 500 Yard Freestyle Finals"; the leading event
    number and the session word are dropped from the event name.
    """
    if not href or not href.endswith(EVENT_SUFFIX):
        return None

    code = href[:-len(EVENT_SUFFIX)]
    if len(code) < 4:
        return None

    session_code = code[-4]
    if session_code not in SESSION_CODES:
        return None

    number = code[-3:]
    event_number = int(number) if number.isdigit() else 0

    text = (text or '').strip()
    parts = text.split(' ', 1)
    event_name = parts[1].strip() if len(parts) > 1 else text
    event_name = event_name.replace(' Prelims', '').replace(' Finals', '')

    return EventLink(
        href=href,
        url=f"{base_url.rstrip('/')}/{href}",
        event_name=event_name,
        event_number=event_number,
        session=Session.from_code(session_code),
    )


@dataclass
class MeetEvent:
    """An event with links to its prelims and finals pages."""
    name: str
    number: int
    prelims_link: Optional[EventLink] = None
    finals_link: Optional[EventLink] = None

    def set_link(self, link: EventLink):
        if link.session is Session.PRELIMS:
            self.prelims_link = link
        else:
            self.finals_link = link

    def links(self) -> list[EventLink]:
        return [link for link in (self.prelims_link, self.finals_link) if link is not None]


class Meet:
    """All events found on a meet index page."""

    def __init__(self, base_url: str, title: str = None):
        self.base_url = base_url.rstrip('/')
        self.title = title
        self.events = {}

    def add_link(self, link: EventLink):
        event = self.events.get(link.event_name)
        if event is None:
            event = MeetEvent(name=link.event_name, number=link.event_number)
            self.events[link.event_name] = event
        event.set_link(link)

    def links(self) -> list[EventLink]:
        """Every event page link, ordered by event number then session."""
        links = [link for event in self.events.values() for link in event.links()]
        return sorted(links, key=lambda l: (l.event_number, l.session is Session.FINALS))


def parse_meet_index(html: str, base_url: str) -> Meet:
    """Parse the meet index page into a Meet with all event links."""
    soup = BeautifulSoup(html, 'html.parser')

    title = soup.title.get_text(strip=True) if soup.title else None
    meet = Meet(base_url, title=title or None)

    for anchor in soup.find_all('a'):
        link = parse_event_link(anchor.get('href'), anchor.get_text(), meet.base_url)
        if link is None:
            continue
        meet.add_link(link)

    logger.info(f"Found {len(meet.events)} events on meet index {base_url}")
    return meet

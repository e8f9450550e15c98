"""
Results scraper for HY-TEK Realtime Results swim meet pages.
"""

from .parsers import (
    CompetitorResult,
    EventMetadata,
    EventResultSet,
    RaceDescriptor,
    RelayLeg,
    RelayTeamResult,
    Session,
    Split,
    parse_event_page,
    parse_event_text,
)

__version__ = '0.1.0'

__all__ = [
    'CompetitorResult',
    'EventMetadata',
    'EventResultSet',
    'RaceDescriptor',
    'RelayLeg',
    'RelayTeamResult',
    'Session',
    'Split',
    'parse_event_page',
    'parse_event_text',
]

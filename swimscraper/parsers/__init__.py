"""Parser registry and imports."""

from .hytek_text import (
    can_parse,
    extract_event_name,
    extract_results_text,
    parse_event_page,
    parse_event_text,
)
from .individual import parse_individual_results, parse_individual_section
from .metadata import extract_metadata
from .models import (
    CompetitorResult,
    EventMetadata,
    EventResultSet,
    RaceDescriptor,
    RelayLeg,
    RelayTeamResult,
    Session,
    Split,
)
from .race import classify_race
from .registry import PARSERS, get_parser
from .relay import parse_relay_results, parse_relay_section
from .splits import extract_splits


__all__ = [
    'CompetitorResult',
    'EventMetadata',
    'EventResultSet',
    'RaceDescriptor',
    'RelayLeg',
    'RelayTeamResult',
    'Session',
    'Split',
    'can_parse',
    'classify_race',
    'extract_event_name',
    'extract_metadata',
    'extract_results_text',
    'extract_splits',
    'get_parser',
    'parse_event_page',
    'parse_event_text',
    'parse_individual_results',
    'parse_individual_section',
    'parse_relay_results',
    'parse_relay_section',
    'PARSERS',
]

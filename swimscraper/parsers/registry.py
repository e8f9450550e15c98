"""Section parsers keyed by event kind."""

from .individual import parse_individual_section
from .relay import parse_relay_section

INDIVIDUAL = 'individual'
RELAY = 'relay'

PARSERS = {
    INDIVIDUAL: parse_individual_section,
    RELAY: parse_relay_section,
}


def get_parser(name: str):
    """Get a section parser by name."""
    if name not in PARSERS:
        raise ValueError(f"Unknown parser: {name}. Available: {list(PARSERS.keys())}")
    return PARSERS[name]

"""
Parser for individual (non-relay) event result sections.
"""

from typing import Optional

from .models import CompetitorResult
from .sections import parse_sections
from .splits import extract_splits
from .tokens import (
    DQ_MARKER,
    is_class_year_token,
    is_final_time_token,
    is_placement_token,
    split_result_tail,
)

MIN_HEADER_TOKENS = 5


def parse_individual_section(lines: list[str]) -> Optional[CompetitorResult]:
    """
    Parse one swimmer's section.

    Header line format:
        place  Last, First  YR  School Name  seed  final  [points]
    Example:
        "1 Marchand, Leon JR ASU 1:40.22 1:38.19 20"

    The class year is the anchor between name and school; a header without
    one cannot be split and the section is rejected.

    Returns:
        CompetitorResult, or None if the header cannot be parsed
    """
    parts = lines[0].split()
    if len(parts) < MIN_HEADER_TOKENS or not is_placement_token(parts[0]):
        return None

    place = None if parts[0] == DQ_MARKER else int(parts[0])

    tail = split_result_tail(parts)
    if not is_final_time_token(tail.final_time):
        return None

    # First class-year token before the tail splits name from school
    year_idx = None
    for i in range(1, tail.start):
        if is_class_year_token(parts[i]):
            year_idx = i
            break

    if year_idx is None:
        return None

    reaction_time, splits = extract_splits(lines[1:])

    return CompetitorResult(
        place=place,
        name=' '.join(parts[1:year_idx]),
        class_year=parts[year_idx],
        school=' '.join(parts[year_idx + 1:tail.start]),
        seed_time=tail.seed_time,
        final_time=tail.final_time,
        reaction_time=reaction_time,
        splits=splits,
    )


def parse_individual_results(text: str) -> list[CompetitorResult]:
    """Parse every swimmer section in a results block."""
    return parse_sections(text, parse_individual_section)

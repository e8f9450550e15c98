"""
Parser for relay event result sections.

A relay section looks like:

      1 Florida                             1:21.66    1:20.15N  40
         1) Chaney, Adam SR               2) r:0.18 Smith, Julian JR
         3) r:0.19 Liendo, Josh SO        4) r:0.07 McDuff, Macguire JR
         r:+0.55  20.45        40.55 (20.10)  1:00.43 (19.88)  1:20.15 (19.72)

Disqualified teams print "--" instead of a place and usually a one-line
reason right under the header:

     -- Missouri                            3:06.12         DQ
         Early take-off swimmer #4
"""

import re
from dataclasses import replace
from typing import Optional

from .models import RELAY_LEG_COUNT, RelayLeg, RelayTeamResult
from .sections import parse_sections
from .splits import extract_splits
from .tokens import (
    DQ_MARKER,
    REACTION_SENTINEL,
    is_class_year_token,
    is_final_time_token,
    is_placement_token,
    is_reaction_token,
    split_result_tail,
)

MIN_HEADER_TOKENS = 3

# "1)" .. "4)" only at line start or after whitespace, so "(9.93)" never matches
LEG_MARKER = re.compile(r'(?<!\S)([1-4])\)')


def _has_name_chars(line: str) -> bool:
    return any(c.isascii() and c.isalpha() and c != REACTION_SENTINEL for c in line)


def is_roster_line(line: str) -> bool:
    """Check whether a line lists relay swimmers rather than split times."""
    return _has_name_chars(line) and LEG_MARKER.search(line) is not None


def _is_dq_description(line: str) -> bool:
    text = line.strip()
    if not text or not any(c.isalpha() for c in text):
        return False
    if LEG_MARKER.match(text) or is_reaction_token(text.split()[0]):
        return False
    return True


def parse_leg_text(text: str, leg_number: int) -> Optional[RelayLeg]:
    """
    Parse one swimmer's text, e.g. "r:0.18 Smith, Julian JR" or "Chaney, Adam SR".

    Legs 2-4 print their exchange reaction time before the name. Leg 1's
    reaction time is on the split line instead and is not read here.
    """
    parts = text.split()
    if not parts:
        return None

    reaction_time = None
    start = 0
    if leg_number > 1 and is_reaction_token(parts[0]):
        reaction_time = parts[0]
        start = 1

    if start >= len(parts):
        return None

    year_idx = None
    for i in range(start, len(parts)):
        if is_class_year_token(parts[i]):
            year_idx = i
            break

    if year_idx is None:
        # No class year printed, keep everything as the name
        return RelayLeg(name=' '.join(parts[start:]), class_year='', reaction_time=reaction_time)

    return RelayLeg(
        name=' '.join(parts[start:year_idx]),
        class_year=parts[year_idx],
        reaction_time=reaction_time,
    )


def parse_roster(lines: list[str]) -> list[RelayLeg]:
    """
    Read the four relay legs from roster lines.

    Legs whose marker is never found stay as empty RelayLeg entries.
    """
    legs = [RelayLeg() for _ in range(RELAY_LEG_COUNT)]

    for line in lines:
        if not _has_name_chars(line):
            continue

        markers = list(LEG_MARKER.finditer(line))
        for idx, marker in enumerate(markers):
            leg_number = int(marker.group(1))

            # This leg ends where the next higher-numbered marker begins
            end = min(
                (m.start() for m in markers[idx + 1:] if int(m.group(1)) > leg_number),
                default=len(line),
            )

            leg = parse_leg_text(line[marker.end():end], leg_number)
            if leg is not None:
                legs[leg_number - 1] = leg

    return legs


def parse_relay_section(lines: list[str]) -> Optional[RelayTeamResult]:
    """
    Parse one relay team's section (header, roster, splits).

    Returns:
        RelayTeamResult, or None if the header cannot be parsed
    """
    parts = lines[0].split()
    if len(parts) < MIN_HEADER_TOKENS or not is_placement_token(parts[0]):
        return None

    place = None if parts[0] == DQ_MARKER else int(parts[0])

    tail = split_result_tail(parts)
    if not is_final_time_token(tail.final_time):
        return None

    # Team name is everything between place and the seed/final columns
    if tail.start <= 1:
        return None
    team_name = ' '.join(parts[1:tail.start])

    rest = lines[1:]
    dq_description = None
    if place is None and rest and _is_dq_description(rest[0]):
        dq_description = rest[0].strip()
        rest = rest[1:]

    roster_lines = [line for line in rest if is_roster_line(line)]
    split_lines = [line for line in rest if not is_roster_line(line)]

    legs = parse_roster(roster_lines)
    first_reaction, splits = extract_splits(split_lines)
    legs[0] = replace(legs[0], reaction_time=first_reaction)

    return RelayTeamResult(
        place=place,
        team_name=team_name,
        seed_time=tail.seed_time,
        final_time=tail.final_time,
        dq_description=dq_description,
        legs=tuple(legs),
        splits=splits,
    )


def parse_relay_results(text: str) -> list[RelayTeamResult]:
    """Parse every team section in a relay results block."""
    return parse_sections(text, parse_relay_section)

"""
Groups the lines of a results block into record sections.

A section is one header line (a place number or the DQ marker followed by the
rest of the result) plus every continuation line up to the next header.
"""

import logging
from typing import Callable, Iterator, Optional

from .metadata import is_headline
from .tokens import is_placement_token

logger = logging.getLogger(__name__)


def is_section_header(line: str) -> bool:
    """Check whether a line starts a new competitor or team result."""
    tokens = line.split()
    return bool(tokens) and is_placement_token(tokens[0])


def lines_after_headline(lines: list[str]) -> list[str]:
    """
    Drop the page header above the event headline.

    Meet titles such as "2024 NCAA Division I Men's Championships" start with
    a number and would otherwise read as a result. A block without a headline
    is returned whole.
    """
    for i, line in enumerate(lines):
        trimmed = line.strip()
        if trimmed and is_headline(trimmed):
            return lines[i + 1:]
    return lines


def segment_sections(lines: list[str]) -> Iterator[list[str]]:
    """
    Yield each record section as a list of raw lines.

    Lines before the first header are skipped. Blank lines inside a section
    are kept so parsers see the block exactly as printed.
    """
    i = 0
    while i < len(lines):
        if not is_section_header(lines[i]):
            i += 1
            continue

        # Find the next header or end of block
        j = i + 1
        while j < len(lines) and not is_section_header(lines[j]):
            j += 1

        yield lines[i:j]
        i = j


def parse_sections(text: str, section_parser: Callable[[list[str]], Optional[object]]) -> list:
    """
    Run a section parser over every record section below the headline.

    Sections the parser rejects are logged and left out.
    """
    results = []

    for section in segment_sections(lines_after_headline(text.splitlines())):
        result = section_parser(section)
        if result is None:
            logger.debug(f"Skipping unparseable result line: {section[0].strip()!r}")
            continue
        results.append(result)

    return results

"""
Header metadata extraction: venue, meet name, headline and standing records.

A typical page starts like this:

    Indiana University - Site License   HY-TEK's MEET MANAGER 8.0 - 3:14 PM
                  2024 NCAA Division I Men's Championships
                       Indiana University Natatorium
                             Results

    Event 3  Men 500 Yard Freestyle
    ===============================================================
        NCAA: ! 4:02.31  3/22/2023 Leon Marchand, Arizona St
        Meet: M 4:06.32  3/24/2022 Bobby Finke, Florida
    ===============================================================
"""

from .models import EventMetadata

LICENSE_MARKERS = ('site license', 'license hy-tek')
MIN_DELIMITER_LENGTH = 5


def is_headline(line: str) -> bool:
    """An event headline contains "Event" and at least one digit."""
    return 'Event' in line and any(c.isdigit() for c in line)


def is_delimiter_line(line: str) -> bool:
    return len(line) >= MIN_DELIMITER_LENGTH and set(line) == {'='}


def find_headline(text: str) -> str:
    """Return the first headline-shaped line of a results block, or ''."""
    for line in text.splitlines():
        trimmed = line.strip()
        if trimmed and is_headline(trimmed):
            return trimmed
    return ''


def _meet_and_venue(header_lines: list[str]) -> tuple:
    """
    Pick meet name and venue out of the lines above the headline.

    Returns:
        (meet_name, venue)
    """
    license_idx = next(
        (i for i, line in enumerate(header_lines)
         if any(marker in line.lower() for marker in LICENSE_MARKERS)),
        None,
    )

    if license_idx is not None:
        following = header_lines[license_idx + 1:]
        meet_name = following[0] if len(following) > 0 else None
        venue = following[1] if len(following) > 1 else None
        return meet_name, venue

    # Without a license line the positions are read the other way round:
    # first line is the venue, second is the meet name.
    venue = header_lines[0] if len(header_lines) > 0 else None
    meet_name = header_lines[1] if len(header_lines) > 1 else None
    return meet_name, venue


def extract_metadata(text: str) -> EventMetadata:
    """
    Extract metadata from the text of a results block.

    Records are the lines between the first two "=====" delimiters after the
    headline. Lines are trimmed and blank lines dropped before anything is
    classified.
    """
    header_lines = []
    headline = ''
    records = []
    in_records = False

    for line in text.splitlines():
        trimmed = line.strip()
        if not trimmed:
            continue

        if not headline:
            if is_headline(trimmed):
                headline = trimmed
            else:
                header_lines.append(trimmed)
            continue

        if is_delimiter_line(trimmed):
            if in_records:
                break
            in_records = True
            continue

        if in_records:
            records.append(trimmed)

    meet_name, venue = _meet_and_venue(header_lines)

    return EventMetadata(
        venue=venue,
        meet_name=meet_name,
        headline=headline,
        records=tuple(records),
    )

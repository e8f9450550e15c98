"""
Race classification from an event headline such as
"Event 10  Men 200 Yard IM" or "Event 1  Women 200 Yard Medley Relay".
"""

from typing import Optional

from .models import RaceDescriptor
from .tokens import COURSE_WORDS, GENDERS, STROKES


def _is_distance(token: str) -> bool:
    return token.isascii() and token.isdigit()


def classify_race(headline: str) -> Optional[RaceDescriptor]:
    """
    Parse race information from an event headline by token classification.

    Each token after the event number is checked against the gender, distance,
    course and stroke vocabularies in that order. Anything else (age groups
    like "13-14", "Time", "Trial") is kept in ``unclassified_tokens``.

    Returns:
        RaceDescriptor, or None when there is no "Event <number>" pair
    """
    tokens = headline.split()

    event_idx = next((i for i, t in enumerate(tokens) if t.lower() == 'event'), None)
    if event_idx is None or event_idx + 1 >= len(tokens):
        return None

    number = tokens[event_idx + 1]
    if not _is_distance(number):
        return None

    gender = None
    distance = None
    course_parts = []
    stroke_parts = []
    other = []

    for token in tokens[event_idx + 2:]:
        lower = token.lower()
        if lower in GENDERS:
            gender = token
        elif _is_distance(token):
            distance = int(token)
        elif lower in COURSE_WORDS:
            course_parts.append(token)
        elif lower in STROKES:
            stroke_parts.append(token)
        else:
            other.append(token)

    return RaceDescriptor(
        event_number=int(number),
        gender=gender,
        distance=distance,
        course=' '.join(course_parts) or None,
        stroke=' '.join(stroke_parts) or None,
        is_relay='relay' in headline.lower(),
        unclassified_tokens=tuple(other),
    )

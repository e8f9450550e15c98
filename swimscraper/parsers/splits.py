"""
Split and reaction time extraction from continuation lines.
"""

import string
from typing import Iterable, Optional

from .models import Split
from .tokens import is_reaction_token, is_valid_time_token

SPLIT_INTERVAL = 50


def extract_splits(lines: Iterable[str]) -> tuple[Optional[str], tuple]:
    """
    Scan continuation lines for cumulative split times.

    Example lines:
        r:+0.62  21.09        44.62 (23.53)
        1:08.61 (23.99)  1:32.73 (24.12)

    Parenthesized values are interval times and are never stored. The first
    token starting with the reaction sentinel is taken as the reaction time.
    Distances are assigned in order: 50, 100, 150, ...

    Returns:
        (reaction_time, splits)
    """
    reaction_time = None
    splits = []

    for line in lines:
        for token in line.split():
            if token.startswith('('):
                continue

            if is_reaction_token(token):
                if reaction_time is None:
                    reaction_time = token
                continue

            if token[0] in string.digits and is_valid_time_token(token):
                splits.append(Split(distance=SPLIT_INTERVAL * (len(splits) + 1), time=token))

    return reaction_time, tuple(splits)

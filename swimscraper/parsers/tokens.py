"""
Token classifiers and the fixed vocabularies used to read HY-TEK result text.
"""

import string
from typing import NamedTuple, Optional

DQ_MARKER = '--'
REACTION_SENTINEL = 'r'

# Eligibility codes; two-digit ages/grades are accepted separately
CLASS_YEARS = frozenset({'FR', 'SO', 'JR', 'SR', 'GR', '5Y', 'RS', 'FF'})

DQ_STATUSES = frozenset({'DQ', 'DSQ', 'DFS', 'DNS'})

GENDERS = frozenset({'men', 'women', 'boys', 'girls', 'mixed', 'male', 'female'})

COURSE_WORDS = frozenset({
    'yard', 'yards', 'meter', 'meters',
    'lc', 'sc', 'lcm', 'scm', 'scy',
    'long', 'short',
})

STROKES = frozenset({
    'freestyle', 'free',
    'backstroke', 'back',
    'breaststroke', 'breast',
    'butterfly', 'fly',
    'individual', 'medley', 'im',
    'relay',
})

# Largest value treated as a scoring-points column
MAX_POINTS = 255


def _is_ascii_digits(s: str) -> bool:
    return bool(s) and s.isascii() and s.isdigit()


def is_placement_token(token: str) -> bool:
    """A place number, or the DQ marker printed instead of one."""
    return _is_ascii_digits(token) or token == DQ_MARKER


def is_class_year_token(token: str) -> bool:
    """
    Check for a class year such as "JR" or a two-digit age like "14".

    Only two-character tokens qualify, so "JRS" or "123" never match.
    """
    if len(token) != 2:
        return False
    return token.upper() in CLASS_YEARS or _is_ascii_digits(token)


def is_dq_status(token: str) -> bool:
    return token in DQ_STATUSES


def is_points_token(token: str) -> bool:
    """Points are a small non-negative integer at the end of a result line."""
    return _is_ascii_digits(token) and int(token) <= MAX_POINTS


def is_final_time_token(token: str) -> bool:
    """A finals column entry: a swim time (exhibition swims carry an x prefix) or a DQ status."""
    return is_dq_status(token) or is_valid_time_token(token.lstrip('xX'))


def is_reaction_token(token: str) -> bool:
    return token.startswith(REACTION_SENTINEL)


def is_valid_time_token(token: str) -> bool:
    """
    Check whether a token looks like a swim time.

    Valid: 21.09, 44.62, 1:08.61, 4:02.31N
    Invalid: 1., 10., 1:2
    Trailing letters (record flags such as N or A) are ignored.
    """
    s = token.rstrip(string.ascii_letters)

    if ':' in s:
        before, after = s.split(':', 1)
        return (
            _is_ascii_digits(before)
            and '.' in after
            and len(after) >= 4
        )

    if '.' in s:
        fraction = s.rsplit('.', 1)[1]
        return _is_ascii_digits(fraction)

    return False


class ResultTail(NamedTuple):
    """Fields read from the right-hand end of a result header line."""
    start: int
    seed_time: Optional[str]
    final_time: str
    points: Optional[int]


def _looks_like_seed(token: str) -> bool:
    # Exhibition swims carry an x prefix; unseeded entries print NT
    return token.upper() == 'NT' or is_valid_time_token(token.lstrip('xX'))


def split_result_tail(tokens: list[str]) -> ResultTail:
    """
    Read seed time, final time and points from the end of a header line.

    Three layouts are recognised:
        ... 1:40.22 1:38.19 20     seed, final, points
        ... 3:06.12 DQ             seed (when printed), DQ status
        ... 1:40.22 x1:41.02       seed, final (no points)

    ``start`` is the index of the first tail token; everything between the
    place and ``start`` belongs to the name, class year and school.
    """
    n = len(tokens)
    last = tokens[-1]

    if is_points_token(last):
        return ResultTail(start=n - 3, seed_time=tokens[n - 3], final_time=tokens[n - 2], points=int(last))

    if is_dq_status(last):
        if n > 2 and _looks_like_seed(tokens[n - 2]):
            return ResultTail(start=n - 2, seed_time=tokens[n - 2], final_time=last, points=None)
        return ResultTail(start=n - 1, seed_time=None, final_time=last, points=None)

    # No points column (exhibition or non-scoring entry)
    if n - 1 >= 3:
        return ResultTail(start=n - 2, seed_time=tokens[n - 2], final_time=last, points=None)
    return ResultTail(start=n - 1, seed_time=None, final_time=last, points=None)

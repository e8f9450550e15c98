"""
Value objects produced by the results parsers.
All of them are immutable and built once per parse.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Session(Enum):
    """Whether a result page belongs to the prelims or finals session."""
    PRELIMS = 'Prelims'
    FINALS = 'Finals'

    @property
    def code(self) -> str:
        return self.value[0]

    @classmethod
    def from_code(cls, code: str) -> 'Session':
        """Build a session from the one-letter code used in event filenames."""
        for session in cls:
            if session.code == code:
                return session
        raise ValueError(f"Unknown session code: {code!r}")


@dataclass(frozen=True)
class Split:
    """Cumulative time at a 50-unit checkpoint."""
    distance: int
    time: str

    def to_dict(self) -> dict:
        return {'distance': self.distance, 'time': self.time}


def _splits_from_dicts(items) -> tuple:
    return tuple(Split(distance=s['distance'], time=s['time']) for s in items or ())


@dataclass(frozen=True)
class CompetitorResult:
    """One swimmer's line in an individual event."""
    place: Optional[int]
    name: str
    class_year: str
    school: str
    seed_time: Optional[str]
    final_time: str
    reaction_time: Optional[str] = None
    splits: tuple = ()

    @property
    def is_disqualified(self) -> bool:
        return self.place is None

    def to_dict(self) -> dict:
        return {
            'place': self.place,
            'name': self.name,
            'class_year': self.class_year,
            'school': self.school,
            'seed_time': self.seed_time,
            'final_time': self.final_time,
            'reaction_time': self.reaction_time,
            'splits': [s.to_dict() for s in self.splits],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CompetitorResult':
        return cls(
            place=data.get('place'),
            name=data['name'],
            class_year=data['class_year'],
            school=data['school'],
            seed_time=data.get('seed_time'),
            final_time=data['final_time'],
            reaction_time=data.get('reaction_time'),
            splits=_splits_from_dicts(data.get('splits')),
        )


@dataclass(frozen=True)
class RelayLeg:
    """One swimmer of a relay. Empty name and year means the leg was not found."""
    name: str = ''
    class_year: str = ''
    reaction_time: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return bool(self.name)

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'class_year': self.class_year,
            'reaction_time': self.reaction_time,
        }


RELAY_LEG_COUNT = 4


@dataclass(frozen=True)
class RelayTeamResult:
    """One team's entry in a relay event."""
    place: Optional[int]
    team_name: str
    seed_time: Optional[str]
    final_time: str
    dq_description: Optional[str] = None
    legs: tuple = field(default_factory=lambda: (RelayLeg(),) * RELAY_LEG_COUNT)
    splits: tuple = ()

    def __post_init__(self):
        if len(self.legs) != RELAY_LEG_COUNT:
            raise ValueError(f"A relay team needs {RELAY_LEG_COUNT} legs, got {len(self.legs)}")

    @property
    def is_disqualified(self) -> bool:
        return self.place is None

    def to_dict(self) -> dict:
        return {
            'place': self.place,
            'team_name': self.team_name,
            'seed_time': self.seed_time,
            'final_time': self.final_time,
            'dq_description': self.dq_description,
            'legs': [leg.to_dict() for leg in self.legs],
            'splits': [s.to_dict() for s in self.splits],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'RelayTeamResult':
        return cls(
            place=data.get('place'),
            team_name=data['team_name'],
            seed_time=data.get('seed_time'),
            final_time=data['final_time'],
            dq_description=data.get('dq_description'),
            legs=tuple(RelayLeg(**leg) for leg in data['legs']),
            splits=_splits_from_dicts(data.get('splits')),
        )


@dataclass(frozen=True)
class RaceDescriptor:
    """Race classification parsed from an event headline."""
    event_number: int
    gender: Optional[str] = None
    distance: Optional[int] = None
    course: Optional[str] = None
    stroke: Optional[str] = None
    is_relay: bool = False
    unclassified_tokens: tuple = ()

    def course_code(self) -> Optional[str]:
        """
        Map the free-form course words to SCY, LCM or SCM.

        The checks run in a fixed order; a bare "Meter" is assumed to be
        long course.
        """
        if not self.course:
            return None
        course = self.course.lower()
        if 'yard' in course:
            return 'SCY'
        if 'lc' in course or 'long' in course:
            return 'LCM'
        if 'sc' in course or 'short' in course:
            return 'SCM'
        if 'meter' in course:
            return 'LCM'
        return None

    def to_dict(self) -> dict:
        return {
            'event_number': self.event_number,
            'gender': self.gender,
            'distance': self.distance,
            'course': self.course,
            'course_code': self.course_code(),
            'stroke': self.stroke,
            'is_relay': self.is_relay,
            'unclassified_tokens': list(self.unclassified_tokens),
        }


@dataclass(frozen=True)
class EventMetadata:
    """Venue, meet name and standing records printed above the results."""
    venue: Optional[str]
    meet_name: Optional[str]
    headline: str
    records: tuple = ()

    def to_dict(self) -> dict:
        return {
            'venue': self.venue,
            'meet_name': self.meet_name,
            'headline': self.headline,
            'records': list(self.records),
        }


@dataclass(frozen=True)
class EventResultSet:
    """Everything parsed from one event page."""
    event_name: str
    session: Session
    metadata: Optional[EventMetadata] = None
    race: Optional[RaceDescriptor] = None
    results: tuple = ()

    @property
    def is_relay(self) -> bool:
        return self.race is not None and self.race.is_relay

    @property
    def event_number(self) -> int:
        return self.race.event_number if self.race else 0

    def to_dict(self) -> dict:
        return {
            'event_name': self.event_name,
            'session': self.session.value,
            'metadata': self.metadata.to_dict() if self.metadata else None,
            'race': self.race.to_dict() if self.race else None,
            'results': [r.to_dict() for r in self.results],
        }

"""
CSV and stdout output for parsed event result sets.
"""

import csv
import logging
import re
import uuid
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .parsers.models import RELAY_LEG_COUNT, EventResultSet
from .team_matcher import TeamMatcher, get_team_matcher

logger = logging.getLogger(__name__)

INDIVIDUAL_COLUMNS = [
    'event_name', 'session', 'event_number', 'gender', 'distance',
    'course', 'stroke', 'place', 'name', 'year', 'school',
    'seed_time', 'final_time', 'reaction_time',
]

RELAY_COLUMNS = (
    [
        'event_name', 'session', 'event_number', 'gender', 'distance',
        'course', 'stroke', 'place', 'team_name', 'seed_time', 'final_time',
        'dq_description',
    ]
    + [f"swimmer{i}_{field}" for i in range(1, RELAY_LEG_COUNT + 1) for field in ('name', 'year')]
    + [f"swimmer{i}_reaction" for i in range(1, RELAY_LEG_COUNT + 1)]
)

METADATA_COLUMNS = ['event_name', 'session', 'venue', 'meet_name', 'records']


@dataclass
class OutputOptions:
    """Display and filtering options."""
    metadata: bool = True
    # Maximum placement to include (None = all placements)
    top_n: Optional[int] = None
    team: Optional[str] = None


def _within_top(place: Optional[int], top_n: Optional[int]) -> bool:
    if top_n is None:
        return True
    # Disqualified / unplaced entries never make a top-N cut
    return place is not None and place <= top_n


def filter_results(result_set: EventResultSet, options: OutputOptions, matcher: TeamMatcher = None) -> list:
    """
    Apply the top-N and team filters to one event's results.

    Ties are kept because they share a place number.
    """
    results = [r for r in result_set.results if _within_top(r.place, options.top_n)]

    if options.team:
        if matcher is None:
            matcher = get_team_matcher()
        if result_set.is_relay:
            results = [r for r in results if matcher.matches(r.team_name, options.team)]
        else:
            results = [r for r in results if matcher.matches(r.school, options.team)]

    return results


def _race_columns(result_set: EventResultSet) -> list:
    race = result_set.race
    if race is None:
        return [result_set.event_name, result_set.session.value, result_set.event_number, '', 0, '', '']
    return [
        result_set.event_name,
        result_set.session.value,
        result_set.event_number,
        race.gender or '',
        race.distance or 0,
        race.course or '',
        race.stroke or '',
    ]


def _split_columns(splits, max_splits: int) -> list:
    times = [s.time for s in splits]
    return times + [''] * (max_splits - len(times))


def _max_splits(rows: list) -> int:
    return max((len(r.splits) for _, r in rows), default=0)


def _place(place: Optional[int]) -> str:
    return '' if place is None else str(place)


def write_individual_csv(result_sets: list, options: OutputOptions, path) -> Path:
    """Write individual event results, one row per swimmer."""
    rows = [
        (result_set, result)
        for result_set in result_sets if not result_set.is_relay
        for result in filter_results(result_set, options)
    ]
    max_splits = _max_splits(rows)

    path = Path(path)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(INDIVIDUAL_COLUMNS + [f"split{i}" for i in range(1, max_splits + 1)])

        for result_set, swimmer in rows:
            writer.writerow(
                _race_columns(result_set)
                + [
                    _place(swimmer.place),
                    swimmer.name,
                    swimmer.class_year,
                    swimmer.school,
                    swimmer.seed_time or '',
                    swimmer.final_time,
                    swimmer.reaction_time or '',
                ]
                + _split_columns(swimmer.splits, max_splits)
            )

    logger.info(f"Results written to {path}")
    return path


def write_relay_csv(result_sets: list, options: OutputOptions, path) -> Path:
    """Write relay results, one row per team with all four legs."""
    rows = [
        (result_set, team)
        for result_set in result_sets if result_set.is_relay
        for team in filter_results(result_set, options)
    ]
    max_splits = _max_splits(rows)

    path = Path(path)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(RELAY_COLUMNS + [f"split{i}" for i in range(1, max_splits + 1)])

        for result_set, team in rows:
            row = _race_columns(result_set) + [
                _place(team.place),
                team.team_name,
                team.seed_time or '',
                team.final_time,
                team.dq_description or '',
            ]
            for leg in team.legs:
                row.extend([leg.name, leg.class_year])
            row.extend(leg.reaction_time or '' for leg in team.legs)
            writer.writerow(row + _split_columns(team.splits, max_splits))

    logger.info(f"Relay results written to {path}")
    return path


def _records_column(result_set: EventResultSet) -> str:
    return ' | '.join(r.strip('=').strip() for r in result_set.metadata.records)


def write_metadata_csv(result_sets: list, path) -> Path:
    """Write venue, meet name and records for every event."""
    path = Path(path)
    with open(path, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(METADATA_COLUMNS)

        for result_set in result_sets:
            meta = result_set.metadata
            if meta is None:
                writer.writerow([result_set.event_name, result_set.session.value, '', '', ''])
                continue
            writer.writerow([
                result_set.event_name,
                result_set.session.value,
                meta.venue or '',
                meta.meet_name or '',
                _records_column(result_set),
            ])

    logger.info(f"Metadata written to {path}")
    return path


def _print_header(result_set: EventResultSet, options: OutputOptions):
    if options.metadata:
        meta = result_set.metadata
        if meta is not None:
            if meta.venue:
                print(f"Venue: {meta.venue}")
            if meta.meet_name:
                print(f"Meet: {meta.meet_name}")
            if meta.records:
                print("Records:")
                for record in meta.records:
                    print(f"  {record}")

        race = result_set.race
        if race is not None:
            distance = race.distance if race.distance is not None else '?'
            relay = '(Relay)' if race.is_relay else ''
            print(f"Race: {race.gender or '?'} {distance} {race.course or ''} {race.stroke or '?'} {relay}".rstrip())

    print(f"\nEvent: {result_set.event_name} {result_set.session.value}")
    print('-' * 80)


def _print_splits(splits):
    if splits:
        print('    Splits: ' + ' '.join(f"split{i}={s.time}" for i, s in enumerate(splits, 1)))


def _place_label(place: Optional[int]) -> str:
    return '--' if place is None else f"{place:2}"


def print_individual_results(result_set: EventResultSet, options: OutputOptions):
    """Print an individual event to stdout."""
    _print_header(result_set, options)

    for swimmer in filter_results(result_set, options):
        print(f"{_place_label(swimmer.place)}. {swimmer.name:25} {swimmer.class_year:2} "
              f"{swimmer.school:20} {swimmer.final_time}")
        _print_splits(swimmer.splits)


def print_relay_results(result_set: EventResultSet, options: OutputOptions):
    """Print a relay event to stdout, with legs and any DQ reason."""
    _print_header(result_set, options)

    for team in filter_results(result_set, options):
        print(f"{_place_label(team.place)}. {team.team_name:25} {team.final_time}")
        if team.dq_description:
            print(f"    {team.dq_description}")
        for i, leg in enumerate(team.legs, 1):
            print(f"    {i}) {leg.name:25} {leg.class_year:2} {leg.reaction_time or ''}".rstrip())
        _print_splits(team.splits)


def print_results(result_set: EventResultSet, options: OutputOptions):
    if result_set.is_relay:
        print_relay_results(result_set, options)
    else:
        print_individual_results(result_set, options)


def sanitize_name(name: str) -> str:
    """Make a string safe to use as a folder or file name."""
    cleaned = re.sub(r'[^A-Za-z0-9]+', '_', name or '').strip('_')
    return cleaned or 'Unknown'


def generate_unique_id() -> str:
    return f"{datetime.now():%Y%m%d_%H%M%S}_{uuid.uuid4().hex[:6]}"


def write_csv_files(result_sets: list, options: OutputOptions, output_dir, file_names: dict) -> list[Path]:
    """
    Write the flat CSV outputs into one directory.

    Args:
        file_names: Mapping with 'results', 'relay_results' and 'metadata' keys
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []

    if any(not rs.is_relay for rs in result_sets):
        written.append(write_individual_csv(result_sets, options, output_dir / file_names['results']))
    if any(rs.is_relay for rs in result_sets):
        written.append(write_relay_csv(result_sets, options, output_dir / file_names['relay_results']))
    if options.metadata:
        written.append(write_metadata_csv(result_sets, output_dir / file_names['metadata']))

    return written


def write_results_to_folders(result_sets: list, output_dir, meet_title: str = None,
                             options: OutputOptions = None) -> Path:
    """
    Write results into a folder per meet with a subfolder per event.

    Creates: <MeetName>_<id>/<EventName>_<id>/results_<EventName>_<id>.csv
    """
    if options is None:
        options = OutputOptions()

    meet_path = Path(output_dir) / f"{sanitize_name(meet_title or 'UnknownMeet')}_{generate_unique_id()}"
    meet_path.mkdir(parents=True, exist_ok=True)
    logger.info(f"Created meet folder: {meet_path}")

    # Group prelims and finals of the same event together
    groups = {}
    for result_set in result_sets:
        groups.setdefault(result_set.event_name, []).append(result_set)

    for event_name, group in groups.items():
        suffix = f"{sanitize_name(event_name)}_{generate_unique_id()}"
        event_path = meet_path / suffix
        event_path.mkdir(parents=True, exist_ok=True)

        results_file = event_path / f"results_{suffix}.csv"
        if any(rs.is_relay for rs in group):
            write_relay_csv(group, options, results_file)
        else:
            write_individual_csv(group, options, results_file)

        if options.metadata:
            write_metadata_csv(group, event_path / f"metadata_{suffix}.csv")

        logger.info(f"  Created event folder: {event_path.name}")

    return meet_path

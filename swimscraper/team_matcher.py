"""
Team matching utility for filtering results down to one team.
Uses fuzzy matching to handle variations in how result pages print team names.
"""

import re
import yaml
from pathlib import Path
from rapidfuzz import fuzz

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config' / 'teams.yaml'

# Relay entries append a team letter: "Florida 'A'"
RELAY_SUFFIX = re.compile(r"\s+'[A-Z]'$")


class TeamMatcher:
    """Matches printed team names against a requested team."""

    def __init__(self, config_path: str = None, threshold: int = 80):
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        with open(config_path, 'r') as f:
            config = yaml.safe_load(f) or {}

        self.threshold = threshold

        # Build lookup dictionary: alias -> canonical name
        self.alias_map = {}
        for team in config.get('teams', []):
            canonical = team['name']
            self.alias_map[canonical.lower()] = canonical
            for alias in team.get('aliases', []):
                self.alias_map[alias.lower()] = canonical

    def canonical_name(self, team_name: str) -> str:
        """Return the canonical name for a known alias, or the name itself."""
        name = RELAY_SUFFIX.sub('', team_name.strip())
        return self.alias_map.get(name.lower(), name)

    def matches(self, team_name: str, wanted: str) -> bool:
        """
        Determine if a printed team name refers to the wanted team.

        Returns True if:
        1. Both names resolve to the same canonical team, or
        2. They match above the fuzzy threshold
        """
        if not team_name or not wanted:
            return False

        team_lower = self.canonical_name(team_name).lower()
        wanted_lower = self.canonical_name(wanted).lower()

        if team_lower == wanted_lower:
            return True

        if fuzz.ratio(team_lower, wanted_lower) >= self.threshold:
            return True

        # Abbreviated or truncated names
        if len(wanted_lower) >= 4 and fuzz.partial_ratio(team_lower, wanted_lower) >= 95:
            return True

        return False


# Singleton instance
_matcher = None


def get_team_matcher(config_path: str = None, threshold: int = 80) -> TeamMatcher:
    """Get or create the team matcher singleton."""
    global _matcher
    if _matcher is None:
        _matcher = TeamMatcher(config_path, threshold)
    return _matcher

"""
Scraper settings loaded from YAML.
"""

import copy
import yaml
from pathlib import Path

DEFAULT_CONFIG_PATH = Path(__file__).parent / 'config' / 'scraper.yaml'

DEFAULTS = {
    'http': {
        'user_agent': 'Mozilla/5.0 (compatible; realtime-results-scraper/0.1)',
        'timeout': 30,
    },
    'max_workers': 8,
    'output': {
        'directory': '.',
        'csv_files': {
            'results': 'results.csv',
            'relay_results': 'relay_results.csv',
            'metadata': 'metadata.csv',
        },
    },
    'team_match_threshold': 80,
}


def _merge(base: dict, override: dict) -> dict:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Settings:
    """Read-only view over the merged settings dictionary."""

    def __init__(self, data: dict):
        self.data = data

    @property
    def user_agent(self) -> str:
        return self.data['http']['user_agent']

    @property
    def timeout(self) -> float:
        return self.data['http']['timeout']

    @property
    def max_workers(self) -> int:
        return self.data['max_workers']

    @property
    def output_dir(self) -> Path:
        return Path(self.data['output']['directory'])

    def csv_file(self, kind: str) -> str:
        """Filename for 'results', 'relay_results' or 'metadata' CSV output."""
        files = self.data['output']['csv_files']
        if kind not in files:
            raise ValueError(f"Unknown CSV output: {kind}. Available: {list(files.keys())}")
        return files[kind]

    @property
    def team_match_threshold(self) -> int:
        return self.data['team_match_threshold']


def load_settings(config_path: str = None) -> Settings:
    """Load settings from a YAML file, filling gaps with the defaults."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    with open(config_path, 'r') as f:
        config = yaml.safe_load(f) or {}

    return Settings(_merge(DEFAULTS, config))


# Singleton instance
_settings = None


def get_settings(config_path: str = None) -> Settings:
    """Get or create the settings singleton."""
    global _settings
    if _settings is None:
        _settings = load_settings(config_path)
    return _settings

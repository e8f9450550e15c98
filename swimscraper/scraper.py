"""
Main scraper for HY-TEK Realtime Results pages.
Fetches meet and event pages, hands them to the parsers and writes output.
"""

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests

from .meet_index import URL_TYPE_MEET, detect_url_type, index_url, parse_meet_index, session_from_url
from .output import OutputOptions, print_results, write_csv_files, write_results_to_folders
from .parsers import can_parse, parse_event_page
from .parsers.models import EventResultSet, Session
from .settings import Settings, get_settings
from .team_matcher import get_team_matcher

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class Scraper:
    """Main scraper orchestrator."""

    def __init__(self, settings: Settings = None, session=None):
        self.settings = settings or get_settings()
        # Title of the last meet index processed
        self.meet_title = None

        self.session = session or requests.Session()
        self.session.headers.update({'User-Agent': self.settings.user_agent})

    def fetch_html(self, url: str) -> str:
        """Fetch a page and return its text."""
        logger.debug(f"Fetching {url}")
        response = self.session.get(url, timeout=self.settings.timeout)
        response.raise_for_status()
        return response.text

    def process_event(self, url: str, session: Session = None, event_name: str = None) -> EventResultSet:
        """
        Fetch and parse a single event page.

        Args:
            url: Event page URL, e.g. .../240327F003.htm
            session: Prelims or finals; read from the URL when omitted
            event_name: Name from the meet index; the page headline otherwise
        """
        if session is None:
            session = session_from_url(url)

        html = self.fetch_html(url)
        if not can_parse(html):
            logger.warning(f"Page does not look like HY-TEK results: {url}")

        result_set = parse_event_page(html, session, event_name)
        logger.info(f"  {result_set.event_name} ({session.value}): {len(result_set.results)} results")
        return result_set

    def process_meet(self, url: str) -> list[EventResultSet]:
        """
        Fetch a meet index and parse every event page it links to.

        Pages are fetched concurrently. An event that fails to fetch or parse
        is logged and left out; the rest of the meet is still returned.
        """
        base_url = url.strip().rstrip('/')
        meet = parse_meet_index(self.fetch_html(index_url(base_url)), base_url)
        self.meet_title = meet.title
        links = meet.links()

        logger.info(f"Processing {len(links)} event pages with {self.settings.max_workers} workers")

        parsed = {}
        with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
            future_to_link = {
                executor.submit(self.process_event, link.url, link.session, link.event_name): link
                for link in links
            }
            for future in as_completed(future_to_link):
                link = future_to_link[future]
                try:
                    parsed[link.url] = future.result()
                except Exception as e:
                    logger.error(f"Error processing {link.url}: {e}")

        # Keep index order regardless of completion order
        return [parsed[link.url] for link in links if link.url in parsed]

    def parse(self, url: str) -> list[EventResultSet]:
        """Detect whether a URL is a meet or an event and process it."""
        url = url.strip()
        if detect_url_type(url) == URL_TYPE_MEET:
            return self.process_meet(url)
        return [self.process_event(url)]


def write_output(result_sets: list[EventResultSet], args, settings: Settings, meet_title: str = None):
    """
    Render parsed results in the format requested on the command line.

    ``meet_title`` names the meet folder when no page header carries a meet name.
    """
    options = OutputOptions(
        metadata=not args.no_metadata,
        top_n=args.top,
        team=args.team,
    )
    if options.team:
        # Prime the matcher singleton with the configured threshold
        get_team_matcher(threshold=settings.team_match_threshold)

    output_dir = args.output_dir or settings.output_dir

    if args.output == 'stdout':
        for result_set in result_sets:
            print_results(result_set, options)
    elif args.output == 'csv':
        if args.folders:
            meet_title = next(
                (rs.metadata.meet_name for rs in result_sets if rs.metadata and rs.metadata.meet_name),
                meet_title,
            )
            write_results_to_folders(result_sets, output_dir, meet_title, options)
        else:
            file_names = {kind: settings.csv_file(kind) for kind in ('results', 'relay_results', 'metadata')}
            write_csv_files(result_sets, options, output_dir, file_names)
    else:
        raise ValueError(f"Unknown output format: {args.output}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Parse swimming meet results from HY-TEK Realtime Results pages')
    parser.add_argument('url', nargs='?', help='Meet or event URL to parse')
    parser.add_argument('--output', '-o', choices=['csv', 'stdout'], default='csv', help='Output format')
    parser.add_argument('--no-metadata', action='store_true',
                        help='Disable metadata output (venue, meet name, records, race info)')
    parser.add_argument('--top', '-t', type=int,
                        help='Maximum placement to include (ties included); 0 outputs only metadata')
    parser.add_argument('--team', help='Only include results for this team (fuzzy matched)')
    parser.add_argument('--output-dir', help='Directory for CSV output')
    parser.add_argument('--folders', action='store_true', help='Write one folder per event under a meet folder')
    parser.add_argument('--config', help='Path to settings YAML file')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: list[str] = None) -> int:
    """Main entry point."""
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    url = args.url
    if not url:
        print("Enter meet or event URL:")
        url = sys.stdin.readline().strip()
        if not url:
            logger.error("No input provided")
            return 1

    settings = get_settings(args.config)
    scraper = Scraper(settings)

    logger.info(f"Parsing: {url}")
    try:
        result_sets = scraper.parse(url)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Error parsing {url}: {e}")
        return 1

    write_output(result_sets, args, settings, meet_title=scraper.meet_title)

    relay_count = sum(1 for rs in result_sets if rs.is_relay)
    print(f"\nParsed {len(result_sets)} event(s) "
          f"({len(result_sets) - relay_count} individual, {relay_count} relay)")
    return 0


if __name__ == '__main__':
    sys.exit(main())

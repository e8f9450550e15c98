"""Tests for the HY-TEK event page parser and the parser registry."""

import pytest

from swimscraper.parsers import (
    PARSERS,
    CompetitorResult,
    RelayTeamResult,
    Session,
    can_parse,
    extract_event_name,
    extract_results_text,
    get_parser,
    parse_event_page,
    parse_event_text,
    parse_individual_section,
    parse_relay_section,
)


class TestCanParse:
    def test_meet_manager_banner(self, individual_html):
        assert can_parse(individual_html)

    def test_event_headline_without_banner(self):
        assert can_parse('<pre>Event 12  Women 100 Yard Butterfly\n</pre>')

    def test_unrelated_page(self):
        assert not can_parse('<html><body><table><tr><td>Place</td></tr></table></body></html>')


class TestExtractResultsText:
    def test_pre_block_text(self, individual_html):
        text = extract_results_text(individual_html)

        assert text.lstrip().startswith('Indiana University - Site License')
        assert '<' not in text

    def test_page_without_pre(self):
        assert extract_results_text('<html><body><p>No results yet</p></body></html>') is None

    def test_event_name_from_headline(self, relay_html):
        assert extract_event_name(relay_html) == 'Event 1  Men 200 Yard Medley Relay'

    def test_event_name_missing(self):
        assert extract_event_name('<pre>Results pending</pre>') is None
        assert extract_event_name('<p>nothing</p>') is None


class TestParseEventPage:
    def test_individual_page(self, individual_html):
        result_set = parse_event_page(individual_html, Session.FINALS)

        assert result_set.event_name == 'Event 3  Men 500 Yard Freestyle'
        assert result_set.session is Session.FINALS
        assert not result_set.is_relay
        assert result_set.event_number == 3
        assert result_set.race.distance == 500
        assert result_set.race.course_code() == 'SCY'
        assert result_set.metadata.venue == 'Indiana University Natatorium'
        assert len(result_set.results) == 4
        assert all(isinstance(r, CompetitorResult) for r in result_set.results)

    def test_relay_page(self, relay_html):
        result_set = parse_event_page(relay_html, Session.PRELIMS, event_name='Men 200 Yard Medley Relay')

        assert result_set.event_name == 'Men 200 Yard Medley Relay'
        assert result_set.session is Session.PRELIMS
        assert result_set.is_relay
        assert result_set.race.stroke == 'Medley Relay'
        assert len(result_set.results) == 3
        assert all(isinstance(r, RelayTeamResult) for r in result_set.results)
        assert result_set.metadata.records == ('NCAA: ! 1:21.13  3/22/2023 Florida',)

    def test_page_without_pre_gives_empty_result_set(self):
        result_set = parse_event_page('<html><body></body></html>', Session.FINALS, 'Men 50 Yard Freestyle')

        assert result_set.event_name == 'Men 50 Yard Freestyle'
        assert result_set.results == ()
        assert result_set.metadata is None
        assert result_set.race is None
        assert not result_set.is_relay

    def test_unclassified_headline_falls_back_to_individual(self):
        text = 'Swim-off\n  1 Marchand, Leon JR ASU 1:40.22 1:38.19 20\n'
        result_set = parse_event_text(text, Session.FINALS)

        assert result_set.race is None
        assert result_set.event_number == 0
        assert [r.name for r in result_set.results] == ['Marchand, Leon']

    def test_to_dict(self, relay_html):
        data = parse_event_page(relay_html, Session.FINALS).to_dict()

        assert data['session'] == 'Finals'
        assert data['race']['is_relay'] is True
        assert data['race']['course_code'] == 'SCY'
        assert len(data['results'][0]['legs']) == 4


class TestRegistry:
    def test_known_parsers(self):
        assert get_parser('individual') is parse_individual_section
        assert get_parser('relay') is parse_relay_section
        assert set(PARSERS) == {'individual', 'relay'}

    def test_unknown_parser(self):
        with pytest.raises(ValueError, match='Unknown parser'):
            get_parser('diving')

    def test_dispatch_goes_through_registry(self, relay_html, monkeypatch):
        seen = []

        def record_section(lines):
            seen.append(lines[0].split()[1])
            return lines[0]

        monkeypatch.setitem(PARSERS, 'relay', record_section)
        result_set = parse_event_page(relay_html, Session.FINALS)

        assert seen == ['Florida', 'Arizona', 'Missouri']
        assert len(result_set.results) == 3

"""Tests for meet index parsing and URL helpers."""

import pytest

from swimscraper.meet_index import (
    URL_TYPE_EVENT,
    URL_TYPE_MEET,
    detect_url_type,
    index_url,
    parse_event_link,
    parse_meet_index,
    session_from_url,
)
from swimscraper.parsers.models import Session

BASE_URL = 'https://swimmeetresults.tech/NCAA-Division-I-Men-2024'


class TestUrlHelpers:
    @pytest.mark.parametrize('url, url_type', [
        (f'{BASE_URL}/240327F003.htm', URL_TYPE_EVENT),
        (f'{BASE_URL}/', URL_TYPE_MEET),
        (BASE_URL, URL_TYPE_MEET),
        (f'  {BASE_URL}/240327P001.htm  ', URL_TYPE_EVENT),
    ])
    def test_detect_url_type(self, url, url_type):
        assert detect_url_type(url) == url_type

    def test_index_url(self):
        assert index_url(BASE_URL + '/') == f'{BASE_URL}/evtindex.htm'

    def test_session_from_url(self):
        assert session_from_url(f'{BASE_URL}/240327F003.htm') is Session.FINALS
        assert session_from_url(f'{BASE_URL}/240327P003.htm') is Session.PRELIMS

    def test_session_from_url_without_code(self):
        with pytest.raises(ValueError, match='prelims/finals'):
            session_from_url(f'{BASE_URL}/index.htm')


class TestParseEventLink:
    def test_finals_link(self):
        link = parse_event_link('240327F003.htm', '3 Men 500 Yard Freestyle Finals', BASE_URL)

        assert link.url == f'{BASE_URL}/240327F003.htm'
        assert link.event_name == 'Men 500 Yard Freestyle'
        assert link.event_number == 3
        assert link.session is Session.FINALS

    def test_prelims_link(self):
        link = parse_event_link('240327P021.htm', '21 Women 100 Yard Breaststroke Prelims', BASE_URL + '/')

        assert link.url == f'{BASE_URL}/240327P021.htm'
        assert link.event_number == 21
        assert link.session is Session.PRELIMS
        assert link.event_name == 'Women 100 Yard Breaststroke'

    @pytest.mark.parametrize('href', [
        None,
        '',
        'index.htm',
        'http://www.hytek.com',
        'psych.pdf',
        'F1.htm',
    ])
    def test_non_event_links(self, href):
        assert parse_event_link(href, 'Home', BASE_URL) is None


class TestParseMeetIndex:
    def test_fixture_index(self, index_html):
        meet = parse_meet_index(index_html, BASE_URL)

        assert meet.title == "2024 NCAA Division I Men's Championships"
        assert set(meet.events) == {'Men 200 Yard Medley Relay', 'Men 500 Yard Freestyle'}

        free = meet.events['Men 500 Yard Freestyle']
        assert free.number == 3
        assert free.prelims_link.href == '240327P003.htm'
        assert free.finals_link.href == '240327F003.htm'

    def test_links_ordered_by_event_then_session(self, index_html):
        links = parse_meet_index(index_html, BASE_URL).links()

        assert [link.href for link in links] == ['240327F001.htm', '240327P003.htm', '240327F003.htm']

    def test_page_without_links(self):
        meet = parse_meet_index('<html><body>Meet starts soon</body></html>', BASE_URL)

        assert meet.title is None
        assert meet.links() == []


class TestSessionCodes:
    def test_codes_round_trip(self):
        assert Session.PRELIMS.code == 'P'
        assert Session.FINALS.code == 'F'
        assert Session.from_code('P') is Session.PRELIMS
        assert Session.from_code('F') is Session.FINALS

    @pytest.mark.parametrize('code', ['S', 'p', '', None])
    def test_unknown_code(self, code):
        with pytest.raises(ValueError, match='Unknown session code'):
            Session.from_code(code)

"""Tests for the token classifiers."""

import pytest

from swimscraper.parsers.tokens import (
    is_class_year_token,
    is_dq_status,
    is_placement_token,
    is_points_token,
    is_valid_time_token,
    split_result_tail,
)


class TestPlacementToken:
    @pytest.mark.parametrize('token', ['1', '16', '100', '--'])
    def test_accepts_places_and_dq_marker(self, token):
        assert is_placement_token(token)

    @pytest.mark.parametrize('token', ['', '1)', '1.', '-', '---', 'r:+0.62', '21.09', 'A'])
    def test_rejects_other_tokens(self, token):
        assert not is_placement_token(token)


class TestClassYearToken:
    @pytest.mark.parametrize('token', ['FR', 'SO', 'JR', 'SR', 'GR', '5Y', 'RS', 'FF', 'jr', 'Sr', '14', '09'])
    def test_accepts_codes_and_two_digit_ages(self, token):
        assert is_class_year_token(token)

    @pytest.mark.parametrize('token', ['JRS', 'SR.', 'J', '', '123', '5', 'XX', 'of', 'A1'])
    def test_rejects_everything_else(self, token):
        assert not is_class_year_token(token)

    def test_length_is_always_two(self):
        for token in ['FRX', 'xSO', 'JR ', ' 14', '1', 'FRESHMAN', 'SOPH', '2024']:
            assert not is_class_year_token(token)


class TestDqStatus:
    @pytest.mark.parametrize('token', ['DQ', 'DSQ', 'DFS', 'DNS'])
    def test_statuses(self, token):
        assert is_dq_status(token)

    @pytest.mark.parametrize('token', ['dq', 'Dq', 'NS', 'SCR', '--'])
    def test_case_sensitive(self, token):
        assert not is_dq_status(token)


class TestValidTimeToken:
    @pytest.mark.parametrize('token', ['21.09', '44.62', '10.5', '1:08.61', '4:02.31N', '15:01.22', '1:20.15A'])
    def test_accepts_times(self, token):
        assert is_valid_time_token(token)

    @pytest.mark.parametrize('token', ['10.', '1.', '1:2', '1:08', ':08.61', 'x:08.61', 'DQ', 'NT', '40', ''])
    def test_rejects_partial_tokens(self, token):
        assert not is_valid_time_token(token)


class TestPointsToken:
    def test_small_integers_are_points(self):
        assert is_points_token('0')
        assert is_points_token('20')
        assert is_points_token('255')

    def test_times_and_large_numbers_are_not(self):
        assert not is_points_token('256')
        assert not is_points_token('17.5')
        assert not is_points_token('DQ')


class TestSplitResultTail:
    def test_with_points(self):
        tail = split_result_tail('1 Marchand, Leon JR ASU 1:40.22 1:38.19 20'.split())
        assert tail.start == 5
        assert tail.seed_time == '1:40.22'
        assert tail.final_time == '1:38.19'
        assert tail.points == 20

    def test_dq_with_seed(self):
        tail = split_result_tail('-- Missouri 3:06.12 DQ'.split())
        assert tail.start == 2
        assert tail.seed_time == '3:06.12'
        assert tail.final_time == 'DQ'
        assert tail.points is None

    def test_dq_without_seed(self):
        tail = split_result_tail('-- Doe, John FR Georgia Tech DQ'.split())
        assert tail.start == 6
        assert tail.seed_time is None
        assert tail.final_time == 'DQ'

    def test_exhibition_without_points(self):
        tail = split_result_tail('5 Lee, Sam SO Ohio St 1:45.00 x1:44.10'.split())
        assert tail.start == 6
        assert tail.seed_time == '1:45.00'
        assert tail.final_time == 'x1:44.10'
        assert tail.points is None

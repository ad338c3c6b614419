"""
Tests for match display helpers.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.models import Match, COMPLETED, IN_PROGRESS, SCHEDULED, CANCELLED
from league.timeline import match_timeline, score_line


class TestMatchTimeline:

    def test_sorted_by_minute(self, make_event):
        events = [make_event("e1", "goal", "P1", minute=70), make_event("e2", "goal", "P2", minute=5),
                  make_event("e3", "assist", "P3", minute=40)]
        match = Match(id="m1", home_team_id="A", away_team_id="B", events=events)
        assert [e.id for e in match_timeline(match)] == ["e2", "e3", "e1"]

    def test_same_minute_keeps_recorded_order(self, make_event):
        events = [make_event("e1", "goal", "P1", minute=12), make_event("e2", "assist", "P2", minute=12)]
        match = Match(id="m1", home_team_id="A", away_team_id="B", events=events)
        assert [e.id for e in match_timeline(match)] == ["e1", "e2"]

    def test_events_without_minute_go_last(self, make_event):
        events = [make_event("e1", "lineup", "P1"), make_event("e2", "goal", "P2", minute=3)]
        match = Match(id="m1", home_team_id="A", away_team_id="B", events=events)
        assert [e.id for e in match_timeline(match)] == ["e2", "e1"]

    def test_does_not_reorder_match_events(self, make_event):
        events = [make_event("e1", "goal", "P1", minute=9), make_event("e2", "goal", "P2", minute=1)]
        match = Match(id="m1", home_team_id="A", away_team_id="B", events=events)
        match_timeline(match)
        assert [e.id for e in match.events] == ["e1", "e2"]


class TestScoreLine:

    @pytest.mark.parametrize("status,expected", [
        (COMPLETED, "3 - 1"),
        (IN_PROGRESS, "LIVE"),
        (CANCELLED, "Cancelled"),
        (SCHEDULED, "2026-06-01"),
    ])
    def test_label_by_status(self, status, expected):
        match = Match(id="m1", home_team_id="A", away_team_id="B", status=status,
                      score=(3, 1), match_date="2026-06-01")
        assert score_line(match) == expected

    def test_scheduled_without_date(self):
        assert score_line(Match(id="m1", home_team_id="A", away_team_id="B")) == "TBD"

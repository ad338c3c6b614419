"""
Shared pytest fixtures for tournament standings tests.

Running tests:
    pytest tests/
"""
import pytest
import sys
import os
import yaml

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from league.models import Team, Player, Match, MatchEvent, COMPLETED


@pytest.fixture
def abc_teams():
    """Three teams in roster order A, B, C."""
    return [
        Team(id="A", name="Team A"),
        Team(id="B", name="Team B"),
        Team(id="C", name="Team C"),
    ]


@pytest.fixture
def abc_matches():
    """A 2-1 B, B 0-0 C, A 1-1 C, all completed."""
    return [
        Match(id="m1", home_team_id="A", away_team_id="B", status=COMPLETED, score=(2, 1)),
        Match(id="m2", home_team_id="B", away_team_id="C", status=COMPLETED, score=(0, 0)),
        Match(id="m3", home_team_id="A", away_team_id="C", status=COMPLETED, score=(1, 1)),
    ]


@pytest.fixture
def two_teams():
    return [Team(id="T1", name="Reds"), Team(id="T2", name="Blues")]


@pytest.fixture
def players_by_team():
    """P1 plays for Reds, P2 and P3 for Blues."""
    return {
        "T1": [Player(id="P1", team_id="T1", name="Ana", position="Forward")],
        "T2": [
            Player(id="P2", team_id="T2", name="Ben", position="Midfielder"),
            Player(id="P3", team_id="T2", name="Cal", position="Defender"),
        ],
    }


@pytest.fixture
def football_map():
    return {"goal": "goals", "penalty_scored": "goals", "assist": "assists"}


@pytest.fixture
def make_event():
    """Return a factory for MatchEvent objects."""
    def _make(event_id, event_type, player_id, team_id=None, minute=None, match_id="m1"):
        return MatchEvent(id=event_id, match_id=match_id, event_type=event_type,
                          team_id=team_id, player_id=player_id, minute=minute)
    return _make


@pytest.fixture
def write_tournament(tmp_path):
    """Return a helper that writes tournament YAML files into a new directory."""
    def _write(slug="cup", teams=None, players=None, matches=None, settings=None):
        base = tmp_path / "tournaments"
        tournament_dir = base / slug
        tournament_dir.mkdir(parents=True, exist_ok=True)
        files = {
            'teams.yaml': teams,
            'players.yaml': players,
            'matches.yaml': matches,
            'settings.yaml': settings,
        }
        for filename, data in files.items():
            if data is not None:
                (tournament_dir / filename).write_text(yaml.dump(data, default_flow_style=False))
        return str(tournament_dir)
    return _write


@pytest.fixture
def sample_tournament_data():
    """Raw YAML data for a small football tournament."""
    return {
        'settings': {'name': 'Test Cup', 'sport': 'football'},
        'teams': [
            {'id': 'A', 'name': 'Team A', 'group': 'North'},
            {'id': 'B', 'name': 'Team B'},
            {'id': 'C', 'name': 'Team C'},
        ],
        'players': {
            'A': [{'id': 'a9', 'name': 'Ari', 'position': 'Forward', 'jersey_number': 9}],
            'B': [{'id': 'b7', 'name': 'Bo', 'position': 'Winger', 'jersey_number': 7}],
            'C': [],
        },
        'matches': [
            {
                'id': 'm1', 'home_team_id': 'A', 'away_team_id': 'B', 'status': 'completed',
                'match_date': '2026-05-01', 'score': {'home': 2, 'away': 1},
                'events': [
                    {'id': 'e1', 'event_type': 'lineup', 'team_id': 'A', 'player_id': 'a9', 'minute': 0},
                    {'id': 'e2', 'event_type': 'lineup', 'team_id': 'B', 'player_id': 'b7', 'minute': 0},
                    {'id': 'e4', 'event_type': 'goal', 'team_id': 'A', 'player_id': 'a9', 'minute': 61},
                    {'id': 'e3', 'event_type': 'goal', 'team_id': 'A', 'player_id': 'a9', 'minute': 10},
                    {'id': 'e5', 'event_type': 'goal', 'team_id': 'B', 'player_id': 'b7', 'minute': 70},
                ],
            },
            {
                'id': 'm2', 'home_team_id': 'B', 'away_team_id': 'C', 'status': 'completed',
                'match_date': '2026-05-08', 'home_score': 0, 'away_score': 0,
            },
            {
                'id': 'm3', 'home_team_id': 'A', 'away_team_id': 'C', 'status': 'completed',
                'match_date': '2026-05-15', 'score': {'home': 1, 'away': 1},
            },
            {
                'id': 'm4', 'home_team_id': 'C', 'away_team_id': 'B', 'status': 'in_progress',
                'match_date': '2026-05-22', 'score': {'home': 5, 'away': 0},
            },
        ],
    }


@pytest.fixture
def client(tmp_path, monkeypatch, write_tournament, sample_tournament_data):
    """Flask test client serving a temporary tournaments directory."""
    import app as app_module

    tournaments_dir = tmp_path / "tournaments"
    data = sample_tournament_data
    write_tournament(slug="test-cup", teams=data['teams'], players=data['players'],
                     matches=data['matches'], settings=data['settings'])

    monkeypatch.setattr(app_module, 'TOURNAMENTS_DIR', str(tournaments_dir))
    monkeypatch.setattr(app_module, 'TOURNAMENTS_FILE', str(tournaments_dir / 'tournaments.yaml'))

    app_module.app.config['TESTING'] = True
    with app_module.app.test_client() as client:
        yield client

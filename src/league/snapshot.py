"""
YAML-backed tournament snapshots.

A tournament lives in its own directory:

    teams.yaml      - list of {id, name, ...attributes}
    players.yaml    - {team_id: [{id, name, position, jersey_number}, ...]}
    matches.yaml    - list of matches, each with an embedded ``events`` list
    settings.yaml   - {name, sport, event_types: {tag: counter or null}}

Every file is optional; a missing or empty file reads as no data.
"""
import os
from typing import Dict, List, Optional

import yaml
from filelock import FileLock

from league.models import MATCH_STATUSES, SCHEDULED, Match, MatchEvent, Player, Team
from league.sports import DEFAULT_SPORT, get_event_type_map

LOCK_FILENAME = '.lock'
LOCK_TIMEOUT_SECONDS = 10


class SnapshotError(Exception):
    """Raised when a tournament data file cannot be read."""


class TournamentSnapshot:
    def __init__(self, settings, teams, players_by_team, matches):
        self.settings = settings
        self.teams = teams
        self.players_by_team = players_by_team
        self.matches = matches

    @property
    def event_type_map(self):
        return get_event_type_map(self.settings.get('sport'), self.settings.get('event_types'))

    def find_match(self, match_id):
        for match in self.matches:
            if str(match.id) == str(match_id):
                return match
        return None

    def __repr__(self):
        return (f"TournamentSnapshot(name={self.settings.get('name')}, teams={len(self.teams)}, "
                f"matches={len(self.matches)})")


def get_default_settings():
    """Return default tournament settings."""
    return {
        'name': 'Tournament',
        'sport': DEFAULT_SPORT,
        'event_types': {},
    }


def _read_yaml(tournament_dir, filename, expected_type):
    """Read a data file; missing or empty files read as None."""
    path = os.path.join(tournament_dir, filename)
    if not os.path.exists(path):
        return None
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SnapshotError(f"Failed to parse {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise SnapshotError(f"Failed to decode {path}: {e}") from e
    if data is not None and not isinstance(data, expected_type):
        raise SnapshotError(f"Invalid {filename}: expected a {expected_type.__name__}, got {type(data).__name__}")
    return data


def _require_row(row, what):
    """Rows must be mappings carrying an id."""
    if not isinstance(row, dict):
        raise SnapshotError(f"Invalid {what}: {row!r}")
    if row.get('id') is None:
        raise SnapshotError(f"Missing id in {what}: {row!r}")
    return row


def _to_int(value, what):
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise SnapshotError(f"Invalid {what}: {value!r}") from e


def _parse_score(row):
    match_id = row.get('id')
    score = row.get('score')
    if score is None:
        home, away = row.get('home_score'), row.get('away_score')
    elif isinstance(score, dict):
        home, away = score.get('home'), score.get('away')
    elif isinstance(score, (list, tuple)) and len(score) == 2:
        home, away = score
    else:
        raise SnapshotError(f"Invalid score in match {match_id}: {score!r}")
    home = _to_int(home, f"home score in match {match_id}")
    away = _to_int(away, f"away score in match {match_id}")
    return (home if home is not None else 0, away if away is not None else 0)


def _parse_event(row, match_id):
    _require_row(row, f"event in match {match_id}")
    return MatchEvent(
        id=row.get('id'),
        match_id=row.get('match_id', match_id),
        event_type=row.get('event_type') or row.get('type'),
        team_id=row.get('team_id'),
        player_id=row.get('player_id'),
        minute=_to_int(row.get('minute'), f"minute in match {match_id}"),
        additional_info=row.get('additional_info'),
    )


def _parse_match(row):
    _require_row(row, 'match row')
    match_id = row['id']
    status = row.get('status', SCHEDULED)
    if status not in MATCH_STATUSES:
        raise SnapshotError(f"Invalid status for match {match_id}: {status!r}")
    events = row.get('events') or []
    if not isinstance(events, list):
        raise SnapshotError(f"Invalid events for match {match_id}: {events!r}")
    return Match(
        id=match_id,
        home_team_id=row.get('home_team_id'),
        away_team_id=row.get('away_team_id'),
        status=status,
        score=_parse_score(row),
        match_date=row.get('match_date'),
        events=[_parse_event(event, match_id) for event in events],
    )


def _load_settings(tournament_dir):
    defaults = get_default_settings()
    data = _read_yaml(tournament_dir, 'settings.yaml', dict)
    if not data:
        return defaults
    # Merge with defaults to ensure all keys exist
    for key, value in defaults.items():
        if key not in data:
            data[key] = value
    if not isinstance(data['event_types'] or {}, dict):
        raise SnapshotError(f"Invalid event_types in settings.yaml: {data['event_types']!r}")
    return data


def _load_teams(tournament_dir) -> List[Team]:
    teams = []
    for row in _read_yaml(tournament_dir, 'teams.yaml', list) or []:
        _require_row(row, 'team row')
        attributes = {k: v for k, v in row.items() if k not in ('id', 'name')}
        teams.append(Team(id=row['id'], name=row.get('name', str(row['id'])), attributes=attributes))
    return teams


def _load_players(tournament_dir) -> Dict[str, List[Player]]:
    players_by_team = {}
    for team_id, rows in (_read_yaml(tournament_dir, 'players.yaml', dict) or {}).items():
        if rows is not None and not isinstance(rows, list):
            raise SnapshotError(f"Invalid players for team {team_id}: {rows!r}")
        players = []
        for row in rows or []:
            _require_row(row, f"player row for team {team_id}")
            players.append(Player(
                id=row['id'],
                team_id=team_id,
                name=row.get('name', str(row['id'])),
                position=row.get('position'),
                jersey_number=row.get('jersey_number'),
            ))
        players_by_team[team_id] = players
    return players_by_team


def _load_matches(tournament_dir) -> List[Match]:
    return [_parse_match(row) for row in _read_yaml(tournament_dir, 'matches.yaml', list) or []]


def _lock_for(tournament_dir):
    return FileLock(os.path.join(tournament_dir, LOCK_FILENAME), timeout=LOCK_TIMEOUT_SECONDS)


def load_settings(tournament_dir):
    """Load tournament settings, merging with defaults."""
    with _lock_for(tournament_dir):
        return _load_settings(tournament_dir)


def get_teams(tournament_dir) -> List[Team]:
    with _lock_for(tournament_dir):
        return _load_teams(tournament_dir)


def get_players(tournament_dir, team_id) -> List[Player]:
    with _lock_for(tournament_dir):
        return _load_players(tournament_dir).get(team_id, [])


def get_players_by_team(tournament_dir, teams: Optional[List[Team]] = None) -> Dict[str, List[Player]]:
    """Players grouped by team id, restricted to ``teams`` when given."""
    with _lock_for(tournament_dir):
        players_by_team = _load_players(tournament_dir)
    if teams is None:
        return players_by_team
    return {team.id: players_by_team.get(team.id, []) for team in teams}


def get_matches(tournament_dir) -> List[Match]:
    with _lock_for(tournament_dir):
        return _load_matches(tournament_dir)


def get_match_events(tournament_dir, match_id) -> List[MatchEvent]:
    for match in get_matches(tournament_dir):
        if str(match.id) == str(match_id):
            return match.events
    return []


def load_snapshot(tournament_dir) -> TournamentSnapshot:
    """Read every tournament file in one consistent pass."""
    if not os.path.isdir(tournament_dir):
        raise SnapshotError(f"Tournament directory not found: {tournament_dir}")
    with _lock_for(tournament_dir):
        return TournamentSnapshot(
            settings=_load_settings(tournament_dir),
            teams=_load_teams(tournament_dir),
            players_by_team=_load_players(tournament_dir),
            matches=_load_matches(tournament_dir),
        )

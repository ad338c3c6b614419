"""
Flask JSON service for tournament standings and statistics.
"""
import os
import yaml
from flask import Flask, jsonify, request, abort, g
from league.snapshot import SnapshotError, load_snapshot
from league.standings import build_standings
from league.player_stats import build_player_statistics
from league.leaderboard import player_leaderboard, team_leaderboard, TEAM_LEADERBOARD_FIELDS
from league.sports import counter_names, default_player_stat
from league.team_stats import compute_team_statistics
from league.timeline import match_timeline, score_line

app = Flask(__name__)

BASE_DIR = os.path.dirname(os.path.dirname(__file__))
DATA_DIR = os.environ.get('TOURNAMENT_DATA_DIR', os.path.join(BASE_DIR, 'data'))

TOURNAMENTS_DIR = os.path.join(DATA_DIR, 'tournaments')
TOURNAMENTS_FILE = os.path.join(TOURNAMENTS_DIR, 'tournaments.yaml')

DEFAULT_LEADERBOARD_LIMIT = 10


def load_tournaments() -> list:
    """Load the tournament registry, falling back to the directory listing."""
    if os.path.exists(TOURNAMENTS_FILE):
        try:
            with open(TOURNAMENTS_FILE, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
            return data.get('tournaments', []) if data else []
        except yaml.YAMLError as e:
            app.logger.warning(f'Failed to parse {TOURNAMENTS_FILE}: {e}')
            return []
    if not os.path.isdir(TOURNAMENTS_DIR):
        return []
    return [
        {'slug': entry, 'name': entry}
        for entry in sorted(os.listdir(TOURNAMENTS_DIR))
        if os.path.isdir(os.path.join(TOURNAMENTS_DIR, entry))
    ]


def _resolve_tournament_dir(slug: str):
    """Validate slug and return the tournament data directory path, or None."""
    if not slug or '..' in slug or '/' in slug or '\\' in slug:
        return None
    path = os.path.join(TOURNAMENTS_DIR, slug)
    if os.path.isdir(path):
        return path
    return None


def _get_snapshot(slug: str):
    """Load the snapshot for ``slug`` once per request, 404 if unknown."""
    snapshot = getattr(g, 'snapshot', None)
    if snapshot is not None:
        return snapshot
    tournament_dir = _resolve_tournament_dir(slug)
    if not tournament_dir:
        abort(404, description=f'Tournament not found: {slug}')
    g.snapshot = load_snapshot(tournament_dir)
    return g.snapshot


def _log_warnings(slug: str, warnings: list):
    for warning in warnings:
        app.logger.warning(f'[{slug}] {warning}')


def _get_limit():
    """Parse the optional ``limit`` query parameter."""
    raw = request.args.get('limit')
    if raw is None:
        return DEFAULT_LEADERBOARD_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        abort(400, description=f'Invalid limit: {raw}')
    if limit < 0:
        abort(400, description=f'Invalid limit: {raw}')
    return limit


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(e):
    return jsonify({'error': e.description}), e.code


@app.errorhandler(SnapshotError)
def snapshot_error(e):
    app.logger.error(f'Failed to load tournament data: {e}')
    return jsonify({'error': 'Failed to load tournament data'}), 500


@app.route('/api/tournaments')
def api_tournaments():
    """List known tournaments."""
    return jsonify({'tournaments': load_tournaments()})


@app.route('/api/tournaments/<slug>/standings')
def api_standings(slug):
    """Points table for a tournament."""
    snapshot = _get_snapshot(slug)
    standings, warnings = build_standings(snapshot.teams, snapshot.matches)
    _log_warnings(slug, warnings)
    return jsonify({
        'standings': [standing.to_dict() for standing in standings],
        'warnings': warnings,
    })


@app.route('/api/tournaments/<slug>/players/stats')
def api_player_stats(slug):
    """Statistics for every roster player, top scorers first."""
    snapshot = _get_snapshot(slug)
    event_type_map = snapshot.event_type_map
    stats, warnings = build_player_statistics(
        snapshot.teams, snapshot.players_by_team, snapshot.matches, event_type_map)
    _log_warnings(slug, warnings)
    sort_stat = default_player_stat(event_type_map)
    players = sorted(stats.values(), key=lambda p: p.get(sort_stat), reverse=True)
    return jsonify({
        'players': [player.to_dict() for player in players],
        'counters': counter_names(event_type_map),
        'warnings': warnings,
    })


@app.route('/api/tournaments/<slug>/players/leaderboard')
def api_player_leaderboard(slug):
    """Players ranked on one statistic (``?stat=goals&limit=10``)."""
    snapshot = _get_snapshot(slug)
    event_type_map = snapshot.event_type_map
    stat = request.args.get('stat') or default_player_stat(event_type_map)
    if stat != 'matches' and stat not in counter_names(event_type_map):
        abort(400, description=f'Unknown player statistic: {stat}')
    limit = _get_limit()
    stats, warnings = build_player_statistics(
        snapshot.teams, snapshot.players_by_team, snapshot.matches, event_type_map)
    _log_warnings(slug, warnings)
    return jsonify({
        'stat': stat,
        'leaderboard': [
            {**player.to_dict(), 'value': value}
            for player, value in player_leaderboard(stats, stat, limit=limit)
        ],
    })


@app.route('/api/tournaments/<slug>/teams/leaderboard')
def api_team_leaderboard(slug):
    """Teams ranked on one standings column (``?stat=goals_for``)."""
    snapshot = _get_snapshot(slug)
    stat = request.args.get('stat', 'points')
    if stat not in TEAM_LEADERBOARD_FIELDS:
        abort(400, description=f'Unknown team statistic: {stat}')
    limit = _get_limit()
    standings, warnings = build_standings(snapshot.teams, snapshot.matches)
    _log_warnings(slug, warnings)
    return jsonify({
        'stat': stat,
        'leaderboard': [
            {'team_id': standing.team_id, 'team_name': standing.team_name, 'value': value}
            for standing, value in team_leaderboard(standings, stat, limit=limit)
        ],
    })


@app.route('/api/tournaments/<slug>/teams/stats')
def api_team_stats(slug):
    """Summary cards for every team."""
    snapshot = _get_snapshot(slug)
    cards = compute_team_statistics(snapshot.teams, snapshot.matches)
    return jsonify({'teams': [card.to_dict() for card in cards.values()]})


@app.route('/api/tournaments/<slug>/matches')
def api_matches(slug):
    """Fixture list with display scores."""
    snapshot = _get_snapshot(slug)
    team_names = {team.id: team.name for team in snapshot.teams}
    matches = []
    for match in snapshot.matches:
        matches.append({
            'id': match.id,
            'home_team_id': match.home_team_id,
            'away_team_id': match.away_team_id,
            'home_team_name': team_names.get(match.home_team_id),
            'away_team_name': team_names.get(match.away_team_id),
            'status': match.status,
            'match_date': match.match_date,
            'score_line': score_line(match),
        })
    return jsonify({'matches': matches})


@app.route('/api/tournaments/<slug>/matches/<match_id>/timeline')
def api_match_timeline(slug, match_id):
    """Events of a single match in minute order."""
    snapshot = _get_snapshot(slug)
    match = snapshot.find_match(match_id)
    if match is None:
        abort(404, description=f'Match not found: {match_id}')
    return jsonify({
        'match_id': match.id,
        'score_line': score_line(match),
        'events': [event.to_dict() for event in match_timeline(match)],
    })


if __name__ == '__main__':
    app.run(debug=os.environ.get('FLASK_DEBUG') == '1')

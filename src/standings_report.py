import os
import sys
from league.snapshot import SnapshotError, load_snapshot
from league.standings import build_standings
from league.player_stats import build_player_statistics
from league.leaderboard import player_leaderboard
from league.sports import default_player_stat

TABLE_HEADER = ('Pos', 'Team', 'P', 'W', 'D', 'L', 'GF', 'GA', 'GD', 'Pts')


def format_standings(standings):
    """Render the points table as fixed-width text lines."""
    name_width = max([len('Team')] + [len(str(s.team_name)) for s in standings])
    row_format = '{:>3}  {:<' + str(name_width) + '}' + '  {:>3}' * 8
    lines = [row_format.format(*TABLE_HEADER)]
    for standing in standings:
        lines.append(row_format.format(
            standing.position, standing.team_name, standing.played, standing.won,
            standing.drawn, standing.lost, standing.goals_for, standing.goals_against,
            standing.goal_difference, standing.points,
        ))
    return lines


def format_leaderboard(ranked, stat):
    lines = []
    for rank, (player, value) in enumerate(ranked, start=1):
        lines.append(f"{rank:>3}. {player.name} ({player.team}) - {value} {stat}")
    return lines


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print("Usage: standings_report.py <tournament_dir> [stat]", file=sys.stderr)
        return 2

    tournament_dir = argv[0]

    try:
        snapshot = load_snapshot(tournament_dir)
    except SnapshotError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if not snapshot.teams:
        print(f"No teams loaded. Check {os.path.join(tournament_dir, 'teams.yaml')}")
        return 0

    event_type_map = snapshot.event_type_map
    stat = argv[1] if len(argv) > 1 else default_player_stat(event_type_map)

    standings, warnings = build_standings(snapshot.teams, snapshot.matches)
    player_stats, player_warnings = build_player_statistics(
        snapshot.teams, snapshot.players_by_team, snapshot.matches, event_type_map)
    warnings.extend(player_warnings)

    print(f"# {snapshot.settings.get('name')}")
    for line in format_standings(standings):
        print(line)

    if player_stats:
        print()
        print(f"# Top players by {stat}")
        for line in format_leaderboard(player_leaderboard(player_stats, stat, limit=10), stat):
            print(line)

    for warning in warnings:
        print(f"WARNING: {warning}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

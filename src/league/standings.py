"""
Points table computation from a snapshot of tournament matches.
"""
import logging
from typing import List, Tuple

from league.models import TeamStanding

logger = logging.getLogger(__name__)

WIN_POINTS = 3
DRAW_POINTS = 1


def _standing_sort_key(standing: TeamStanding) -> Tuple[int, int, int]:
    return (standing.points, standing.goal_difference, standing.goals_for)


def build_standings(teams, matches) -> Tuple[List[TeamStanding], List[str]]:
    """
    Calculate the points table for a tournament.

    Returns (standings, warnings). One row per team in ``teams``, including
    teams without a completed match. Only completed matches count.

    Ranking: points -> goal difference -> goals for. Teams still level keep
    their roster order (the sort is stable).

    A completed match naming a team that is not on the roster, or pitting a
    team against itself, contributes nothing; it is reported in ``warnings``
    instead of raising. A team id listed twice keeps its first roster row.
    """
    table = {}
    warnings = []
    for team in teams:
        if team.id in table:
            message = f"Team {team.id} listed twice; keeping {table[team.id].team_name}"
            logger.warning(message)
            warnings.append(message)
            continue
        table[team.id] = TeamStanding(team.id, team.name)

    for match in matches:
        if not match.is_completed:
            continue

        if match.home_team_id == match.away_team_id:
            message = f"Match {match.id} skipped: team {match.home_team_id} cannot play itself"
            logger.warning(message)
            warnings.append(message)
            continue

        home = table.get(match.home_team_id)
        away = table.get(match.away_team_id)
        if home is None or away is None:
            missing = [team_id for team_id in (match.home_team_id, match.away_team_id) if team_id not in table]
            message = f"Match {match.id} skipped: unknown team(s) {', '.join(str(t) for t in missing)}"
            logger.warning(message)
            warnings.append(message)
            continue

        home_score, away_score = match.score

        home.played += 1
        away.played += 1
        home.goals_for += home_score
        home.goals_against += away_score
        away.goals_for += away_score
        away.goals_against += home_score

        if home_score > away_score:
            home.won += 1
            home.points += WIN_POINTS
            away.lost += 1
        elif home_score < away_score:
            away.won += 1
            away.points += WIN_POINTS
            home.lost += 1
        else:
            home.drawn += 1
            away.drawn += 1
            home.points += DRAW_POINTS
            away.points += DRAW_POINTS

    for standing in table.values():
        standing.goal_difference = standing.goals_for - standing.goals_against

    standings = sorted(table.values(), key=_standing_sort_key, reverse=True)
    for position, standing in enumerate(standings, start=1):
        standing.position = position

    logger.debug(f"Standings computed for {len(standings)} teams, {len(warnings)} warning(s)")
    return standings, warnings


def compute_standings(teams, matches) -> List[TeamStanding]:
    """Return the ranked points table, discarding warnings."""
    standings, _warnings = build_standings(teams, matches)
    return standings

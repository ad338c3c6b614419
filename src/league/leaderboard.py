"""
Leaderboards: rank players or teams by a single statistic.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

TEAM_LEADERBOARD_FIELDS = (
    'points', 'played', 'won', 'drawn', 'lost',
    'goals_for', 'goals_against', 'goal_difference',
)


def rank_leaderboard(values: Dict[Any, float], entities: Dict[Any, Any], limit: Optional[int] = None) -> List[Tuple[Any, float]]:
    """
    Rank entities by value, highest first.

    Returns a new list of (metadata, value) pairs. Entities tied on value keep
    the iteration order of ``values``. Zero values are kept. Keys without an
    entry in ``entities`` are left out.
    """
    ranked = []
    for entity_id, value in values.items():
        if entity_id not in entities:
            logger.warning(f"Leaderboard entry {entity_id} skipped: no metadata")
            continue
        ranked.append((entities[entity_id], value))

    ranked.sort(key=lambda pair: pair[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


def player_leaderboard(player_stats, stat: str, limit: Optional[int] = None):
    """Rank PlayerStatistic objects (keyed by player id) on one counter."""
    values = {player_id: player_stat.get(stat) for player_id, player_stat in player_stats.items()}
    return rank_leaderboard(values, player_stats, limit=limit)


def team_leaderboard(standings, stat: str, limit: Optional[int] = None):
    """Rank TeamStanding rows on one numeric column."""
    if stat not in TEAM_LEADERBOARD_FIELDS:
        raise ValueError(f"Unknown team statistic: {stat}")
    values = {standing.team_id: getattr(standing, stat) for standing in standings}
    entities = {standing.team_id: standing for standing in standings}
    return rank_leaderboard(values, entities, limit=limit)

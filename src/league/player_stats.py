"""
Per-player statistics from the events of completed matches.
"""
import logging
from typing import Dict, List, Tuple

from league.models import LINEUP_EVENT, PlayerStatistic
from league.sports import counter_names

logger = logging.getLogger(__name__)


def build_player_statistics(teams, players_by_team, matches, event_type_map) -> Tuple[Dict[str, PlayerStatistic], List[str]]:
    """
    Calculate cumulative statistics for every roster player.

    Returns (stats, warnings) where stats maps player id to PlayerStatistic.
    Every roster player gets an entry, with all counters of
    ``event_type_map`` at zero even if they never feature in an event.

    A ``lineup`` event counts one appearance. Any other tag is looked up in
    ``event_type_map``; tags it does not know are ignored. Events for players
    outside the roster are skipped and reported in ``warnings``.
    """
    counters = counter_names(event_type_map)
    stats = {}
    for team in teams:
        for player in players_by_team.get(team.id, []):
            stats[player.id] = PlayerStatistic(
                player.id,
                player.name,
                team=team.name,
                position=player.position,
                counter_names=counters,
            )

    warnings = []
    for match in matches:
        if not match.is_completed:
            continue
        for event in match.events:
            player_stat = stats.get(event.player_id)
            if player_stat is None:
                message = f"Event {event.id} in match {match.id} skipped: unknown player {event.player_id}"
                logger.warning(message)
                warnings.append(message)
                continue

            if event.event_type == LINEUP_EVENT:
                player_stat.matches += 1
                continue

            counter = event_type_map.get(event.event_type)
            if counter:
                player_stat.increment(counter)

    return stats, warnings


def compute_player_statistics(teams, players_by_team, matches, event_type_map) -> Dict[str, PlayerStatistic]:
    """Return player id -> PlayerStatistic, discarding warnings."""
    stats, _warnings = build_player_statistics(teams, players_by_team, matches, event_type_map)
    return stats

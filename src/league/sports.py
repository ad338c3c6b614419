"""
Per-sport event vocabularies and the counters they feed.

Each sport maps a recorded event tag to the name of the player counter it
increments. Tags that map to nothing are still recordable (they show up in a
match timeline) but are not counted.
"""
from typing import Dict, List, Optional

from league.models import LINEUP_EVENT

DEFAULT_SPORT = 'football'

EVENT_TYPE_MAPS = {
    'football': {
        'goal': 'goals',
        'penalty_scored': 'goals',
        'assist': 'assists',
        'yellow_card': 'yellow_cards',
        'red_card': 'red_cards',
        'own_goal': 'own_goals',
        'penalty_missed': 'penalties_missed',
    },
    'basketball': {
        'two_points': 'field_goals',
        'three_points': 'three_pointers',
        'free_throw': 'free_throws',
        'rebound': 'rebounds',
        'assist': 'assists',
        'block': 'blocks',
        'steal': 'steals',
        'foul': 'fouls',
    },
    'volleyball': {
        'point': 'points',
        'serve_ace': 'aces',
        'block': 'blocks',
        'spike': 'kills',
        'dig': 'digs',
        'assist': 'assists',
        'service_error': 'service_errors',
    },
    'cricket': {
        'runs': 'runs',
        'wicket': 'wickets',
        'boundary_four': 'fours',
        'boundary_six': 'sixes',
        'catch': 'catches',
        'run_out': 'run_outs',
    },
    'tennis': {
        'ace': 'aces',
        'double_fault': 'double_faults',
        'winner': 'winners',
        'unforced_error': 'unforced_errors',
    },
}

GENERIC_EVENT_TYPE_MAP = {'score': 'points'}

# Tags that are recorded but never counted
UNCOUNTED_EVENT_TYPES = {
    'football': ['substitution'],
    'cricket': ['wide', 'no_ball'],
}


def get_event_type_map(sport: Optional[str], overrides: Optional[Dict] = None) -> Dict[str, str]:
    """
    Return a fresh event_type -> counter table for a sport.

    ``overrides`` come from tournament settings; a value of None removes the
    tag from the table.
    """
    key = (sport or DEFAULT_SPORT).lower()
    event_type_map = dict(EVENT_TYPE_MAPS.get(key, GENERIC_EVENT_TYPE_MAP))
    for event_type, counter in (overrides or {}).items():
        if counter is None:
            event_type_map.pop(event_type, None)
        else:
            event_type_map[event_type] = counter
    # Appearances are counted separately, never as a named counter
    event_type_map.pop(LINEUP_EVENT, None)
    return event_type_map


def get_event_types(sport: Optional[str]) -> List[str]:
    """List the event tags a match official can record for a sport."""
    key = (sport or DEFAULT_SPORT).lower()
    event_types = [LINEUP_EVENT]
    event_types.extend(EVENT_TYPE_MAPS.get(key, GENERIC_EVENT_TYPE_MAP).keys())
    event_types.extend(UNCOUNTED_EVENT_TYPES.get(key, []))
    return event_types


def counter_names(event_type_map: Dict[str, str]) -> List[str]:
    """Distinct counter names in first-seen order."""
    names = []
    for counter in event_type_map.values():
        if counter not in names:
            names.append(counter)
    return names


def default_player_stat(event_type_map: Dict[str, str]) -> str:
    """``goals`` where the sport counts them, else the sport's first counter."""
    counters = counter_names(event_type_map)
    if 'goals' in counters or not counters:
        return 'goals'
    return counters[0]

SCHEDULED = 'scheduled'
IN_PROGRESS = 'in_progress'
COMPLETED = 'completed'
CANCELLED = 'cancelled'

MATCH_STATUSES = (SCHEDULED, IN_PROGRESS, COMPLETED, CANCELLED)

LINEUP_EVENT = 'lineup'


class Team:
    def __init__(self, id, name, attributes=None):
        self.id = id
        self.name = name
        self.attributes = attributes if attributes else {}

    def to_dict(self):
        return {'id': self.id, 'name': self.name, **self.attributes}

    def __repr__(self):
        return f"Team(id={self.id}, name={self.name}, attributes={self.attributes})"


class Player:
    def __init__(self, id, team_id, name, position=None, jersey_number=None):
        self.id = id
        self.team_id = team_id
        self.name = name
        self.position = position
        self.jersey_number = jersey_number

    def to_dict(self):
        return {
            'id': self.id,
            'team_id': self.team_id,
            'name': self.name,
            'position': self.position,
            'jersey_number': self.jersey_number,
        }

    def __repr__(self):
        return f"Player(id={self.id}, team_id={self.team_id}, name={self.name})"


class MatchEvent:
    def __init__(self, id, match_id, event_type, team_id=None, player_id=None, minute=None, additional_info=None):
        self.id = id
        self.match_id = match_id
        self.event_type = event_type
        self.team_id = team_id
        self.player_id = player_id
        self.minute = minute  # Display ordering only
        self.additional_info = additional_info

    def to_dict(self):
        return {
            'id': self.id,
            'match_id': self.match_id,
            'event_type': self.event_type,
            'team_id': self.team_id,
            'player_id': self.player_id,
            'minute': self.minute,
            'additional_info': self.additional_info,
        }

    def __repr__(self):
        return f"MatchEvent(id={self.id}, event_type={self.event_type}, player_id={self.player_id}, minute={self.minute})"


class Match:
    def __init__(self, id, home_team_id, away_team_id, status=SCHEDULED, score=(0, 0), match_date=None, events=None):
        self.id = id
        self.home_team_id = home_team_id
        self.away_team_id = away_team_id
        self.status = status
        self.score = tuple(score) if score is not None else (0, 0)
        self.match_date = match_date
        self.events = list(events) if events else []

    @property
    def is_completed(self):
        return self.status == COMPLETED

    def to_dict(self):
        return {
            'id': self.id,
            'home_team_id': self.home_team_id,
            'away_team_id': self.away_team_id,
            'status': self.status,
            'score': {'home': self.score[0], 'away': self.score[1]},
            'match_date': self.match_date,
            'events': [event.to_dict() for event in self.events],
        }

    def __repr__(self):
        return (f"Match(id={self.id}, home={self.home_team_id}, away={self.away_team_id}, "
                f"status={self.status}, score={self.score})")


class TeamStanding:
    """One row of the points table. Derived, never stored."""

    def __init__(self, team_id, team_name):
        self.team_id = team_id
        self.team_name = team_name
        self.played = 0
        self.won = 0
        self.drawn = 0
        self.lost = 0
        self.goals_for = 0
        self.goals_against = 0
        self.goal_difference = 0
        self.points = 0
        self.position = None

    def to_dict(self):
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'played': self.played,
            'won': self.won,
            'drawn': self.drawn,
            'lost': self.lost,
            'goals_for': self.goals_for,
            'goals_against': self.goals_against,
            'goal_difference': self.goal_difference,
            'points': self.points,
            'position': self.position,
        }

    def __eq__(self, other):
        if not isinstance(other, TeamStanding):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (f"TeamStanding(team={self.team_name}, played={self.played}, won={self.won}, "
                f"drawn={self.drawn}, lost={self.lost}, gd={self.goal_difference}, points={self.points})")


class PlayerStatistic:
    """Cumulative per-player counters. Missing counters read as zero."""

    def __init__(self, player_id, name, team=None, position=None, counter_names=()):
        self.player_id = player_id
        self.name = name
        self.team = team
        self.position = position
        self.matches = 0
        self.counters = {counter: 0 for counter in counter_names}

    def get(self, stat):
        if stat == 'matches':
            return self.matches
        return self.counters.get(stat, 0)

    def increment(self, counter):
        self.counters[counter] = self.counters.get(counter, 0) + 1

    def __getitem__(self, stat):
        return self.get(stat)

    def to_dict(self):
        return {
            'player_id': self.player_id,
            'name': self.name,
            'team': self.team,
            'position': self.position,
            'matches': self.matches,
            **self.counters,
        }

    def __eq__(self, other):
        if not isinstance(other, PlayerStatistic):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"PlayerStatistic(player={self.name}, matches={self.matches}, counters={self.counters})"


class TeamStatistic:
    def __init__(self, team_id, team_name):
        self.team_id = team_id
        self.team_name = team_name
        self.matches_played = 0
        self.total_goals = 0
        self.clean_sheets = 0

    @property
    def goals_per_match(self):
        if not self.matches_played:
            return 0.0
        return round(self.total_goals / self.matches_played, 2)

    def to_dict(self):
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'matches_played': self.matches_played,
            'total_goals': self.total_goals,
            'goals_per_match': self.goals_per_match,
            'clean_sheets': self.clean_sheets,
        }

    def __eq__(self, other):
        if not isinstance(other, TeamStatistic):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"TeamStatistic(team={self.team_name}, played={self.matches_played}, goals={self.total_goals})"

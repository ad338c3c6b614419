from typing import Dict

from league.models import TeamStatistic


def compute_team_statistics(teams, matches) -> Dict[str, TeamStatistic]:
    """Per-team summary cards: matches played, goals, goals per match, clean sheets.

    Each card looks only at the team's own completed matches, so a match
    against an unknown opponent still counts for the known side.
    """
    cards = {}
    for team in teams:
        cards.setdefault(team.id, TeamStatistic(team.id, team.name))

    for match in matches:
        if not match.is_completed or match.home_team_id == match.away_team_id:
            continue
        home_score, away_score = match.score
        sides = (
            (match.home_team_id, home_score, away_score),
            (match.away_team_id, away_score, home_score),
        )
        for team_id, scored, conceded in sides:
            card = cards.get(team_id)
            if card is None:
                continue
            card.matches_played += 1
            card.total_goals += scored
            if conceded == 0:
                card.clean_sheets += 1

    return cards

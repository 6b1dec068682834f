"""
Betting Market Edge

Uses Vegas lines as a read on the scoring environment:
- Implied team total: higher = more scoring expected
- Game total: high totals = shootout, good for all offenses
- Spread: two-touchdown favorites often rest starters late

Research basis:
- Implied totals correlate strongly with fantasy scoring
- Teams favored by 14+ often pull starters in the 4th quarter
"""

import logging

from configs.edge_config import BETTING_THRESHOLDS
from fantasy_edge.data.odds import GameOdds, OddsClient
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_half_up

logger = logging.getLogger(__name__)


def _signed(value: float) -> str:
    return f"{value:+g}" if value else "0"


class BettingDetector(BaseDetector):
    """Implied totals, game total and spread for the player's game."""

    category = "betting"
    label = "Betting"
    source = "the-odds-api"

    def __init__(self, odds: OddsClient):
        self.odds = odds

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        no_data = dict(implied_total=None, is_shootout=False, is_blowout_risk=False)

        if not self.odds.is_configured():
            return self.empty("Odds data unavailable (API key not configured)", **no_data)

        game = self.odds.get_game_odds(context.team, context.opponent)
        if game is None:
            return self.empty("No odds data found for this matchup", **no_data)

        team = context.team
        is_home = game.home_team == team
        implied = game.implied_home if is_home else game.implied_away
        thresholds = BETTING_THRESHOLDS
        signals = []
        is_shootout = False
        is_blowout_risk = False

        # 1. Implied team total
        if implied >= thresholds.high_implied:
            signals.append(self.signal(
                player, week, SignalType.BETTING_IMPLIED_TOTAL, Impact.POSITIVE,
                magnitude=min(5, round_half_up((implied - thresholds.league_average_implied) / 2)),
                confidence=80,
                short_description=f"High implied total: {implied:g} points",
                details=f"Vegas expects {team} to score {implied:g} points, above the league "
                        f"average ({thresholds.league_average_implied:g}). {self._line(game)}",
            ))
        if implied <= thresholds.low_implied:
            signals.append(self.signal(
                player, week, SignalType.BETTING_IMPLIED_TOTAL, Impact.NEGATIVE,
                magnitude=max(-5, round_half_up((implied - 22) / 2)),
                confidence=75,
                short_description=f"Low implied total: {implied:g} points",
                details=f"Vegas expects {team} to score only {implied:g} points. "
                        f"Tough offensive environment. {self._line(game)}",
            ))

        # 2. Game total
        if game.total >= thresholds.high_total:
            is_shootout = True
            signals.append(self.signal(
                player, week, SignalType.BETTING_IMPLIED_TOTAL, Impact.POSITIVE,
                magnitude=3,
                confidence=75,
                short_description=f"Shootout alert: O/U {game.total:g}",
                details=f"Game total of {game.total:g} suggests a high-scoring affair. "
                        "QBs and WRs have elevated ceilings; consider stacking.",
            ))
        if game.total <= thresholds.low_total:
            signals.append(self.signal(
                player, week, SignalType.BETTING_IMPLIED_TOTAL, Impact.NEGATIVE,
                magnitude=-2,
                confidence=70,
                short_description=f"Low total: O/U {game.total:g}",
                details=f"Game total of {game.total:g} suggests a defensive struggle. "
                        "Floor-based players may be safer than ceiling plays.",
            ))

        # 3. Spread (team perspective, positive = underdog)
        team_spread = game.spread if is_home else -game.spread
        if team_spread >= thresholds.blowout_spread:
            signals.append(self.signal(
                player, week, SignalType.BETTING_LINE_MOVE, Impact.NEUTRAL,
                magnitude=0,
                confidence=70,
                short_description=f"Big underdog: +{team_spread:g} spread",
                details=f"{team} is a {team_spread:g}-point underdog. Negative game script "
                        "means more passing; RBs may lose work if the team falls behind early.",
            ))
        if team_spread <= -thresholds.blowout_spread:
            is_blowout_risk = True
            signals.append(self.signal(
                player, week, SignalType.BETTING_LINE_MOVE, Impact.NEGATIVE,
                magnitude=-2,
                confidence=65,
                short_description=f"Blowout risk: {team_spread:g} spread",
                details=f"{team} is a {abs(team_spread):g}-point favorite. Starters may rest "
                        "in the 4th quarter and backups can steal goal-line work.",
            ))

        positives = sum(1 for s in signals if s.impact == Impact.POSITIVE)
        negatives = sum(1 for s in signals if s.impact == Impact.NEGATIVE)
        if positives > negatives:
            summary = f"Favorable betting environment: implied {implied:g} pts"
        elif negatives > positives:
            summary = f"Challenging betting environment: implied {implied:g} pts"
        elif not signals:
            summary = f"Neutral betting environment: implied {implied:g} pts"
        else:
            summary = f"Mixed betting signals: implied {implied:g} pts"

        return self.result(
            signals,
            summary,
            implied_total=implied,
            is_shootout=is_shootout,
            is_blowout_risk=is_blowout_risk,
        )

    @staticmethod
    def _line(game: GameOdds) -> str:
        return f"Game total: {game.total:g}, Spread: {_signed(game.spread)}."

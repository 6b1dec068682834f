"""
Defense vs Position Edge

How the opposing defense ranks against the player's position.
A defense that is weak vs RBs = boost for opposing RBs; elite vs WRs =
downgrade for opposing WRs.

Rankings come from configs/defense_rankings.yaml (1 = best defense,
32 = worst). Matchup data is most useful for spotting extremes, and RB
matchups are more predictive than WR matchups.
"""

import logging
from typing import List, Tuple

from configs.edge_config import MATCHUP_POSITION_MULTIPLIER, MATCHUP_TIERS
from fantasy_edge.data.reference import DefenseRanking, load_defense_rankings
from fantasy_edge.edges.base_edge import BaseDetector
from fantasy_edge.schemas import DetectorResult, GameContext, Impact, Player, SignalType
from fantasy_edge.utils.rounding import round_to

logger = logging.getLogger(__name__)

DEFAULT_RANK = 16

TIER_LABELS = {
    'smash': 'Smash spot',
    'good': 'Good matchup',
    'neutral': 'Neutral',
    'tough': 'Tough matchup',
    'avoid': 'Avoid',
}


def matchup_tier(rank: int) -> str:
    if rank >= MATCHUP_TIERS.smash:
        return 'smash'
    if rank >= MATCHUP_TIERS.good:
        return 'good'
    if rank >= MATCHUP_TIERS.neutral:
        return 'neutral'
    if rank >= MATCHUP_TIERS.tough:
        return 'tough'
    return 'avoid'


def matchup_magnitude(rank: int, position: str) -> float:
    """Rank 1 maps to about -4, rank 32 to about +4, scaled by position."""
    normalized = (rank - 16.5) / 16.5 * 4
    return round_to(normalized * MATCHUP_POSITION_MULTIPLIER.get(position, 1.0), 1)


def overall_rating(defense: DefenseRanking) -> str:
    avg_rank = (defense.vs_qb + defense.vs_rb + defense.vs_wr + defense.vs_te) / 4
    if avg_rank <= 8:
        return 'Elite'
    if avg_rank <= 14:
        return 'Good'
    if avg_rank <= 20:
        return 'Average'
    if avg_rank <= 26:
        return 'Below Average'
    return 'Poor'


def smash_spots(position: str) -> List[Tuple[str, int]]:
    """Defenses in the smash tier for a position, worst defense first."""
    spots = []
    for team, defense in load_defense_rankings().items():
        rank = defense.rank_vs(position)
        if rank is not None and rank >= MATCHUP_TIERS.smash:
            spots.append((team, rank))
    return sorted(spots, key=lambda spot: spot[1], reverse=True)


class DefenseMatchupDetector(BaseDetector):
    """Opponent's defense-vs-position rank."""

    category = "defense_matchup"
    label = "Matchup"
    source = "defense-rankings"

    def analyze(self, player: Player, context: GameContext, week: int) -> DetectorResult:
        opponent = context.opponent
        defense = load_defense_rankings().get(opponent)
        if defense is None:
            return self.empty(f"No defensive data for {opponent}", matchup_rank=DEFAULT_RANK, tier='neutral')

        position = player.position.value
        rank = defense.rank_vs(position)
        if rank is None:
            rank = DEFAULT_RANK
        tier = matchup_tier(rank)
        magnitude = matchup_magnitude(rank, position)
        rating = overall_rating(defense)

        headline = f"{TIER_LABELS[tier]}: {opponent} is #{rank} vs {position}s"
        context_line = (
            f"Overall defense rating: {rating}. Pass yards allowed rank: #{defense.pass_yds}, "
            f"Rush yards allowed rank: #{defense.rush_yds}."
        )

        signals = []
        if tier in ('smash', 'good'):
            signals.append(self.signal(
                player, week, SignalType.MATCHUP_DEFENSE, Impact.POSITIVE,
                magnitude=magnitude,
                confidence=80 if tier == 'smash' else 70,
                short_description=headline,
                details=f"{opponent} defense ranks #{rank} against {position}s this season. "
                        + ("Top-tier matchup. Expect elevated production. " if tier == 'smash'
                           else "Favorable matchup. Slight boost to expectations. ")
                        + context_line,
            ))
        elif tier in ('tough', 'avoid'):
            signals.append(self.signal(
                player, week, SignalType.MATCHUP_DEFENSE, Impact.NEGATIVE,
                magnitude=magnitude,
                confidence=80 if tier == 'avoid' else 70,
                short_description=headline,
                details=f"{opponent} defense ranks #{rank} against {position}s this season. "
                        + ("Elite defense. Expect suppressed production. " if tier == 'avoid'
                           else "Difficult matchup. Temper expectations. ")
                        + context_line,
            ))

        return self.result(signals, headline, matchup_rank=rank, tier=tier, defense_overall=rating)

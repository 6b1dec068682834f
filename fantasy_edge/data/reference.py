"""
Static Reference Tables

Hand-maintained tables shipped as YAML under configs/:
- defense_rankings.yaml: defense-vs-position ranks per team
- contract_incentives.yaml: verified late-season contract incentives
- revenge_games.yaml: players facing a former team
- red_zone_usage.yaml: per-game red zone / goal line volume

Each loader parses its file once per process.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from configs import CONFIGS_DIR
from fantasy_edge.data.sleeper import normalize_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefenseRanking:
    """Rank 1 = best defense (fewest fantasy points allowed), 32 = worst."""
    team: str
    vs_qb: int
    vs_rb: int
    vs_wr: int
    vs_te: int
    pass_yds: int
    rush_yds: int
    points: int
    sacks: int

    def rank_vs(self, position: str) -> Optional[int]:
        return {'QB': self.vs_qb, 'RB': self.vs_rb, 'WR': self.vs_wr, 'TE': self.vs_te}.get(position)


@dataclass(frozen=True)
class Incentive:
    type: str
    threshold: float
    current: float
    needed: float
    bonus: int
    achievable: bool


@dataclass(frozen=True)
class ContractIncentives:
    player_id: str
    name: str
    team: str
    position: str
    incentives: List[Incentive]


@dataclass(frozen=True)
class RevengeGame:
    name: str
    current_team: str
    former_team: str
    position: str
    years_with_current: int
    circumstances: str
    bitter_exit: bool


@dataclass(frozen=True)
class RedZoneUsage:
    name: str
    team: str
    position: str
    rz_targets: float
    rz_carries: float
    team_rz_targets: float
    team_rz_carries: float
    gl_carries: float
    team_gl_carries: float
    tds_last5: int


def _load_yaml(filename: str, configs_dir: Optional[Path] = None):
    path = (configs_dir or CONFIGS_DIR) / filename
    with open(path, "r") as f:
        data = yaml.safe_load(f)
    logger.debug(f"Loaded reference table {path}")
    return data


@lru_cache(maxsize=None)
def load_defense_rankings() -> Dict[str, DefenseRanking]:
    data = _load_yaml("defense_rankings.yaml") or {}
    return {team: DefenseRanking(team=team, **values) for team, values in data.items()}


@lru_cache(maxsize=None)
def load_contract_incentives() -> List[ContractIncentives]:
    entries = _load_yaml("contract_incentives.yaml") or []
    return [
        ContractIncentives(
            player_id=str(entry['player_id']),
            name=entry['name'],
            team=entry['team'],
            position=entry['position'],
            incentives=[Incentive(**inc) for inc in entry.get('incentives', [])],
        )
        for entry in entries
    ]


@lru_cache(maxsize=None)
def load_revenge_games() -> List[RevengeGame]:
    return [RevengeGame(**entry) for entry in _load_yaml("revenge_games.yaml") or []]


@lru_cache(maxsize=None)
def load_red_zone_usage() -> List[RedZoneUsage]:
    return [RedZoneUsage(**entry) for entry in _load_yaml("red_zone_usage.yaml") or []]


def find_by_name(entries, name: str):
    """First entry whose normalized name matches exactly."""
    target = normalize_name(name)
    return next((e for e in entries if normalize_name(e.name) == target), None)


def find_contract_incentives(player_id: str, name: str) -> Optional[ContractIncentives]:
    """Match by Sleeper id first, then by name."""
    entries = load_contract_incentives()
    by_id = next((e for e in entries if e.player_id == str(player_id)), None)
    return by_id or find_by_name(entries, name)

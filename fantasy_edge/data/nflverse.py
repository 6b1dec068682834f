"""
nflverse Data Client

Weekly player stats and the game schedule from the nflverse-data GitHub
releases, loaded into pandas. Used for:
- Target share / carry share and their trend
- Home vs away PPR splits
- Primetime vs regular slot PPR splits
- Indoor vs outdoor PPR splits

Only the configured season's regular season rows are kept.

Usage:
    client = NflverseClient()
    share = client.get_target_share("Ja'Marr Chase")
    splits = client.get_home_away_splits("Josh Allen")
"""

import io
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np
import pandas as pd
import requests

from configs.edge_config import TREND_DOWN_RATIO, TREND_UP_RATIO, USAGE_LOOKBACK_WEEKS
from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.data.http import get_text
from fantasy_edge.utils.rounding import round_to
from fantasy_edge.utils.team_names import normalize_team_name

logger = logging.getLogger(__name__)

STAT_COLUMNS = [
    'completions', 'attempts', 'passing_yards', 'passing_tds', 'interceptions',
    'carries', 'rushing_yards', 'rushing_tds',
    'targets', 'receptions', 'receiving_yards', 'receiving_tds',
]

PRIMETIME_WEEKDAYS = {'Thursday', 'Monday', 'Saturday'}
PRIMETIME_START_ET = '19:00'
INDOOR_ROOFS = {'dome', 'closed'}

MIN_SPLIT_GAMES = 4
MIN_SIDE_GAMES = 2


@dataclass(frozen=True)
class UsageShare:
    """Average weekly share (percent) and its direction."""
    share: float
    trend: str                              # 'up' | 'down' | 'stable'
    weekly_shares: List[float] = field(default_factory=list)   # oldest first


@dataclass(frozen=True)
class HomeAwaySplits:
    home_games: int
    away_games: int
    home_ppg: float
    away_ppg: float
    split_pct: float                        # positive = better at home


@dataclass(frozen=True)
class PrimetimeSplits:
    primetime_games: int
    regular_games: int
    primetime_ppg: float
    regular_ppg: float


@dataclass(frozen=True)
class IndoorOutdoorSplits:
    indoor_games: int
    outdoor_games: int
    indoor_ppg: float
    outdoor_ppg: float


def ppr_points(df: pd.DataFrame) -> pd.Series:
    """PPR fantasy points per row."""
    return (
        df['passing_yards'] * 0.04
        + df['passing_tds'] * 4
        - df['interceptions'] * 2
        + df['rushing_yards'] * 0.1
        + df['rushing_tds'] * 6
        + df['receptions'] * 1
        + df['receiving_yards'] * 0.1
        + df['receiving_tds'] * 6
    )


def share_trend(weekly_shares: List[float]) -> str:
    """Compare the later half of the window to the earlier half."""
    half = len(weekly_shares) // 2
    first = weekly_shares[:half]
    second = weekly_shares[half:]
    if not first or not second:
        return 'stable'
    first_avg = float(np.mean(first))
    second_avg = float(np.mean(second))
    if second_avg > first_avg * TREND_UP_RATIO:
        return 'up'
    if second_avg < first_avg * TREND_DOWN_RATIO:
        return 'down'
    return 'stable'


class NflverseClient:
    """pandas access to nflverse player stats and schedules."""

    def __init__(
        self,
        season: Optional[int] = None,
        cache: Optional[TTLCache] = None,
        session: Optional[requests.Session] = None,
        player_stats: Optional[pd.DataFrame] = None,
        games: Optional[pd.DataFrame] = None,
    ):
        """
        Args:
            season: Season to analyze (defaults to settings.SEASON)
            cache: Cache for the parsed frames
            session: Optional requests session
            player_stats: Preloaded player_stats frame (skips download)
            games: Preloaded games frame (skips download)
        """
        self.season = season or settings.SEASON
        self.cache = cache or TTLCache(settings.NFLVERSE_CACHE_TTL)
        self.session = session
        if player_stats is not None:
            self.cache.set('player_stats', self._prepare_player_stats(player_stats), ttl=float('inf'))
        if games is not None:
            self.cache.set('games', self._prepare_games(games), ttl=float('inf'))

    # =========================================================================
    # LOADING
    # =========================================================================

    def _download_csv(self, url: str) -> pd.DataFrame:
        logger.info(f"Fetching {url} from nflverse")
        text = get_text("nflverse", url, session=self.session)
        return pd.read_csv(io.StringIO(text), low_memory=False)

    def _prepare_player_stats(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        if 'player_display_name' in df.columns:
            name = df['player_display_name']
            if 'player_name' in df.columns:
                name = name.fillna(df['player_name'])
            df['player_display_name'] = name
        else:
            df['player_display_name'] = df.get('player_name', pd.Series('', index=df.index))
        df['player_display_name'] = df['player_display_name'].fillna('').astype(str)

        team_col = 'recent_team' if 'recent_team' in df.columns else 'team'
        df['team'] = df[team_col].fillna('').astype(str).map(lambda t: normalize_team_name(t) or t)

        if 'season' in df.columns:
            df = df[df['season'] == self.season]
        if 'season_type' in df.columns:
            df = df[df['season_type'] == 'REG']
        df = df.copy()

        for col in STAT_COLUMNS:
            if col not in df.columns:
                df[col] = 0.0
            df[col] = pd.to_numeric(df[col], errors='coerce').fillna(0.0)
        df['week'] = pd.to_numeric(df['week'], errors='coerce').fillna(0).astype(int)
        df['ppr'] = ppr_points(df)
        return df.reset_index(drop=True)

    def _prepare_games(self, df: pd.DataFrame) -> pd.DataFrame:
        df = df.copy()
        if 'season' in df.columns:
            df = df[df['season'] == self.season]
        if 'game_type' in df.columns:
            df = df[df['game_type'] == 'REG']
        df = df.copy()
        for col in ('home_team', 'away_team'):
            df[col] = df[col].fillna('').astype(str).map(lambda t: normalize_team_name(t) or t)
        df['week'] = pd.to_numeric(df['week'], errors='coerce').fillna(0).astype(int)
        for col in ('weekday', 'gametime', 'roof'):
            if col not in df.columns:
                df[col] = ''
            df[col] = df[col].fillna('').astype(str)
        return df.reset_index(drop=True)

    def player_stats(self) -> pd.DataFrame:
        cached = self.cache.get('player_stats')
        if cached is not None:
            return cached
        df = self._prepare_player_stats(self._download_csv(settings.NFLVERSE_PLAYER_STATS_URL))
        logger.info(f"Loaded {len(df):,} player-week rows for {self.season}")
        self.cache.set('player_stats', df)
        return df

    def games(self) -> pd.DataFrame:
        cached = self.cache.get('games')
        if cached is not None:
            return cached
        df = self._prepare_games(self._download_csv(settings.NFLVERSE_GAMES_URL))
        logger.info(f"Loaded {len(df):,} games for {self.season}")
        self.cache.set('games', df)
        return df

    # =========================================================================
    # PLAYER LOOKUP
    # =========================================================================

    def _player_rows(self, player_name: str) -> pd.DataFrame:
        """
        Weekly rows for a player.

        Exact (case-insensitive) name matches win; otherwise a substring match
        in either direction. When several players match, the one with the
        most weeks is kept.
        """
        stats = self.player_stats()
        if stats.empty or not player_name:
            return stats.iloc[0:0]

        target = player_name.strip().lower()
        names = stats['player_display_name'].str.lower()
        rows = stats[names == target]
        if rows.empty:
            mask = names.map(lambda n: bool(n) and (target in n or n in target))
            rows = stats[mask]
        if rows.empty:
            return rows

        if 'player_id' in rows.columns and rows['player_id'].nunique() > 1:
            top_id = rows['player_id'].value_counts().idxmax()
            rows = rows[rows['player_id'] == top_id]
        return rows.sort_values('week')

    # =========================================================================
    # USAGE SHARE
    # =========================================================================

    def _usage_share(self, player_name: str, column: str, weeks: int) -> Optional[UsageShare]:
        rows = self._player_rows(player_name)
        if len(rows) < 2:
            return None

        recent = rows.tail(weeks)
        stats = self.player_stats()
        team_totals = stats.groupby(['team', 'week'])[column].sum()

        weekly_shares = []
        for _, row in recent.iterrows():
            team_total = team_totals.get((row['team'], row['week']), 0.0)
            if team_total > 0 and row[column] > 0:
                weekly_shares.append(float(row[column] / team_total * 100))

        if len(weekly_shares) < 2:
            return None

        return UsageShare(
            share=float(np.mean(weekly_shares)),
            trend=share_trend(weekly_shares),
            weekly_shares=weekly_shares,
        )

    def get_target_share(self, player_name: str, weeks: int = USAGE_LOOKBACK_WEEKS) -> Optional[UsageShare]:
        """Share of team targets over the last `weeks` weeks played."""
        return self._usage_share(player_name, 'targets', weeks)

    def get_carry_share(self, player_name: str, weeks: int = USAGE_LOOKBACK_WEEKS) -> Optional[UsageShare]:
        """Share of team carries over the last `weeks` weeks played."""
        return self._usage_share(player_name, 'carries', weeks)

    # =========================================================================
    # SPLITS
    # =========================================================================

    def _player_games(self, player_name: str) -> pd.DataFrame:
        """Player rows joined to the game they were played in."""
        rows = self._player_rows(player_name)
        games = self.games()
        if rows.empty or games.empty:
            return rows.iloc[0:0]

        home = games.rename(columns={'home_team': 'team', 'away_team': 'opponent'}).assign(is_home=True)
        away = games.rename(columns={'away_team': 'team', 'home_team': 'opponent'}).assign(is_home=False)
        sides = pd.concat([home, away], ignore_index=True)[
            ['week', 'team', 'opponent', 'is_home', 'weekday', 'gametime', 'roof']
        ]
        return rows.merge(sides, on=['week', 'team'], how='inner')

    def get_home_away_splits(self, player_name: str) -> Optional[HomeAwaySplits]:
        """
        PPR points per game at home vs on the road.

        Needs at least 4 games overall and 2 on each side.
        """
        rows = self._player_rows(player_name)
        if len(rows) < MIN_SPLIT_GAMES:
            return None
        joined = self._player_games(player_name)
        home = joined.loc[joined['is_home'], 'ppr']
        away = joined.loc[~joined['is_home'], 'ppr']
        if len(home) < MIN_SIDE_GAMES or len(away) < MIN_SIDE_GAMES:
            return None

        home_ppg = float(home.mean())
        away_ppg = float(away.mean())
        avg_ppg = (home_ppg + away_ppg) / 2
        split_pct = (home_ppg - away_ppg) / avg_ppg * 100 if avg_ppg > 0 else 0.0

        return HomeAwaySplits(
            home_games=len(home),
            away_games=len(away),
            home_ppg=round_to(home_ppg, 1),
            away_ppg=round_to(away_ppg, 1),
            split_pct=round_to(split_pct, 1),
        )

    def get_primetime_splits(self, player_name: str) -> Optional[PrimetimeSplits]:
        """
        PPR points per game in primetime vs regular slots.

        Primetime = Thursday, Monday or Saturday games, or a kickoff at or
        after 19:00 ET.
        """
        joined = self._player_games(player_name)
        if joined.empty:
            return None
        is_primetime = joined['weekday'].isin(PRIMETIME_WEEKDAYS) | (joined['gametime'] >= PRIMETIME_START_ET)
        primetime = joined.loc[is_primetime, 'ppr']
        regular = joined.loc[~is_primetime, 'ppr']
        if primetime.empty or regular.empty:
            return None
        return PrimetimeSplits(
            primetime_games=len(primetime),
            regular_games=len(regular),
            primetime_ppg=round_to(float(primetime.mean()), 1),
            regular_ppg=round_to(float(regular.mean()), 1),
        )

    def get_indoor_outdoor_splits(self, player_name: str) -> Optional[IndoorOutdoorSplits]:
        """PPR points per game under a roof (dome/closed) vs outdoors."""
        joined = self._player_games(player_name)
        if joined.empty:
            return None
        is_indoor = joined['roof'].str.lower().isin(INDOOR_ROOFS)
        indoor = joined.loc[is_indoor, 'ppr']
        outdoor = joined.loc[~is_indoor, 'ppr']
        if len(indoor) < MIN_SIDE_GAMES or len(outdoor) < MIN_SIDE_GAMES:
            return None
        return IndoorOutdoorSplits(
            indoor_games=len(indoor),
            outdoor_games=len(outdoor),
            indoor_ppg=round_to(float(indoor.mean()), 1),
            outdoor_ppg=round_to(float(outdoor.mean()), 1),
        )

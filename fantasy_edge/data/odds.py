"""
The Odds API Client

Game lines (spread, total, moneyline) for upcoming NFL games. The free tier
allows 500 requests a month, so responses are cached for 30 minutes and the
client is inert without ODDS_API_KEY.

Implied team totals come from spread and total:
    home implied = (total - spread) / 2
    away implied = (total + spread) / 2
where spread is the home team's line (negative = home favored).
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from fantasy_edge.cache import TTLCache
from fantasy_edge.config import settings
from fantasy_edge.data.http import get_json
from fantasy_edge.utils.rounding import round_to
from fantasy_edge.utils.team_names import normalize_team_name

logger = logging.getLogger(__name__)

_ODDS_KEY = "nfl_odds"


@dataclass(frozen=True)
class GameOdds:
    """Consensus line for one game from a single bookmaker."""
    home_team: str
    away_team: str
    spread: float               # home team perspective
    total: float
    implied_home: float
    implied_away: float
    home_moneyline: int = -110
    away_moneyline: int = -110
    bookmaker: str = ""

    def involves(self, team: str) -> bool:
        return team in (self.home_team, self.away_team)


def implied_totals(spread: float, total: float) -> Dict[str, float]:
    return {
        'home': round_to((total - spread) / 2, 1),
        'away': round_to((total + spread) / 2, 1),
    }


def _find_market(bookmaker: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    return next((m for m in bookmaker.get('markets', []) if m.get('key') == key), None)


def _outcome(market: Optional[Dict[str, Any]], name: str) -> Optional[Dict[str, Any]]:
    if not market:
        return None
    return next((o for o in market.get('outcomes', []) if o.get('name') == name), None)


def parse_event(event: Dict[str, Any]) -> GameOdds:
    """Convert one Odds API event into GameOdds."""
    home_name = event.get('home_team', '')
    away_name = event.get('away_team', '')
    home_team = normalize_team_name(home_name) or home_name
    away_team = normalize_team_name(away_name) or away_name

    bookmakers = event.get('bookmakers') or []
    bookmaker = next(
        (b for b in bookmakers if _find_market(b, 'spreads') and _find_market(b, 'totals')),
        bookmakers[0] if bookmakers else None,
    )
    if bookmaker is None:
        return GameOdds(home_team, away_team, spread=0.0, total=0.0, implied_home=0.0, implied_away=0.0)

    home_spread = _outcome(_find_market(bookmaker, 'spreads'), home_name)
    over = _outcome(_find_market(bookmaker, 'totals'), 'Over')
    h2h = _find_market(bookmaker, 'h2h')
    home_ml = _outcome(h2h, home_name)
    away_ml = _outcome(h2h, away_name)

    spread = float((home_spread or {}).get('point') or 0.0)
    total = float((over or {}).get('point') or 0.0)
    implied = implied_totals(spread, total)

    return GameOdds(
        home_team=home_team,
        away_team=away_team,
        spread=spread,
        total=total,
        implied_home=implied['home'],
        implied_away=implied['away'],
        home_moneyline=int((home_ml or {}).get('price') or -110),
        away_moneyline=int((away_ml or {}).get('price') or -110),
        bookmaker=bookmaker.get('title', bookmaker.get('key', '')),
    )


class OddsClient:
    """Cached NFL odds from The Odds API v4."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        cache: Optional[TTLCache] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.ODDS_API_KEY
        self.cache = cache or TTLCache(settings.ODDS_CACHE_TTL)
        self.session = session

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def get_nfl_odds(self) -> List[GameOdds]:
        """
        Lines for all upcoming games. Empty when no API key is configured.

        Raises:
            ProviderError: If the API is unreachable or rejects the key
        """
        if not self.is_configured():
            logger.warning("ODDS_API_KEY not set. Odds data will be unavailable.")
            return []

        cached = self.cache.get(_ODDS_KEY)
        if cached is not None:
            logger.debug("Odds cache hit")
            return cached

        logger.info(f"Fetching NFL odds from {settings.ODDS_API_URL}")
        events = get_json(
            "odds-api",
            settings.ODDS_API_URL,
            params={
                'apiKey': self.api_key,
                'regions': settings.ODDS_API_REGION,
                'markets': settings.ODDS_API_MARKETS,
                'oddsFormat': settings.ODDS_API_ODDS_FORMAT,
            },
            session=self.session,
        )
        games = [parse_event(event) for event in events or []]
        logger.info(f"Loaded odds for {len(games)} games")
        self.cache.set(_ODDS_KEY, games)
        return games

    def get_game_odds(self, team: str, opponent: str) -> Optional[GameOdds]:
        """Line for the game between two teams, in either home/away order."""
        for game in self.get_nfl_odds():
            if game.involves(team) and game.involves(opponent):
                return game
        return None

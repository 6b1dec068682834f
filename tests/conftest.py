"""
Shared fixtures for the edge engine tests.

Every upstream provider is replaced by an in-memory fake so that no test
touches the network. Tests configure the fakes by assigning attributes.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest
import requests

from fantasy_edge.config import settings
from fantasy_edge.data.odds import GameOdds
from fantasy_edge.data.players import PlayerDirectory
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.data.weather import GameWeather
from fantasy_edge.schemas import EdgeSignal, GameContext, Impact, Player, Position, SignalType

# Week 14 of 2025: Sunday Dec 7, 1:00 PM ET
SUNDAY_KICKOFF = datetime(2025, 12, 7, 18, 0, tzinfo=timezone.utc)


def game(home: str, away: str, kickoff: Optional[datetime], venue: str = "", country: str = "USA") -> Dict[str, Any]:
    """One scoreboard game in the shape EspnClient.get_week_games returns."""
    return {
        'home_team': home,
        'away_team': away,
        'kickoff': kickoff,
        'venue': venue,
        'country': country,
    }


# =============================================================================
# FAKE PROVIDERS
# =============================================================================

class FakeEspn:
    """Scoreboard and OL injury feed."""

    def __init__(self, games_by_week: Optional[Dict[int, List[Dict[str, Any]]]] = None, current_week: int = 14):
        self.games_by_week = games_by_week or {}
        self.current_week = current_week
        self.ol_injuries: Dict[str, List[Dict[str, str]]] = {}
        self.week_requests: List[int] = []

    def get_current_week(self):
        return 2025, self.current_week

    def get_week_games(self, season: int, week: int) -> List[Dict[str, Any]]:
        self.week_requests.append(week)
        return list(self.games_by_week.get(week, []))

    def get_ol_injuries(self, team: str) -> List[Dict[str, str]]:
        return list(self.ol_injuries.get(team, []))


class FakeWeather:
    def __init__(self):
        self.forecast: Optional[GameWeather] = None
        self.requests: List[tuple] = []

    def get_game_weather(self, home_team: str, kickoff: datetime) -> Optional[GameWeather]:
        self.requests.append((home_team, kickoff))
        return self.forecast


class FakeOdds:
    def __init__(self):
        self.configured = True
        self.game: Optional[GameOdds] = None

    def is_configured(self) -> bool:
        return self.configured

    def get_game_odds(self, team: str, opponent: str) -> Optional[GameOdds]:
        if self.game is not None and self.game.involves(team) and self.game.involves(opponent):
            return self.game
        return None


class FakeSleeper:
    def __init__(self):
        self.injuries: Dict[str, List[Dict[str, str]]] = {}

    def get_defensive_injuries(self, team: str) -> List[Dict[str, str]]:
        return list(self.injuries.get(team, []))


class FakeNflverse:
    """Returns whatever usage/split records the test assigned."""

    def __init__(self):
        self.target_share = None
        self.carry_share = None
        self.home_away = None
        self.primetime = None
        self.indoor_outdoor = None

    def get_target_share(self, player_name: str, weeks: int = 3):
        return self.target_share

    def get_carry_share(self, player_name: str, weeks: int = 3):
        return self.carry_share

    def get_home_away_splits(self, player_name: str):
        return self.home_away

    def get_primetime_splits(self, player_name: str):
        return self.primetime

    def get_indoor_outdoor_splits(self, player_name: str):
        return self.indoor_outdoor


class StubResponse:
    """Just enough of requests.Response for the providers."""

    def __init__(self, payload: Any = None, status_code: int = 200, text: str = ""):
        self._payload = payload
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class StubSession:
    """Serves canned responses by URL and records every request."""

    def __init__(self, routes: Optional[Dict[str, Any]] = None):
        self.routes = routes or {}
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, params=None, headers=None, timeout=None) -> StubResponse:
        self.calls.append({'url': url, 'params': params})
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, StubResponse):
            return route
        if route is None:
            return StubResponse(status_code=404)
        return StubResponse(route)


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def no_week_override(monkeypatch):
    """Keep a CURRENT_WEEK from the environment out of the tests."""
    monkeypatch.setattr(settings, "CURRENT_WEEK", None)


@pytest.fixture
def make_player():
    def _make(name: str = "Test Player", position: str = "WR", team: Optional[str] = "KC",
              player_id: str = "p1", status: str = "Active") -> Player:
        return Player(id=player_id, name=name, position=Position(position), team=team, status=status)
    return _make


@pytest.fixture
def make_context():
    def _make(team: str = "KC", opponent: str = "HOU", is_home: bool = True,
              kickoff: datetime = SUNDAY_KICKOFF) -> GameContext:
        return GameContext(team=team, opponent=opponent, is_home=is_home, kickoff_time=kickoff)
    return _make


@pytest.fixture
def make_signal():
    def _make(magnitude: float, confidence: int, impact: Optional[Impact] = None,
              type: SignalType = SignalType.MATCHUP_DEFENSE, description: str = "test signal") -> EdgeSignal:
        if impact is None:
            impact = Impact.POSITIVE if magnitude > 0 else Impact.NEGATIVE if magnitude < 0 else Impact.NEUTRAL
        return EdgeSignal(
            type=type,
            subject_id="p1",
            week=14,
            impact=impact,
            magnitude=magnitude,
            confidence=confidence,
            short_description=description,
            source="test",
        )
    return _make


@pytest.fixture
def make_schedule():
    def _make(games_by_week: Dict[int, List[Dict[str, Any]]], current_week: int = 14) -> ScheduleService:
        return ScheduleService(espn=FakeEspn(games_by_week, current_week), season=2025)
    return _make


@pytest.fixture
def players() -> List[Player]:
    return [
        Player(id="4046", name="Patrick Mahomes", position=Position.QB, team="KC", status="Active"),
        Player(id="4034", name="Travis Kelce", position=Position.TE, team="KC", status="Active"),
        Player(id="9509", name="Bijan Robinson", position=Position.RB, team="ATL", status="Active"),
        Player(id="1234", name="Free Agent Guy", position=Position.WR, team=None, status="Inactive"),
    ]


@pytest.fixture
def directory(players) -> PlayerDirectory:
    return PlayerDirectory.from_players(players)


@pytest.fixture
def weather() -> FakeWeather:
    return FakeWeather()


@pytest.fixture
def odds() -> FakeOdds:
    return FakeOdds()


@pytest.fixture
def sleeper() -> FakeSleeper:
    return FakeSleeper()


@pytest.fixture
def nflverse() -> FakeNflverse:
    return FakeNflverse()


@pytest.fixture
def espn() -> FakeEspn:
    return FakeEspn()


@pytest.fixture
def make_game():
    return game


@pytest.fixture
def make_session():
    """StubSession factory: make_session({url: payload | StubResponse | Exception})."""
    return StubSession


@pytest.fixture
def stub_response():
    return StubResponse

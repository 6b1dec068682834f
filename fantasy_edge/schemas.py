"""Pydantic schemas for strict data contracts across the edge pipeline."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fantasy_edge.utils.rounding import round_half_up


class Position(str, Enum):
    """Fantasy-relevant positions."""
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DEF = "DEF"


class Impact(str, Enum):
    """Qualitative direction of a signal. Informational only."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


class SignalType(str, Enum):
    """Closed set of signal categories emitted by detectors."""
    # Weather
    WEATHER_WIND = "weather_wind"
    WEATHER_PRECIP = "weather_precip"
    WEATHER_COLD = "weather_cold"
    WEATHER_DOME = "weather_dome"

    # Travel / rest
    TRAVEL_TIMEZONE = "travel_timezone"
    TRAVEL_SHORT_WEEK = "travel_short_week"
    TRAVEL_LONDON = "travel_london"
    TRAVEL_ALTITUDE = "travel_altitude"

    # Offensive line
    OL_INJURY_LT = "ol_injury_lt"
    OL_INJURY_RT = "ol_injury_rt"
    OL_INJURY_C = "ol_injury_c"
    OL_INJURY_MULTIPLE = "ol_injury_multiple"

    # Betting markets
    BETTING_LINE_MOVE = "betting_line_move"
    BETTING_IMPLIED_TOTAL = "betting_implied_total"

    # Usage
    USAGE_TARGET_SHARE = "usage_target_share"
    USAGE_CARRY_SHARE = "usage_carry_share"
    USAGE_TREND = "usage_trend"
    USAGE_SNAPS = "usage_snaps"
    USAGE_REDZONE = "usage_redzone"

    # Matchup
    MATCHUP_DEFENSE = "matchup_defense"
    MATCHUP_DEF_INJURY = "matchup_def_injury"

    # Scheme
    SCHEME_NEW_COORDINATOR = "scheme_new_coordinator"
    SCHEME_PACE_CHANGE = "scheme_pace_change"
    SCHEME_PASS_RATE_CHANGE = "scheme_pass_rate_change"

    # Situational splits
    HOME_AWAY_SPLIT = "home_away_split"
    PRIMETIME_PERFORMANCE = "primetime_performance"
    DIVISION_RIVALRY = "division_rivalry"
    REST_ADVANTAGE = "rest_advantage"
    INDOOR_OUTDOOR_SPLIT = "indoor_outdoor_split"


class Player(BaseModel):
    """Player identity as returned by the player resolution service."""

    id: str
    name: str
    position: Position
    team: Optional[str] = None
    status: Optional[str] = None
    injury_status: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class GameContext(BaseModel):
    """Resolved matchup for a player's team in a given week.

    Owned by the resolver and handed to every detector by value.
    """

    team: str
    opponent: str
    is_home: bool
    kickoff_time: datetime

    model_config = ConfigDict(frozen=True)

    @property
    def home_team(self) -> str:
        return self.team if self.is_home else self.opponent


class EdgeSignal(BaseModel):
    """Atomic unit of evidence produced by a detector.

    `magnitude` is the only numeric driver of aggregation; `impact` is
    never reconciled with its sign.
    """

    type: SignalType
    subject_id: str
    week: int
    impact: Impact
    magnitude: float
    confidence: int = Field(..., ge=0, le=100)
    short_description: str
    details: str = ""
    source: str
    timestamp: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True)

    @field_validator("confidence", mode="before")
    @classmethod
    def round_confidence(cls, v: Any) -> Any:
        """Accept float confidences computed by detectors."""
        if isinstance(v, float):
            return round_half_up(v)
        return v


class DetectorResult(BaseModel):
    """Output of one detector run.

    `flags` carries category-specific facts (e.g. offensive line
    `missing_starters`, betting `is_shootout`) for the recommendation
    generator. `degraded` is set by the runner when the detector failed
    or timed out.
    """

    signals: List[EdgeSignal] = Field(default_factory=list)
    summary: str
    flags: Dict[str, Any] = Field(default_factory=dict)
    degraded: bool = False

    model_config = ConfigDict(frozen=True)


class EdgeAnalysis(BaseModel):
    """Final, immutable verdict for one (player, week) request."""

    player: Player
    week: int
    context: GameContext
    summaries: Dict[str, str]
    labels: Dict[str, str] = Field(default_factory=dict)
    results: Dict[str, DetectorResult]
    signals: List[EdgeSignal]
    overall_impact: float
    confidence: int
    recommendation: str
    generated_at: datetime = Field(default_factory=datetime.now)

    model_config = ConfigDict(frozen=True)

    @property
    def key_factors(self) -> List[EdgeSignal]:
        """Signals strong enough to call out individually (|magnitude| >= 3)."""
        return [s for s in self.signals if abs(s.magnitude) >= 3]

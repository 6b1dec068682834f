"""Configuration and constants for the fantasy edge engine."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Global settings for the fantasy edge engine."""

    # Season
    SEASON: int = 2025
    REGULAR_SEASON_WEEKS: int = 18

    # Dynamic week (overridable via environment)
    CURRENT_WEEK: Optional[int] = None

    # API Configuration
    USER_AGENT: str = "fantasy-edge/0.1"
    REQUEST_TIMEOUT: int = 30

    # Upstream endpoints
    SLEEPER_PLAYERS_URL: str = "https://api.sleeper.app/v1/players/nfl"
    ESPN_SITE_API: str = "https://site.api.espn.com/apis/site/v2/sports/football/nfl"
    ESPN_CORE_API: str = "https://sports.core.api.espn.com/v2/sports/football/leagues/nfl"
    OPEN_METEO_URL: str = "https://api.open-meteo.com/v1/forecast"
    ODDS_API_URL: str = "https://api.the-odds-api.com/v4/sports/americanfootball_nfl/odds/"
    NFLVERSE_PLAYER_STATS_URL: str = (
        "https://github.com/nflverse/nflverse-data/releases/download/player_stats/player_stats.csv"
    )
    NFLVERSE_GAMES_URL: str = (
        "https://github.com/nflverse/nflverse-data/releases/download/schedules/games.csv"
    )

    # Odds API Configuration
    ODDS_API_KEY: Optional[str] = None
    ODDS_API_REGION: str = "us"
    ODDS_API_MARKETS: str = "h2h,spreads,totals"
    ODDS_API_ODDS_FORMAT: str = "american"

    # Cache lifetimes (seconds)
    PLAYER_CACHE_TTL: int = 24 * 60 * 60
    SCHEDULE_CACHE_TTL: int = 60 * 60
    INJURY_CACHE_TTL: int = 15 * 60
    ODDS_CACHE_TTL: int = 30 * 60
    WEATHER_CACHE_TTL: int = 30 * 60
    NFLVERSE_CACHE_TTL: int = 6 * 60 * 60

    # Detector fan-out
    DETECTOR_TIMEOUT_SECONDS: float = 10.0
    MAX_DETECTOR_WORKERS: int = 8

    class Config:
        """Pydantic config."""

        env_file = ".env"
        case_sensitive = False

    def validate_week(self, week: int) -> int:
        """Validate a regular season week.

        Args:
            week: Week number to validate

        Returns:
            Validated week

        Raises:
            ValueError: If week is outside the regular season
        """
        if not 1 <= week <= self.REGULAR_SEASON_WEEKS:
            raise ValueError(
                f"Week {week} not allowed. Regular season weeks are 1-{self.REGULAR_SEASON_WEEKS}."
            )
        return week


# Global settings instance
settings = Settings()

"""Command-line interface for the fantasy edge engine."""

import logging
from typing import List, Optional

import typer

from fantasy_edge.core.analyzer import EdgeAnalyzer
from fantasy_edge.core.report import format_analysis, format_comparison
from fantasy_edge.data.schedule import ScheduleService
from fantasy_edge.exceptions import ProviderError, ResolutionError

app = typer.Typer(help="Fantasy Edge Signal Engine")

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@app.command()
def analyze(
    name: str = typer.Argument(..., help="Player name or Sleeper id"),
    week: Optional[int] = typer.Option(None, help="Week number (1-18), defaults to the current week"),
    json_output: bool = typer.Option(False, "--json", help="Print the analysis as JSON"),
) -> None:
    """Run every edge detector for one player."""
    try:
        analysis = EdgeAnalyzer.default().analyze_player(name, week)
    except (ResolutionError, ValueError) as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)
    except ProviderError as e:
        logger.error(f"Could not analyze {name}: {e}")
        raise typer.Exit(code=1)

    if json_output:
        typer.echo(analysis.model_dump_json(indent=2))
    else:
        typer.echo(format_analysis(analysis))


@app.command()
def compare(
    names: List[str] = typer.Argument(..., help="Player names or Sleeper ids"),
    week: Optional[int] = typer.Option(None, help="Week number (1-18), defaults to the current week"),
) -> None:
    """Rank several players by overall edge score."""
    try:
        analyses = EdgeAnalyzer.default().compare_players(names, week)
    except ValueError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(code=1)

    if not analyses:
        typer.echo("⚠️  None of the players could be resolved")
        raise typer.Exit(code=1)

    typer.echo(format_comparison(analyses))


@app.command("current-week")
def current_week() -> None:
    """Print the week the engine analyzes by default."""
    try:
        week = ScheduleService().get_current_week()
    except ProviderError as e:
        logger.error(f"Could not determine current week: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Current week: {week}")


if __name__ == "__main__":
    app()

"""Plain-text rendering of edge analyses for the CLI."""

from typing import List

from fantasy_edge.schemas import EdgeAnalysis, Impact

SEPARATOR = '=' * 60

SYMBOLS = {
    Impact.POSITIVE: '✓',
    Impact.NEGATIVE: '⚠️',
    Impact.NEUTRAL: '○',
}


def format_impact(value: float) -> str:
    """Signed score: +4.3, -1.2, 0."""
    if value > 0:
        return f"+{value:g}"
    return f"{value:g}" if value else "0"


def format_analysis(analysis: EdgeAnalysis) -> str:
    player = analysis.player
    lines = [
        SEPARATOR,
        f"EDGE ANALYSIS: {player.name} ({player.team} {player.position.value})",
        SEPARATOR,
        "",
        "EDGE SIGNALS:",
    ]

    for category, summary in analysis.summaries.items():
        result = analysis.results.get(category)
        impact = result.signals[0].impact if result and result.signals else Impact.NEUTRAL
        label = analysis.labels.get(category, category)
        lines.append(f"  {SYMBOLS[impact]} {label}: {summary}")

    lines += [
        "",
        f"OVERALL IMPACT: {format_impact(analysis.overall_impact)}",
        f"CONFIDENCE: {analysis.confidence}%",
        "",
        "RECOMMENDATION:",
        f"  {analysis.recommendation}",
    ]

    key_factors = analysis.key_factors
    if key_factors:
        lines += ["", "KEY FACTORS:"]
        lines += [f"  • {signal.short_description}" for signal in key_factors]

    lines += ["", SEPARATOR]
    return "\n".join(lines)


def format_comparison(analyses: List[EdgeAnalysis]) -> str:
    """Side-by-side summary, in the order given (callers sort by impact)."""
    lines = [SEPARATOR, "COMPARISON RESULTS (sorted by edge score)", SEPARATOR]
    for analysis in analyses:
        player = analysis.player
        lines += [
            "",
            f"{player.name} ({player.team} {player.position.value})",
            f"  Edge Score: {format_impact(analysis.overall_impact)} | Confidence: {analysis.confidence}%",
            f"  {analysis.recommendation}",
        ]
    return "\n".join(lines)

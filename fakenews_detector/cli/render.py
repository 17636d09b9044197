"""Rich renderables for the credibility dashboard."""

from rich.console import Group
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from fakenews_detector.config.scoring_rules import SCORING_RULES
from fakenews_detector.data_management.schemas import AnalysisResult, Classification

CLASSIFICATION_STYLES = {
    Classification.TRUSTWORTHY: ("green", "✓"),
    Classification.MISLEADING: ("red", "✗"),
    Classification.UNCERTAIN: ("yellow", "⚠"),
}

FACTOR_LABELS = [
    ("Language Pattern", "language_pattern"),
    ("Sentiment Analysis", "sentiment_analysis"),
    ("Factual Consistency", "factual_consistency"),
    ("Source Reliability", "source_reliability"),
]


def classification_panel(result: AnalysisResult) -> Panel:
    """Headline panel: classification, confidence and score."""
    style, icon = CLASSIFICATION_STYLES[result.classification]

    table = Table.grid(expand=True)
    table.add_column(justify="left")
    table.add_column(justify="right")
    table.add_row(
        Text(f"{icon} {result.classification.value.capitalize()}", style=f"bold {style}"),
        Text(f"{result.credibility_score}/100", style="bold"),
    )
    table.add_row(
        Text(f"Confidence: {result.confidence_level}%", style="dim"),
        Text("Credibility Score", style="dim"),
    )
    if result.used_fallback:
        table.add_row(Text("Fallback analysis (sentiment model unavailable)", style="dim italic"), "")

    return Panel(table, border_style=style)


def breakdown_table(result: AnalysisResult) -> Table:
    """Per-factor scores with a bar each."""
    table = Table(title="Analysis Breakdown", show_header=True, header_style="bold magenta")
    table.add_column("Factor", style="cyan", width=22)
    table.add_column("Score", justify="right", width=6)
    table.add_column("", width=40)

    for label, attribute in FACTOR_LABELS:
        value = getattr(result.factors, attribute)
        table.add_row(label, f"{value}%", ProgressBar(total=100, completed=value, width=40))

    return table


def risk_factor_badges(result: AnalysisResult) -> Panel:
    """Risk labels rendered as inline badges."""
    badges = Text()
    for index, factor in enumerate(result.risk_factors):
        if index:
            badges.append("  ")
        badges.append(f" {factor} ", style="bold white on red")
    return Panel(badges, title="Identified Risk Factors", border_style="red")


def report(result: AnalysisResult) -> Group:
    """Full dashboard for one result. Risk panel only when there are risks."""
    parts = [classification_panel(result), breakdown_table(result)]
    if result.risk_factors:
        parts.append(risk_factor_badges(result))
    return Group(*parts)


def rules_table() -> Table:
    """Every pattern rule the engine applies."""
    table = Table(title="Scoring Rules", show_header=True, header_style="bold magenta")
    table.add_column("Category", style="cyan")
    table.add_column("Pattern", style="yellow")
    table.add_column("Weight", justify="right")
    table.add_column("Case", style="dim")

    for rule in SCORING_RULES:
        weight_style = "green" if rule.weight > 0 else "red"
        table.add_row(
            rule.category.value,
            rule.pattern,
            Text(f"{rule.weight:+d}", style=weight_style),
            "insensitive" if rule.ignore_case else "sensitive",
        )

    return table


__all__ = ["report", "classification_panel", "breakdown_table", "risk_factor_badges", "rules_table"]

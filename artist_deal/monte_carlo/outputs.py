"""
PURPOSE: Format risk metrics into display strings and narrative insights.

This module turns RiskMetrics into what a dashboard shows: currency and
percentage strings, a sign flag for colour coding the median ROI, and the
three insight sentences (risk assessment, downside protection, upside
potential).

SRP/DRY: Single responsibility = output formatting only.
         No simulation, no statistics. Clean interface to RiskMetrics.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

from artist_deal.monte_carlo.analysis import RiskMetrics


def format_currency(value: float) -> str:
    """Format as whole US dollars, e.g. 1234.5 -> "$1,235", -50 -> "-$50"."""
    rounded = round(value)
    if rounded < 0:
        return f"-${abs(rounded):,.0f}"
    return f"${rounded:,.0f}"


def format_percent(value: float) -> str:
    """Format a percentage with one decimal, e.g. 12.345 -> "12.3%"."""
    return f"{value:.1f}%"


@dataclass
class FormattedReport:
    """Display-ready view of a simulation run.

    Attributes:
        median_revenue (str): Currency string.
        median_roi (str): Percentage string.
        roi_positive (bool): True when the median ROI is above zero.
        break_even_probability (str): Percentage string.
        var95 (str): Currency string.
        insights (list): Narrative sentences.
    """
    median_revenue: str
    median_roi: str
    roi_positive: bool
    break_even_probability: str
    var95: str
    insights: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "median_revenue": self.median_revenue,
            "median_roi": self.median_roi,
            "roi_positive": self.roi_positive,
            "break_even_probability": self.break_even_probability,
            "var95": self.var95,
            "insights": list(self.insights),
        }


class OutputFormatter:
    """Formats RiskMetrics into strings and insight narratives."""

    @staticmethod
    def format_results(metrics: RiskMetrics) -> FormattedReport:
        """
        Format risk metrics into a display-ready report.

        Args:
            metrics: Output of RiskAnalyzer.analyze().

        Returns:
            FormattedReport with display strings and insights.

        Raises:
            ValueError: If the break-even probability is outside [0, 100].
        """
        if not (0 <= metrics.break_even_probability <= 100):
            raise ValueError(
                f"break_even_probability must be in [0, 100], got {metrics.break_even_probability}"
            )

        return FormattedReport(
            median_revenue=format_currency(metrics.median_revenue),
            median_roi=format_percent(metrics.median_roi),
            roi_positive=metrics.median_roi > 0,
            break_even_probability=format_percent(metrics.break_even_probability),
            var95=format_currency(metrics.var95),
            insights=OutputFormatter.build_insights(metrics),
        )

    @staticmethod
    def build_insights(metrics: RiskMetrics) -> List[str]:
        """
        Generate the plain English insight sentences.

        Args:
            metrics: Output of RiskAnalyzer.analyze().

        Returns:
            List of three sentences.
        """
        return [
            (
                f"Risk Assessment: There is a {format_percent(metrics.loss_probability)} "
                "chance of losing money on this specific deal structure."
            ),
            (
                "Downside Protection: In the worst 5% of scenarios, you lose at least "
                f"{format_currency(metrics.worst_case_loss)}."
            ),
            (
                "Upside Potential: The top 1% of outcomes generate over "
                f"{format_currency(metrics.p99_profit)}."
            ),
        ]

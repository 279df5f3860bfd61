"""
Monte Carlo simulation module for artist deal risk/return estimation.

PURPOSE:
    Estimate the distribution of revenue, profit and ROI of an artist
    investment deal by running thousands of independent stochastic trials,
    then summarise it with percentile-based risk metrics (median, VaR,
    break-even probability, tail insights).

RESPONSIBILITIES:
    - Expose random variate generation (Box-Muller normal, log-normal, Bernoulli)
    - Provide per-genre stochastic profiles
    - Simulate trials and collect the outcome ensemble
    - Compute risk metrics and format them for display
    - Shape the ensemble into chart datasets

SRP/DRY CHECK:
    Each submodule has a single responsibility:
    - distributions.py: Sampling from a uniform source only
    - genres.py: Genre profile table only
    - risk_events.py: Bernoulli + impact sampling (viral spike) only
    - simulation.py: Trial simulation and N-trial aggregation only
    - analysis.py: Percentile risk metrics only
    - outputs.py: Result formatting and insights only
    - charts.py: Histogram and scatter datasets only
    - sensitivity.py: Genre sensitivity comparison only
"""

from .analysis import RiskAnalyzer, RiskMetrics, analyze_results
from .charts import HistogramData, build_profit_histogram, build_roi_scatter
from .distributions import RandomVariateGenerator, sample_lognormal, sample_normal
from .genres import GENRE_KEYS, GenreProfile, lookup_genre
from .inputs import DealInputs
from .outputs import FormattedReport, OutputFormatter, format_currency, format_percent
from .sensitivity import GenreComparison, GenreSensitivity, GenreSensitivityAnalyzer, compare_genres
from .simulation import MonteCarloSimulation, TrialOutcome, run_simulation, simulate_trial

__version__ = "0.1.0"

__all__ = [
    "DealInputs",
    "GenreProfile",
    "GENRE_KEYS",
    "lookup_genre",
    "RandomVariateGenerator",
    "sample_normal",
    "sample_lognormal",
    "TrialOutcome",
    "simulate_trial",
    "MonteCarloSimulation",
    "run_simulation",
    "RiskMetrics",
    "RiskAnalyzer",
    "analyze_results",
    "OutputFormatter",
    "FormattedReport",
    "format_currency",
    "format_percent",
    "HistogramData",
    "build_profit_histogram",
    "build_roi_scatter",
    "GenreSensitivity",
    "GenreComparison",
    "GenreSensitivityAnalyzer",
    "compare_genres",
]

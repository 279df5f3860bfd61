"""
Command-line entry point for the deal Monte Carlo simulator.

Usage:
    python -m artist_deal.monte_carlo --genre indie --iterations 5000
    python -m artist_deal.monte_carlo --deal deal.json --seed 42 --charts

Deal values come from the JSON file (if given), then individual flags
override them. The file may also carry a "genre" key, which --genre
overrides. Results are printed to stdout as JSON.
"""
import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from artist_deal.monte_carlo.analysis import RiskAnalyzer
from artist_deal.monte_carlo.charts import build_profit_histogram, build_roi_scatter
from artist_deal.monte_carlo.config import DEFAULT_GENRE, LOG_LEVEL, RANDOM_SEED
from artist_deal.monte_carlo.genres import GENRE_KEYS, resolve_genre_key
from artist_deal.monte_carlo.inputs import DealInputs
from artist_deal.monte_carlo.outputs import OutputFormatter
from artist_deal.monte_carlo.sensitivity import GenreSensitivityAnalyzer
from artist_deal.monte_carlo.simulation import MonteCarloSimulation

logger = logging.getLogger(__name__)

DEFAULT_DEAL = {
    "social_followers": 100000,
    "prev_streams": 2000000,
    "advance": 50000,
    "marketing": 20000,
    "content_budget": 10000,
}

_FLAG_TO_FIELD = {
    "followers": "social_followers",
    "prev_streams": "prev_streams",
    "advance": "advance",
    "marketing": "marketing",
    "content_budget": "content_budget",
    "iterations": "iterations",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artist-deal-sim",
        description="Monte Carlo risk/return estimate for an artist investment deal.",
    )
    parser.add_argument("--deal", help="Path to a JSON file with deal parameters")
    parser.add_argument(
        "--genre",
        help=f"One of {', '.join(GENRE_KEYS)} (default: deal file \"genre\" or {DEFAULT_GENRE})",
    )
    parser.add_argument("--followers", type=float)
    parser.add_argument("--prev-streams", type=float)
    parser.add_argument("--advance", type=float)
    parser.add_argument("--marketing", type=float)
    parser.add_argument("--content-budget", type=float)
    parser.add_argument("--iterations", type=int)
    parser.add_argument("--seed", type=int, default=RANDOM_SEED)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--charts", action="store_true", help="Include histogram and scatter data")
    parser.add_argument("--compare-genres", action="store_true", help="Rank genres by profit spread")
    return parser


def load_deal(args: argparse.Namespace) -> Tuple[Dict[str, Any], str]:
    """
    Merge defaults, the optional JSON deal file and command-line overrides.

    Returns:
        Tuple of (deal parameters, genre). The genre comes from --genre, then
        the deal file's "genre" key, then the default.

    Raises:
        OSError, json.JSONDecodeError: If the deal file cannot be read.
        TypeError: If the deal file is not a JSON object.
    """
    deal = dict(DEFAULT_DEAL)
    genre = DEFAULT_GENRE
    if args.deal:
        with open(args.deal, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"expected a JSON object, got {type(data).__name__}")
        data = dict(data)
        genre = data.pop("genre", genre)
        deal.update(data)
    if args.genre is not None:
        genre = args.genre
    for flag, field_name in _FLAG_TO_FIELD.items():
        value = getattr(args, flag)
        if value is not None:
            deal[field_name] = value
    return deal, genre


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    args = build_parser().parse_args(argv)

    try:
        deal, genre = load_deal(args)
    except (OSError, json.JSONDecodeError, TypeError) as e:
        logger.error(f"Could not read deal file {args.deal}: {e}")
        return 2

    try:
        inputs = DealInputs(**deal)
        simulation = MonteCarloSimulation(random_seed=args.seed, num_workers=args.workers)
    except ValidationError as e:
        logger.error(f"Invalid deal parameters: {e}")
        return 2
    except ValueError as e:
        logger.error(f"Invalid simulation settings: {e}")
        return 2

    genre = resolve_genre_key(genre)
    ensemble = simulation.run(inputs, genre)
    metrics = RiskAnalyzer().analyze(ensemble, inputs.total_investment)

    output = {
        "genre": genre,
        "inputs": inputs.model_dump(),
        "metrics": metrics.to_dict(),
        "report": OutputFormatter.format_results(metrics).to_dict(),
    }
    if args.charts:
        output["charts"] = {
            "histogram": build_profit_histogram(ensemble).to_dict(),
            "scatter": [list(point) for point in build_roi_scatter(ensemble)],
        }
    if args.compare_genres:
        comparison = GenreSensitivityAnalyzer(random_seed=args.seed, num_workers=args.workers)
        output["genre_comparison"] = comparison.analyze(inputs).to_dict()

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())

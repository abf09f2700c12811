"""
Command-line interface for the netenomics toolkit.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from netenomics.indicators import bollinger_bands, rsi, sma
from netenomics.inequality import gini
from netenomics.model import GBM
from netenomics.regression import linear_predict
from netenomics.risk import analyze_market_state, value_at_risk
from netenomics.simulation.monte_carlo import monte_carlo_terminal
from netenomics.simulation.path_generator import PathGenerator
from netenomics.simulation.random_source import default_random_source
from netenomics.visualization import plot_batch


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per tool."""
    parser = argparse.ArgumentParser(
        prog="netenomics",
        description="Market indicators, risk measures and price simulation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s indicators 44 44.34 44.09 44.15 43.61 44.33 44.83 45.10 --rsi-period 5
  %(prog)s montecarlo --start-price 100 --days 30 --volatility 0.02 --seed 7
  %(prog)s gbm --s0 100 --mu 0.08 --sigma 0.2 --paths 200 --output out/paths.png
  %(prog)s forecast 10 10.5 11 11.2 11.8 --forecast-period 20 --no-plot
  %(prog)s gini 0 0 0 100
        """,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    ind = subparsers.add_parser("indicators", help="SMA, RSI, Bollinger bands and market state")
    ind.add_argument("prices", type=float, nargs="+", help="Prices, oldest first")
    ind.add_argument("--sma-period", type=int, default=3, help="SMA window (default: 3)")
    ind.add_argument("--rsi-period", type=int, default=14, help="RSI period (default: 14)")
    ind.add_argument("--bb-period", type=int, default=20, help="Bollinger window (default: 20)")
    ind.add_argument("--bb-mult", type=float, default=2.0, help="Bollinger width in SDs (default: 2)")
    ind.add_argument("--confidence", type=float, default=0.95, help="VaR confidence (default: 0.95)")

    mc = subparsers.add_parser("montecarlo", help="Terminal price distribution")
    mc.add_argument("--start-price", type=float, required=True, help="Starting price")
    mc.add_argument("--days", type=int, required=True, help="Number of daily shocks")
    mc.add_argument("--volatility", type=float, required=True, help="Maximum daily move as fraction")
    mc.add_argument("--simulations", type=int, default=1000, help="Number of trials (default: 1000)")
    mc.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")

    gbm = subparsers.add_parser("gbm", help="Batch of Geometric Brownian Motion paths")
    gbm.add_argument("--s0", type=float, required=True, help="Initial price")
    gbm.add_argument("--mu", type=float, required=True, help="Annualized drift")
    gbm.add_argument("--sigma", type=float, required=True, help="Annualized volatility")
    gbm.add_argument("--horizon", type=float, default=1.0, help="Horizon in years (default: 1)")
    gbm.add_argument("--steps", type=int, default=252, help="Steps per path (default: 252)")
    gbm.add_argument("--paths", type=int, default=100, help="Number of paths (default: 100)")
    gbm.add_argument("--seed", type=int, default=None, help="Random seed (default: unseeded)")
    gbm.add_argument("--output", type=str, default=None, help="Path to save the plot (optional)")

    fc = subparsers.add_parser("forecast", help="GBM and linear forecast from a price history")
    fc.add_argument("prices", type=float, nargs="+", help="Prices, oldest first")
    fc.add_argument("--forecast-period", type=int, default=252, help="Trading days to forecast (default: 252)")
    fc.add_argument("--seed", type=int, default=20, help="Random seed (default: 20)")
    fc.add_argument("--output", type=str, default=None, help="Path to save the plot (optional)")
    fc.add_argument("--no-plot", action="store_true", help="Do not display the plot")

    gn = subparsers.add_parser("gini", help="Gini coefficient of holdings")
    gn.add_argument("wealths", type=float, nargs="+", help="Holdings per participant")

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Parameters
    ----------
    argv : list of str, optional
        Arguments to parse. Defaults to ``sys.argv[1:]``.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments
    """
    return build_parser().parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """Validate arguments that argparse cannot check by itself.

    Raises
    ------
    ValueError
        If arguments are invalid
    """
    if getattr(args, "forecast_period", 1) <= 0:
        raise ValueError("forecast-period must be positive")

    output = getattr(args, "output", None)
    if output:
        output_path = Path(output)
        if not output_path.parent.exists():
            raise ValueError(
                f"Output directory does not exist: {output_path.parent}"
            )


def run_indicators(args: argparse.Namespace) -> int:
    prices = args.prices

    averages = sma(prices, args.sma_period)
    if averages is None:
        print(f"SMA({args.sma_period}): insufficient data")
    else:
        print(f"SMA({args.sma_period}): " + ", ".join(f"{v:.4f}" for v in averages))

    print(f"RSI({args.rsi_period}): {rsi(prices, args.rsi_period):.2f}")

    bands = bollinger_bands(prices, args.bb_period, args.bb_mult)
    if bands is None:
        print(f"Bollinger({args.bb_period}): insufficient data")
    else:
        last = bands[-1]
        print(
            f"Bollinger({args.bb_period}): lower {last.lower:.4f} | "
            f"middle {last.middle:.4f} | upper {last.upper:.4f}"
        )

    state = analyze_market_state(prices)
    if state is None:
        print("Market state: insufficient data")
    else:
        print(
            f"Market state: {state.state} | Trend: {state.trend} | "
            f"Momentum: {state.momentum:.2f}% | Signal: {state.signal}"
        )

    var = value_at_risk(prices, args.confidence)
    print(f"VaR({args.confidence:.0%}): {var*100:.2f}%")
    return 0


def run_montecarlo(args: argparse.Namespace) -> int:
    stats = monte_carlo_terminal(
        args.start_price,
        args.days,
        args.volatility,
        simulations=args.simulations,
        rng=default_random_source(args.seed),
    )
    print(f"Simulations: {args.simulations} over {args.days} days")
    print(f"Average end price: {stats.average_end_price:.2f}")
    print(f"Max potential: {stats.max_potential:.2f}")
    print(f"Min potential: {stats.min_potential:.2f}")
    print(f"Probability of loss: {stats.probability_of_loss*100:.2f}%")
    return 0


def run_gbm(args: argparse.Namespace) -> int:
    generator = PathGenerator(
        starting_price=args.s0,
        mu=args.mu,
        sigma=args.sigma,
        horizon=args.horizon,
        num_steps=args.steps,
        num_paths=args.paths,
        rng=default_random_source(args.seed),
    )
    batch = generator.generate_paths()
    stats = batch.statistics()

    print(f"Generated {stats['num_paths']} paths of {stats['num_steps']} steps")
    print(f"Drift (μ): {args.mu:.4f} | Volatility (σ): {args.sigma:.4f}")
    print(f"Average end price: {stats['average_end_price']:.2f}")
    print(f"Range: {stats['min_potential']:.2f} - {stats['max_potential']:.2f}")
    print(f"Probability of loss: {stats['probability_of_loss']*100:.2f}%")

    if args.output:
        plot_batch(batch, output_path=args.output, show_plot=False)
        print(f"Plot saved to: {args.output}")
    return 0


def run_forecast(args: argparse.Namespace) -> int:
    model = GBM(args.prices, forecast_period=args.forecast_period, seed=args.seed)
    model.run(show_plot=not args.no_plot, output_path=args.output)

    trend = linear_predict(args.prices)

    print(f"Initial price: {model.So:.2f}")
    print(f"Final forecasted price: {model.S[-1]:.2f}")
    print(f"Annualized return (mu): {model.mu:.4f}")
    print(f"Annualized volatility (sigma): {model.sigma:.4f}")
    print(f"Linear next value: {trend.next_value:.4f} ({trend.confidence.value})")

    if args.output:
        print(f"Plot saved to: {args.output}")
    return 0


def run_gini(args: argparse.Namespace) -> int:
    print(f"Gini coefficient: {gini(args.wealths):.4f}")
    return 0


COMMANDS = {
    "indicators": run_indicators,
    "montecarlo": run_montecarlo,
    "gbm": run_gbm,
    "forecast": run_forecast,
    "gini": run_gini,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns
    -------
    int
        Exit code (0 for success, 1 for error, 130 when interrupted)
    """
    try:
        args = parse_args(argv)
        validate_args(args)
        return COMMANDS[args.command](args)

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())

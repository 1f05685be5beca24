#!/usr/bin/env python3
"""CLI launcher for Gaussian-mixture price analysis."""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

import matplotlib.pyplot as plt

from pricegmm import summarize_samples
from pricegmm.runtime import analyze, create_analysis_context, fmt
from pricegmm.ui.interactive import render_analysis, run_interactive_wizard
from pricegmm.visualization import plot_distribution, plot_sample_histogram, plot_wait_times


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Judge a quoted buy/sell price against a Gaussian mixture of historical prices.",
    )
    parser.add_argument("--buy", type=float, default=None, help="Price you can buy at today.")
    parser.add_argument("--sell", type=float, default=None, help="Price you can sell for (optional).")
    parser.add_argument(
        "--friends",
        type=int,
        default=0,
        help="Additional people checking prices each day (trials per day = 1 + friends).",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Draw the buy price from the model instead of passing --buy.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Optional RNG seed.")
    parser.add_argument(
        "--samples",
        type=int,
        default=0,
        help="Draw this many prices from the model and summarise them.",
    )
    parser.add_argument(
        "--hist-bins",
        type=int,
        default=60,
        help="Number of bins for the sampled-price histogram.",
    )
    parser.add_argument(
        "--save-dir",
        type=Path,
        default=Path("figures"),
        help="Directory where charts are saved (if not disabled).",
    )
    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Skip saving chart images to disk.",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Display charts interactively after the analysis.",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Launch a rich interactive wizard to enter prices.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Emit debug logging.",
    )
    return parser.parse_args(argv)


def execute_analysis(args: argparse.Namespace, *, suppress_output: bool = False) -> dict:
    messages: list[str] = []
    saved_paths: list[Path] = []

    def log(message: str = "") -> None:
        messages.append(message)
        if not suppress_output:
            print(message)

    context = create_analysis_context(seed=args.seed)

    buy = args.buy
    if args.random:
        buy = context.sampler.sample_price()
        log(f"Random buy price: {buy:g}")
    if buy is None:
        raise SystemExit("A buy price is required (use --buy or --random).")

    try:
        result = analyze(buy, args.sell, args.friends, config=context.config)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc

    if not suppress_output:
        render_analysis(result)

    summary = None
    samples = None
    if args.samples:
        if args.samples < 2:
            raise SystemExit("--samples must be at least 2.")
        samples = context.sampler.sample_prices(args.samples)
        summary = summarize_samples(samples)
        log("")
        log(f"Sampled prices: {args.samples}")
        log(f"Model mean: {fmt(context.config.theoretical_mean)}")
        log(f"Sample mean: {fmt(summary.mean)}")
        log(f"Sample standard deviation: {fmt(summary.standard_deviation)}")
        log(f"5th percentile: {fmt(summary.quantile_05)}")
        log(f"95th percentile: {fmt(summary.quantile_95)}")
        log(
            "95% CI for mean: ("
            f"{fmt(summary.confidence_interval[0])}, {fmt(summary.confidence_interval[1])})"
        )

    figures: list[plt.Figure] = []
    if not args.no_save or args.show:
        fig_dist, _ = plot_distribution(result.buy_price, result.sell_price, config=context.config)
        fig_wait, _ = plot_wait_times(result.buy_price, result.trials_per_period, config=context.config)
        named = [("price_distribution.png", fig_dist), ("wait_times.png", fig_wait)]
        if samples is not None:
            fig_hist, _ = plot_sample_histogram(samples, bins=args.hist_bins)
            named.append(("sampled_prices.png", fig_hist))
        figures.extend(fig for _, fig in named)

        if not args.no_save:
            save_dir = args.save_dir.expanduser()
            save_dir.mkdir(parents=True, exist_ok=True)
            log("")
            log("Saved:")
            for filename, fig in named:
                target = save_dir / filename
                fig.savefig(target, dpi=150, bbox_inches="tight")
                saved_paths.append(target)
                log(f"  {target}")

    if args.show:
        plt.show()
    else:
        for fig in figures:
            plt.close(fig)

    return {
        "config": context.config,
        "result": result,
        "summary": summary,
        "messages": messages,
        "saved_paths": saved_paths,
    }


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    auto_interactive = argv is None and len(sys.argv) == 1 and sys.stdin.isatty() and sys.stdout.isatty()
    if args.interactive or auto_interactive:
        context = create_analysis_context(seed=args.seed)
        args = run_interactive_wizard(args, random_price=context.sampler.sample_price)

    execute_analysis(args)


if __name__ == "__main__":
    main()

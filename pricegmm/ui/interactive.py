"""Rich-powered interactive wizard and result rendering for price analysis."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.theme import Theme

from ..interpretation import (
    DEFAULT_THRESHOLDS,
    InterpretationThresholds,
    format_periods,
    interpret_buy,
    recommend_sell,
)
from ..results import AnalysisResult

_THEME = Theme(
    {
        "accent": "bright_cyan",
        "muted": "grey70",
        "warning": "gold1",
        "success": "spring_green2",
        "danger": "red1",
    }
)

_console = Console(theme=_THEME)


def _prompt_int(message: str, default: int, *, minimum: Optional[int] = None) -> int:
    while True:
        response = Prompt.ask(message, default=str(default), console=_console)
        try:
            value = int(response)
        except ValueError:
            _console.print("[warning]Please enter a whole number.[/warning]")
            continue
        if minimum is not None and value < minimum:
            _console.print(f"[warning]Value must be at least {minimum}.[/warning]")
            continue
        return value


def _prompt_price(message: str, default: Optional[float], *, optional: bool = False) -> Optional[float]:
    default_label = "none" if default is None else f"{default:g}"
    while True:
        response = Prompt.ask(message, default=default_label, console=_console)
        if optional and response.strip().lower() in {"", "none", "null"}:
            return None
        try:
            value = float(response)
        except ValueError:
            _console.print("[warning]Please enter a numeric value.[/warning]")
            continue
        if value <= 0:
            _console.print("[warning]Price must be greater than 0.[/warning]")
            continue
        return value


def _summarise_configuration(data: dict[str, str]) -> None:
    table = Table(title="Analysis Inputs", show_lines=False, expand=True)
    table.add_column("Setting", style="accent", no_wrap=True)
    table.add_column("Value", style="muted")
    for key, value in data.items():
        table.add_row(key, value)
    _console.print(table)


def run_interactive_wizard(
    args: argparse.Namespace,
    *,
    random_price: Callable[[], float],
) -> argparse.Namespace:
    _console.print(Panel.fit("[accent bold]Asset Price Analyzer[/accent bold]", border_style="accent"))
    _console.print(
        "Use the prompts below to describe today's offer. Press [accent]<enter>[/accent] to accept defaults.",
        style="muted",
    )

    buy = args.buy
    if Confirm.ask("Draw a random buy price from the model?", default=buy is None, console=_console):
        buy = random_price()
        _console.print(f"Random buy price: [accent]{buy:g}[/accent]")
    else:
        buy = _prompt_price("What price can you buy at today?", buy)

    sell = _prompt_price("What price can you sell for? (or 'none')", args.sell, optional=True)
    friends = _prompt_int("How many friends check prices with you?", args.friends, minimum=0)

    show = Confirm.ask("Show charts in a window?", default=args.show, console=_console)
    save_plots = Confirm.ask("Save charts to disk?", default=not args.no_save, console=_console)
    if save_plots:
        save_dir = Path(Prompt.ask("Directory for saved charts", default=str(args.save_dir), console=_console)).expanduser()
        no_save = False
    else:
        save_dir = args.save_dir
        no_save = True

    _summarise_configuration(
        {
            "Buy price": f"{buy:g}",
            "Sell price": "-" if sell is None else f"{sell:g}",
            "Price checks per day": f"{1 + friends}",
            "Show window": "Yes" if show else "No",
            "Save charts": "Yes" if not no_save else "No",
        }
    )

    return argparse.Namespace(
        buy=buy,
        sell=sell,
        friends=friends,
        random=False,
        seed=args.seed,
        samples=args.samples,
        hist_bins=args.hist_bins,
        save_dir=save_dir,
        no_save=no_save,
        show=show,
        interactive=False,
    )


def render_analysis(
    result: AnalysisResult,
    *,
    thresholds: InterpretationThresholds = DEFAULT_THRESHOLDS,
    console: Console | None = None,
) -> None:
    """Print the buy and sell panels for ``result`` on ``console`` (themed for the call)."""
    console = console or _console
    console.push_theme(_THEME)
    try:
        _print_panels(result, thresholds, console)
    finally:
        console.pop_theme()


def _print_panels(result: AnalysisResult, thresholds: InterpretationThresholds, console: Console) -> None:
    verdict = interpret_buy(result.buy_percentile, thresholds)
    buy_table = Table(show_header=False, expand=True)
    buy_table.add_column("Metric", style="muted")
    buy_table.add_column("Value", justify="right")
    buy_table.add_row("Percentile", f"{result.buy_percentile:.1f}th")
    buy_table.add_row("Better prices", f"{result.buy_probability_better:.1f}%")
    buy_table.add_row("Low-price cluster", f"{result.low_cluster_pct:.1f}%")
    buy_table.add_row("High-price cluster", f"{result.high_cluster_pct:.1f}%")
    console.print(
        Panel(
            buy_table,
            title=f"Buy {result.buy_price:g}: [{verdict.tone}]{verdict.text}[/{verdict.tone}]",
            subtitle=verdict.description,
            border_style="accent",
        )
    )

    if not result.has_sell:
        return

    sell_table = Table(show_header=False, expand=True)
    sell_table.add_column("Metric", style="muted")
    sell_table.add_column("Value", justify="right")
    profit_style = "success" if result.profit >= 0 else "danger"
    sell_table.add_row("Potential profit", f"[{profit_style}]{result.profit:+.0f}[/{profit_style}]")
    sell_table.add_row("ROI", f"[{profit_style}]{result.roi:+.1f}%[/{profit_style}]")
    sell_table.add_row("Sell percentile", f"{result.sell_percentile:.1f}th")
    sell_table.add_row("Better prices", f"{result.probability_better:.1f}%")
    sell_table.add_row("Expected wait", f"{format_periods(result.expected_periods, thresholds)} days")
    if result.trials_per_period > 1:
        sell_table.add_row("Price checks per day", f"{result.trials_per_period}")

    advice = recommend_sell(result.expected_periods, thresholds)
    console.print(
        Panel(
            sell_table,
            title=f"Sell {result.sell_price:g}: [{advice.tone}]{advice.text}[/{advice.tone}]",
            subtitle=advice.description,
            border_style="accent",
        )
    )

"""User interface helpers for price analysis."""

from .interactive import render_analysis, run_interactive_wizard

__all__ = ["render_analysis", "run_interactive_wizard"]

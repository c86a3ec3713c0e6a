"""
Report rendering for validation findings.
"""

from .formatters import render, render_console, render_csv, render_json, summarize

__all__ = [
    "render",
    "render_console",
    "render_csv",
    "render_json",
    "summarize",
]

"""
Rendering of laid-out feeds for the CLI.
"""

from .renderer import render_console, render_html

__all__ = ["render_console", "render_html"]

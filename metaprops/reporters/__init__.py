"""
Output renderers
"""

from .text import TextReporter, render_row, render_rows

__all__ = ['TextReporter', 'render_row', 'render_rows']

"""
Analytics package exports.
"""

from hanzi_srs.analytics.service import build_notebook_stats, summarize_notebook
from hanzi_srs.analytics.types import NotebookStats

__all__ = [
    "build_notebook_stats",
    "summarize_notebook",
    "NotebookStats",
]

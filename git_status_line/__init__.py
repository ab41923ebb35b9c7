"""
git-status-line - A compact git status summary for shell prompts
"""

from .__version__ import __version__
from .exceptions import MalformedReportError
from .formatters import render
from .models import MergeState, Status, Upstream
from .parser import parse
from .core import StatusLine

__all__ = [
    "MalformedReportError",
    "MergeState",
    "Status",
    "StatusLine",
    "Upstream",
    "parse",
    "render",
    "__version__",
]

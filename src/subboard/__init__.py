"""SubBoard: terminal console for a paper moderation queue."""

from subboard.models import ConsoleConfig, Decision, Endpoints, Paper
from subboard.navigation import Selection
from subboard.store import PaperStore
from subboard.update import ConsoleState, Dispatcher

__version__ = "0.1.0"

__all__ = [
    "ConsoleConfig",
    "ConsoleState",
    "Decision",
    "Dispatcher",
    "Endpoints",
    "Paper",
    "PaperStore",
    "Selection",
    "__version__",
]

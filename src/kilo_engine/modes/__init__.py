"""Mode manager and the editor's modes."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .prompt_mode import PromptMode, SaveAsMode
from .search_mode import SearchMode
from .mode_manager import ModeManager

__all__ = [
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "EditMode",
    "PromptMode",
    "SaveAsMode",
    "SearchMode",
    "ModeManager",
]

"""Mode manager and the command/change modes."""

from .base_mode import Mode, ModeBus, ModeContext, ModeResult
from .change_mode import ChangeMode
from .command_mode import CommandMode
from .mode_manager import ModeManager

__all__ = [
    "ChangeMode",
    "CommandMode",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
]

from .manager import ComboManager
from .models.action import Action
from .models.combo import InvalidCombo, normalize_combo
from .models.keyevent import KeyEvent
from .version import __version__

__all__ = [
    "Action",
    "ComboManager",
    "InvalidCombo",
    "KeyEvent",
    "normalize_combo",
    "__version__",
]

"""prompt numbered menus or searchable lists in the terminal"""

__version__ = "0.1.0"

from .listing import show_list  # noqa: E402
from .menu import show_menu  # noqa: E402

__all__ = ["__version__", "show_list", "show_menu"]

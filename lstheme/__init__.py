"""Terminal styles and colour themes built from LS_COLORS and EXA_COLORS definitions."""

__version__ = "0.1.0"
__all__ = ["style", "lsc", "ui_styles", "theme", "options"]
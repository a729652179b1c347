"""Raw-terminal text editor engine."""

__all__ = [
    "buffer",
    "editing",
    "actions",
    "modes",
    "keymaps",
    "runtime",
    "search",
    "terminal",
    "view",
    "app",
]

__version__ = "0.1.0"

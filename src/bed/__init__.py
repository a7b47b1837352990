"""bed - a basic line editor in the spirit of ed."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "modes",
    "render",
    "runtime",
    "session",
]

__version__ = "0.1.0"

"""Textual host for the bed editor."""

from .controller import TextualBedAdapter, TextualUIHooks

__all__ = ["TextualBedAdapter", "TextualUIHooks"]

"""Editor settings read from ``BED_*`` environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX

DEFAULT_PROMPT = ":"
DEFAULT_THEME = "monokai"
CHANGE_TERMINATOR = "."


def _lookup(environ: Mapping[str, str], name: str) -> Optional[str]:
    return environ.get(f"{ENV_PREFIX}{name}")


def _flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = _lookup(environ, name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """User-facing knobs for a single editing session."""

    prompt: str = DEFAULT_PROMPT
    highlight: bool = True
    theme: str = DEFAULT_THEME

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, *, tty: bool = True
    ) -> "EditorConfig":
        env = os.environ if environ is None else environ
        # NO_COLOR is the cross-tool convention, BED_NO_COLOR the local one.
        no_color = "NO_COLOR" in env or _flag(env, "NO_COLOR", False)
        highlight = _flag(env, "HIGHLIGHT", True) and tty and not no_color
        return cls(
            prompt=_lookup(env, "PROMPT") or DEFAULT_PROMPT,
            highlight=highlight,
            theme=_lookup(env, "THEME") or DEFAULT_THEME,
        )


__all__ = ["CHANGE_TERMINATOR", "DEFAULT_PROMPT", "DEFAULT_THEME", "EditorConfig"]

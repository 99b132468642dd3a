"""Shell settings resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from line_engine.buffer.buffer import DEFAULT_CURSOR_MARKER

ENV_PREFIX = "LINE_ENGINE_"

DEFAULT_HEADER = "------ Text Editor ------"
DEFAULT_FOOTER = "---------------------------"


@dataclass(frozen=True)
class ShellSettings:
    """Presentation knobs for the command shell."""

    cursor_marker: str = DEFAULT_CURSOR_MARKER
    header: str = DEFAULT_HEADER
    footer: str = DEFAULT_FOOTER
    delete_confirm_token: str = "D"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellSettings":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            cursor_marker=env.get(f"{ENV_PREFIX}CURSOR_MARKER", defaults.cursor_marker),
            header=env.get(f"{ENV_PREFIX}HEADER", defaults.header),
            footer=env.get(f"{ENV_PREFIX}FOOTER", defaults.footer),
            delete_confirm_token=env.get(
                f"{ENV_PREFIX}DELETE_CONFIRM", defaults.delete_confirm_token
            ),
        )

    def with_overrides(self, **changes: Optional[str]) -> "ShellSettings":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

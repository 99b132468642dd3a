"""Command-line entry point for the line editor."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

from line_engine.config import ENV_PREFIX, ShellSettings
from line_engine.runtime import telemetry
from line_engine.shell.session import ShellSession


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Line-oriented text editor with undo/redo."
    )
    parser.add_argument(
        "--tui",
        action="store_true",
        help="Run the Textual interface instead of the command shell",
    )
    parser.add_argument(
        "--marker",
        default=None,
        help="Cursor marker drawn inside the current line (default: '|')",
    )
    parser.add_argument(
        "--log-preset",
        default=os.environ.get(f"{ENV_PREFIX}LOG_PRESET"),
        choices=("development", "production", "quiet"),
        help="Telemetry preset to activate before starting",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    settings = ShellSettings.from_env().with_overrides(cursor_marker=args.marker)

    if args.tui:
        from line_engine.adapters.textual.app import EditorApp

        EditorApp(settings=settings).run()
        return 0

    ShellSession(settings=settings).run()
    return 0


if __name__ == "__main__":  # pragma: no cover - manual entry point
    raise SystemExit(main())

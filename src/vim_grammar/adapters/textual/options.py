"""Command-line options for the Textual demo."""

from __future__ import annotations

import argparse
import os
from typing import Mapping, Optional, Sequence

from vim_grammar.runtime import telemetry

PRESET_ENV = "VIM_GRAMMAR_PRESET"


def parse_args(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> argparse.Namespace:
    env = os.environ if environ is None else environ
    parser = argparse.ArgumentParser(
        description="Type vi normal-mode keys and watch the recognized commands."
    )
    parser.add_argument(
        "--preset",
        choices=tuple(telemetry.PRESETS),
        default=env.get(PRESET_ENV, "").strip().lower() or None,
        help=f"Telemetry preset (default: ${PRESET_ENV}, else VIM_GRAMMAR_* variables)",
    )
    parser.add_argument(
        "--debug-keys",
        action="store_true",
        help="Echo adapter key/abort lines into the command log",
    )
    args = parser.parse_args(argv)
    # argparse does not check defaults against choices.
    if args.preset is not None and args.preset not in telemetry.PRESETS:
        parser.error(
            f"{PRESET_ENV}={args.preset!r} is not one of "
            f"{', '.join(telemetry.PRESETS)}"
        )
    return args


__all__ = ["PRESET_ENV", "parse_args"]

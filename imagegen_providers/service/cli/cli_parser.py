"""CLI parser construction for imagegen-cli.

This module wires subparsers but contains no execution logic. Subcommand
handlers live in ``cli_actions``.
"""

from __future__ import annotations

import argparse
import json

from ...config.defaults import CLI_DEFAULT_HEIGHT, CLI_DEFAULT_PROVIDER, CLI_DEFAULT_WIDTH


def _json_value(text: str):
    """Decode a JSON command-line value."""
    return json.loads(text)


def _add_request_args(parser: argparse.ArgumentParser) -> None:
    """Attach the generation request flags shared by ``generate`` and ``plan``."""
    parser.add_argument("--provider", default=CLI_DEFAULT_PROVIDER)
    parser.add_argument("--prompt", required=True)
    parser.add_argument("--negative-prompt", dest="negative_prompt", default=None)
    parser.add_argument("--width", type=int, default=CLI_DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=CLI_DEFAULT_HEIGHT)
    parser.add_argument("--model", default=None)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--steps", type=int, default=None)
    parser.add_argument("--guidance", dest="guidance_scale", type=float, default=None)
    parser.add_argument("--loras", type=_json_value, default=None, help="Style adapters as a JSON value")


def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level CLI parser and subcommands.

    ``generate`` performs network I/O; ``plan`` only prints the request body
    that would be submitted.
    """
    p = argparse.ArgumentParser(prog="imagegen-cli", description="Remote image generation CLI")
    p.add_argument("--log-level", default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    p_gen = sub.add_parser("generate", help="Submit a generation task and wait for the image")
    _add_request_args(p_gen)
    p_gen.add_argument("--token", default=None, help="API token (defaults to the provider env var)")
    p_gen.add_argument("--json", action="store_true")

    p_plan = sub.add_parser("plan", help="Print the request body without calling the API")
    _add_request_args(p_plan)

    return p


__all__ = ["build_parser"]

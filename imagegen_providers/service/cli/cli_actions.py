"""Subcommand handlers for imagegen-cli.

Handlers return process exit codes: 0 on success, 1 for provider failures,
2 for usage problems (missing token, invalid request).
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError

from ...base.dto import GenerationRequest
from ...base.errors import ProviderError
from ...base.factory import ProviderFactory, UnknownProviderError
from ...config.env import get_env_var_candidates, resolve_provider_key

ProviderBuilder = Callable[[str], Any]


def _emit_error(payload: Dict[str, Any]) -> None:
    sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")


def _build_request(args: argparse.Namespace, token: Optional[str]) -> GenerationRequest:
    return GenerationRequest(
        prompt=args.prompt,
        negative_prompt=args.negative_prompt,
        width=args.width,
        height=args.height,
        model=args.model,
        seed=args.seed,
        steps=args.steps,
        guidance_scale=args.guidance_scale,
        loras=args.loras,
        auth_token=token,
    )


def handle_generate(args: argparse.Namespace, provider_builder: Optional[ProviderBuilder] = None) -> int:
    """Run one generation and print the image URL (or JSON with ``--json``)."""
    token = args.token
    if not token:
        token, _ = resolve_provider_key(args.provider)
    if not token:
        _emit_error(
            {
                "error": f"missing API key for provider '{args.provider}'",
                "set_one_of_env": list(get_env_var_candidates(args.provider)),
            }
        )
        return 2

    try:
        request = _build_request(args, token)
        provider = (provider_builder or ProviderFactory.create)(args.provider)
    except ValidationError as exc:
        _emit_error({"error": "invalid request", "details": exc.errors(include_url=False)})
        return 2
    except UnknownProviderError as exc:
        _emit_error({"error": str(exc)})
        return 2

    try:
        result = provider.generate(request)
    except ProviderError as err:
        _emit_error({"error": err.code.value, "message": err.message, "provider": err.provider})
        return 1

    if args.json:
        sys.stdout.write(json.dumps(result.to_dict()) + "\n")
    else:
        sys.stdout.write(result.url + "\n")
    return 0


def handle_plan(args: argparse.Namespace, provider_builder: Optional[ProviderBuilder] = None) -> int:
    """Print the body ``generate`` would submit, with a resolved seed."""
    try:
        request = _build_request(args, None)
        provider = (provider_builder or ProviderFactory.create)(args.provider)
    except ValidationError as exc:
        _emit_error({"error": "invalid request", "details": exc.errors(include_url=False)})
        return 2
    except UnknownProviderError as exc:
        _emit_error({"error": str(exc)})
        return 2

    body = provider.build_request_body(request, provider.resolve_seed(request))
    sys.stdout.write(json.dumps(body, ensure_ascii=False, indent=2) + "\n")
    return 0


__all__ = ["handle_generate", "handle_plan"]

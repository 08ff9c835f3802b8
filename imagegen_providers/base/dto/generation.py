"""
Pydantic DTO for inbound image generation requests.

Purpose
-------
Validate caller input before it reaches a provider adapter: prompt presence,
positive dimensions, seed range and step count. Authentication is deliberately
left loose here; adapters check the token themselves so that missing or
malformed tokens surface as classified provider errors rather than as
``pydantic.ValidationError``.

External dependencies: Pydantic only (no network calls).
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

# Seeds are 31-bit unsigned integers.
MAX_SEED = 2**31 - 1


class GenerationRequest(BaseModel):
    """Provider-agnostic text-to-image request.

    Parameters:
        prompt: Text prompt (non-empty).
        negative_prompt: Optional text describing what to avoid.
        width: Output width in pixels (positive).
        height: Output height in pixels (positive).
        model: Optional model identifier; adapters apply their default.
        seed: Optional seed in ``[0, 2**31 - 1]``; generated when omitted.
        steps: Optional inference step count (positive).
        guidance_scale: Optional classifier-free guidance scale.
        loras: Optional opaque style adapter specification forwarded as-is.
        auth_token: Caller's API token for the remote service.

    Raises:
        ValidationError: On empty prompt, non-positive dimensions or steps,
            or out-of-range seed.
    """

    model_config = ConfigDict(protected_namespaces=())

    prompt: str = Field(..., min_length=1)
    negative_prompt: Optional[str] = None
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    model: Optional[str] = None
    seed: Optional[int] = Field(default=None, ge=0, le=MAX_SEED)
    steps: Optional[int] = Field(default=None, gt=0)
    guidance_scale: Optional[float] = None
    loras: Optional[Any] = None
    auth_token: Optional[str] = Field(default=None, repr=False)

    @property
    def size(self) -> str:
        """Return the ``"{width}x{height}"`` size string."""
        return f"{self.width}x{self.height}"


__all__ = ["GenerationRequest", "MAX_SEED"]

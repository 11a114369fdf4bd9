"""Pydantic request models for the Style Studio API.

Models
------
OptionsPayload
    A complete option set, used by ``POST /api/prompt/compile``.
OptionsUpdate
    Partial option changes for ``PUT /api/session/options`` and the optional
    body of ``POST /api/generate``.
CompileRequest
    Options plus the couple-mode flag for prompt previews.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from stylestudio.core.models import AspectRatio, GenerationOptions, Quality, Theme


class OptionsPayload(BaseModel):
    """Full generation options.

    Attributes:
        theme: Theme identifier (e.g. ``"korean"``, ``"custom"``).
        concept: One concept string from the theme's list.
        aspect_ratio: ``"1:1"``, ``"3:4"`` or ``"9:16"``.
        quality: ``"Standard"``, ``"High"`` or ``"Ultra"``.
        face_consistency: Ask the model to preserve the subject's identity.
        custom_prompt: Free-text description (required for the custom theme,
            optional extra instructions otherwise).
    """

    theme: Theme = Field(..., description="Theme identifier.")
    concept: str = Field(..., description="Concept string from the theme's list.")
    aspect_ratio: AspectRatio = Field(
        default=AspectRatio.PORTRAIT,
        description="Output aspect ratio.",
    )
    quality: Quality = Field(
        default=Quality.HIGH,
        description="Quality tier; only Ultra adds a texture clause.",
    )
    face_consistency: bool = Field(
        default=True,
        description="Preserve the identity of the person in the source image(s).",
    )
    custom_prompt: str | None = Field(
        default="",
        description="Free-text description or additional instructions.",
    )

    def to_options(self) -> GenerationOptions:
        return GenerationOptions(
            theme=self.theme,
            concept=self.concept,
            aspect_ratio=self.aspect_ratio,
            quality=self.quality,
            face_consistency=self.face_consistency,
            custom_prompt=self.custom_prompt,
        )


class CompileRequest(OptionsPayload):
    """Request body for ``POST /api/prompt/compile``.

    Attributes:
        is_couple: Compose as if a second source image were supplied.
    """

    is_couple: bool = Field(
        default=False,
        description="Compose the couple variant (two source images).",
    )


class OptionsUpdate(BaseModel):
    """Partial option changes; omitted fields keep their current value."""

    theme: Theme | None = None
    concept: str | None = None
    aspect_ratio: AspectRatio | None = None
    quality: Quality | None = None
    face_consistency: bool | None = None
    custom_prompt: str | None = None

    def changes(self) -> dict:
        return self.model_dump(exclude_none=True)

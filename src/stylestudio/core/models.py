"""Domain types shared by the composer, the Gemini client and the session."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from enum import Enum


class Theme(str, Enum):
    """Stylistic category selecting a concept list and template variant.

    Member order is the display order of the studio.
    """

    KOREAN = "korean"
    ENTREPRENEUR = "entrepreneur"
    HANOI_WINTER = "hanoi_winter"
    INTERNATIONAL_MODEL = "international_model"
    FLOWER_MUSE = "flower_muse"
    CHRISTMAS = "christmas"
    PRINCESS_MUSE = "princess_muse"
    CHRISTMAS_COUPLE = "christmas_couple"
    SINGER = "singer"
    CUSTOM = "custom"

    @property
    def is_couple(self) -> bool:
        """Whether the theme needs two source images."""
        return self is Theme.CHRISTMAS_COUPLE

    @property
    def token(self) -> str:
        """Upper-cased theme name used inside the composed prompt.

        Only the first underscore is replaced; every theme id has at most one.
        """
        return self.value.upper().replace("_", " ", 1)


class AspectRatio(str, Enum):
    SQUARE = "1:1"
    PORTRAIT = "3:4"
    STORY = "9:16"


class Quality(str, Enum):
    STANDARD = "Standard"
    HIGH = "High"
    ULTRA = "Ultra"


@dataclass(frozen=True)
class GenerationOptions:
    """User-selected options for one generation request.

    The composer trusts these values. Precondition checks (custom text present,
    concept belongs to the theme, image count) live in
    :mod:`stylestudio.core.validation`.
    """

    theme: Theme
    concept: str
    aspect_ratio: AspectRatio = AspectRatio.PORTRAIT
    quality: Quality = Quality.HIGH
    face_consistency: bool = True
    custom_prompt: str | None = ""

    def __post_init__(self) -> None:
        # Accept raw strings from JSON payloads and coerce them to enum members.
        object.__setattr__(self, "theme", Theme(self.theme))
        object.__setattr__(self, "aspect_ratio", AspectRatio(self.aspect_ratio))
        object.__setattr__(self, "quality", Quality(self.quality))

    @property
    def is_custom(self) -> bool:
        return self.theme is Theme.CUSTOM


@dataclass(frozen=True)
class SourceImage:
    """One uploaded photograph as raw bytes plus its MIME type."""

    data: bytes = field(repr=False)
    mime_type: str

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class GeneratedResult:
    """Output image paired with the exact prompt that produced it."""

    image: bytes = field(repr=False)
    prompt: str
    mime_type: str = "image/png"

    @property
    def image_base64(self) -> str:
        return base64.b64encode(self.image).decode("ascii")

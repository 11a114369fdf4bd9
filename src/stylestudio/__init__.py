"""Style Studio - photorealistic portrait restyling on top of Gemini image generation."""

__version__ = "0.1.0"

from stylestudio.core.config import StudioConfig, config
from stylestudio.core.prompt_composer import compose

__all__ = [
    "StudioConfig",
    "compose",
    "config",
]

"""Core functionality for Style Studio.

Layers (leaves first):

1. **Prompt Library** (prompt_library.py):
   - Theme -> concept tables, user-facing labels, the fixed system instruction

2. **Prompt Composer** (prompt_composer.py):
   - Pure ``compose(options, is_couple)`` template builder

3. **Generation Client** (gemini_client.py):
   - One ``generate_content`` call per request through ``google-genai``
   - Inline-image extraction, refusal and empty-response errors

4. **Session** (session.py, history.py, validation.py):
   - Headless studio state, precondition checks, bounded history

5. **Configuration** (config.py):
   - Pydantic Settings, ``STYLESTUDIO_`` environment prefix

Usage Example
-------------
    from stylestudio.core import GenerationClient, StudioSession, config

    session = StudioSession(GenerationClient.from_config(config))
    session.set_image(load_source_image(photo_bytes))
    entry = session.generate()
"""

from stylestudio.core.config import StudioConfig, config
from stylestudio.core.gemini_client import (
    EmptyResponseError,
    GenerationClient,
    GenerationError,
    ModelRefusalError,
)
from stylestudio.core.history import History, HistoryEntry
from stylestudio.core.models import (
    AspectRatio,
    GeneratedResult,
    GenerationOptions,
    Quality,
    SourceImage,
    Theme,
)
from stylestudio.core.prompt_composer import compose
from stylestudio.core.session import SessionBusyError, StudioSession
from stylestudio.core.validation import ValidationError, load_source_image

__all__ = [
    "AspectRatio",
    "EmptyResponseError",
    "GeneratedResult",
    "GenerationClient",
    "GenerationError",
    "GenerationOptions",
    "History",
    "HistoryEntry",
    "ModelRefusalError",
    "Quality",
    "SessionBusyError",
    "SourceImage",
    "StudioConfig",
    "StudioSession",
    "Theme",
    "ValidationError",
    "compose",
    "config",
    "load_source_image",
]

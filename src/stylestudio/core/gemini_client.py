"""Gemini image generation client for Style Studio.

This module provides :class:`GenerationClient`, a thin wrapper around one
``models.generate_content`` call of the ``google-genai`` SDK.  For each
request it:

1. Composes the prompt (couple mode iff a second image is supplied).
2. Sends the primary image, the optional secondary image and the prompt text,
   in that order, with the fixed system instruction and the requested aspect
   ratio.
3. Returns the first inline image found in the first candidate, paired with
   the exact prompt that was sent.

Error Taxonomy
--------------
- :class:`ModelRefusalError` - the model answered with text instead of an
  image.  The message is the model's text, verbatim.
- :class:`EmptyResponseError` - neither image nor text came back.
- Anything raised by the SDK or the network (``google.genai.errors.APIError``,
  ``httpx`` transport errors, ...) propagates unchanged.

Each call makes one attempt: no retry, no backoff and no
timeout beyond the SDK's own defaults.

Usage
-----
::

    from stylestudio.core.config import config
    from stylestudio.core.gemini_client import GenerationClient

    client = GenerationClient.from_config(config)
    result = client.generate(primary, options)
    Path("out.png").write_bytes(result.image)
"""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from stylestudio.core.config import StudioConfig
from stylestudio.core.models import GeneratedResult, GenerationOptions, SourceImage
from stylestudio.core.prompt_composer import compose
from stylestudio.core.prompt_library import SYSTEM_INSTRUCTION

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-image"
DEFAULT_IMAGE_MIME_TYPE = "image/png"
EMPTY_RESPONSE_MESSAGE = "No image generated by the model."


class GenerationError(Exception):
    """Base class for generation failures reported by the model itself."""

    pass


class ModelRefusalError(GenerationError):
    """The model declined to produce an image and explained why in text.

    Attributes:
        text: The model's explanation, unmodified.
    """

    def __init__(self, text: str) -> None:
        super().__init__(text)
        self.text = text


class EmptyResponseError(GenerationError):
    """The response carried neither an inline image nor any text."""

    def __init__(self, message: str = EMPTY_RESPONSE_MESSAGE) -> None:
        super().__init__(message)


def _first_candidate_parts(response: Any) -> list[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def _find_inline_image(parts: list[Any]) -> tuple[bytes, str] | None:
    """Return ``(data, mime_type)`` of the first part carrying inline data."""
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return inline.data, getattr(inline, "mime_type", None) or DEFAULT_IMAGE_MIME_TYPE
    return None


def _collect_text(parts: list[Any]) -> str:
    """Concatenate the plain text parts, skipping model thoughts."""
    texts = []
    for part in parts:
        if getattr(part, "thought", None) is True:
            continue
        text = getattr(part, "text", None)
        if isinstance(text, str) and text:
            texts.append(text)
    return "".join(texts)


def parse_response(response: Any, prompt: str) -> GeneratedResult:
    """Extract the generated image from a ``generate_content`` response.

    Args:
        response: SDK response object (``types.GenerateContentResponse``).
        prompt: The prompt that was sent, returned alongside the image.

    Returns:
        GeneratedResult with the first inline image of the first candidate.

    Raises:
        ModelRefusalError: If no image is present but text is.
        EmptyResponseError: If neither image nor text is present.
    """
    parts = _first_candidate_parts(response)

    picked = _find_inline_image(parts)
    if picked is not None:
        data, mime_type = picked
        return GeneratedResult(image=data, prompt=prompt, mime_type=mime_type)

    text = _collect_text(parts)
    if text:
        logger.warning(f"Gemini returned text instead of an image: {text[:200]}")
        raise ModelRefusalError(text)

    logger.error("Gemini response contained neither image nor text.")
    raise EmptyResponseError()


class GenerationClient:
    """Single-shot client for Gemini image generation.

    The client holds no per-request state and can be shared between callers.

    Attributes:
        model: Gemini model name used for every request.
    """

    def __init__(self, client: genai.Client, model: str = DEFAULT_MODEL) -> None:
        """Wrap an existing SDK client.

        Args:
            client: Configured ``google.genai.Client``.
            model: Gemini model name.
        """
        self._client = client
        self.model = model

    @classmethod
    def from_config(cls, config: StudioConfig) -> GenerationClient:
        """Create a client authenticated with the configured API key.

        Raises:
            RuntimeError: If no Gemini API key is configured.
        """
        if config.gemini_api_key is None or not config.gemini_api_key.get_secret_value():
            raise RuntimeError(
                "Missing Gemini configuration. Set GEMINI_API_KEY or STYLESTUDIO_GEMINI_API_KEY."
            )
        client = genai.Client(api_key=config.gemini_api_key.get_secret_value())
        logger.info(f"GenAI client initialised (model={config.gemini_model}).")
        return cls(client, model=config.gemini_model)

    # -- Request construction -----------------------------------------------

    def build_request(
        self,
        primary: SourceImage,
        options: GenerationOptions,
        secondary: SourceImage | None = None,
    ) -> tuple[str, list[types.Part], types.GenerateContentConfig]:
        """Compose the prompt and assemble the request payload.

        Returns:
            Tuple of ``(prompt, contents, config)`` ready for
            ``models.generate_content``.
        """
        is_couple = secondary is not None
        prompt = compose(options, is_couple)

        contents = [types.Part.from_bytes(data=primary.data, mime_type=primary.mime_type)]
        if secondary is not None:
            contents.append(
                types.Part.from_bytes(data=secondary.data, mime_type=secondary.mime_type)
            )
        contents.append(types.Part.from_text(text=prompt))

        gen_config = types.GenerateContentConfig(
            system_instruction=SYSTEM_INSTRUCTION,
            image_config=types.ImageConfig(aspect_ratio=options.aspect_ratio.value),
        )
        return prompt, contents, gen_config

    def _log_request(self, options: GenerationOptions, secondary: SourceImage | None) -> None:
        mode = "couple" if secondary is not None else "single"
        logger.info(
            f"Calling Gemini (model={self.model}, mode={mode}, theme={options.theme.value}, "
            f"aspect_ratio={options.aspect_ratio.value}, quality={options.quality.value})."
        )

    # -- Public interface ---------------------------------------------------

    def generate(
        self,
        primary: SourceImage,
        options: GenerationOptions,
        secondary: SourceImage | None = None,
    ) -> GeneratedResult:
        """Generate one stylised image.

        Args:
            primary: First source image.
            options: Generation options.  Preconditions are the caller's job.
            secondary: Second source image; its presence selects couple mode.

        Returns:
            GeneratedResult pairing the image bytes with the prompt sent.

        Raises:
            ModelRefusalError: The model answered with text only.
            EmptyResponseError: The model answered with nothing usable.
            Exception: Any SDK or transport error, unmodified.
        """
        prompt, contents, gen_config = self.build_request(primary, options, secondary)
        self._log_request(options, secondary)

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=gen_config,
            )
        except Exception:
            logger.exception("Gemini API error during image generation.")
            raise

        return parse_response(response, prompt)

    async def generate_async(
        self,
        primary: SourceImage,
        options: GenerationOptions,
        secondary: SourceImage | None = None,
    ) -> GeneratedResult:
        """Async twin of :meth:`generate` using the SDK's ``aio`` client."""
        prompt, contents, gen_config = self.build_request(primary, options, secondary)
        self._log_request(options, secondary)

        try:
            response = await self._client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=gen_config,
            )
        except Exception:
            logger.exception("Gemini API error during image generation.")
            raise

        return parse_response(response, prompt)

"""Session state for the studio.

A :class:`StudioSession` is the headless counterpart of the studio form: it
owns the current options, the uploaded photographs, the busy flag, the last
result or error, and the generation history.  It sequences the validation
helpers and the :class:`~stylestudio.core.gemini_client.GenerationClient` so
that one user action produces exactly one model call.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from .gemini_client import GenerationClient
from .history import DEFAULT_CAPACITY, History, HistoryEntry
from .models import GeneratedResult, GenerationOptions, SourceImage, Theme
from .prompt_library import default_concept
from .validation import ValidationError, validate_request

logger = logging.getLogger(__name__)

UNKNOWN_ERROR_MESSAGE = "Đã xảy ra lỗi không xác định."


class SessionBusyError(RuntimeError):
    """A generation is already running for this session."""

    pass


def default_options() -> GenerationOptions:
    """Options the studio opens with."""
    return GenerationOptions(
        theme=Theme.KOREAN,
        concept=default_concept(Theme.KOREAN),
    )


class StudioSession:
    """Per-user studio state.

    Attributes
    ----------
    options : GenerationOptions
        Current option snapshot (replaced, never mutated)
    primary_image : SourceImage | None
        First uploaded photograph
    secondary_image : SourceImage | None
        Second photograph, only sent in couple mode
    result : GeneratedResult | None
        Output of the last successful generation
    error : str | None
        User-facing message of the last failure
    history : History
        Most recent results, newest first
    """

    def __init__(
        self,
        client: GenerationClient,
        history_capacity: int = DEFAULT_CAPACITY,
        options: GenerationOptions | None = None,
    ) -> None:
        self._client = client
        self._busy = threading.Lock()

        self.options = options or default_options()
        self.primary_image: SourceImage | None = None
        self.secondary_image: SourceImage | None = None
        self.result: GeneratedResult | None = None
        self.error: str | None = None
        self.history = History(history_capacity)

    # -- State changes ------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self._busy.locked()

    @property
    def is_couple_mode(self) -> bool:
        return self.options.theme.is_couple

    def select_theme(self, theme: Theme | str) -> GenerationOptions:
        """Switch theme and preselect its first concept."""
        theme = Theme(theme)
        self.options = dataclasses.replace(
            self.options, theme=theme, concept=default_concept(theme)
        )
        return self.options

    def update_options(self, **changes: Any) -> GenerationOptions:
        """Replace option fields.

        A theme change without an explicit concept resets the concept to the
        new theme's first entry.
        """
        if "theme" in changes and "concept" not in changes:
            self.select_theme(changes.pop("theme"))
        self.options = dataclasses.replace(self.options, **changes)
        return self.options

    def set_image(self, image: SourceImage, second: bool = False) -> None:
        """Store an uploaded photograph and clear the previous outcome."""
        if second:
            self.secondary_image = image
        else:
            self.primary_image = image
        self.result = None
        self.error = None

    def snapshot(self) -> dict:
        """Serialisable summary of the session for the API."""
        return {
            "options": _options_to_dict(self.options),
            "has_primary_image": self.primary_image is not None,
            "has_secondary_image": self.secondary_image is not None,
            "is_couple_mode": self.is_couple_mode,
            "is_loading": self.is_loading,
            "error": self.error,
            "history_size": len(self.history),
        }

    # -- Generation ---------------------------------------------------------

    def _prepare(self) -> tuple[GenerationOptions, SourceImage, SourceImage | None]:
        options = self.options
        try:
            validate_request(options, self.primary_image, self.secondary_image)
        except ValidationError as e:
            self.error = str(e)
            raise

        # A rejected request leaves the previous image on display.
        self.error = None
        self.result = None

        # The second photograph only matters when the theme asks for a couple.
        secondary = self.secondary_image if options.theme.is_couple else None
        return options, self.primary_image, secondary

    @contextmanager
    def _busy_flag(self) -> Iterator[None]:
        if not self._busy.acquire(blocking=False):
            raise SessionBusyError("Đang tạo ảnh, vui lòng đợi...")
        try:
            yield
        finally:
            self._busy.release()

    def _record_success(self, options: GenerationOptions, result: GeneratedResult) -> HistoryEntry:
        self.result = result
        entry = self.history.add(HistoryEntry.from_result(result, options))
        logger.info(f"Generation stored in history (id={entry.id}, size={len(self.history)}).")
        return entry

    def _record_failure(self, error: Exception) -> None:
        self.error = str(error) or UNKNOWN_ERROR_MESSAGE
        logger.error(f"Generation failed: {self.error}")

    def generate(self) -> HistoryEntry:
        """Run one generation with the current state.

        Returns:
            The history entry created for the new image.

        Raises:
            ValidationError: A precondition is not met (no model call made).
            SessionBusyError: Another generation is still running.
            Exception: Whatever the client raised; also recorded in ``error``.
        """
        with self._busy_flag():
            options, primary, secondary = self._prepare()
            try:
                result = self._client.generate(primary, options, secondary)
            except Exception as e:
                self._record_failure(e)
                raise
            return self._record_success(options, result)

    async def generate_async(self) -> HistoryEntry:
        """Async twin of :meth:`generate`."""
        with self._busy_flag():
            options, primary, secondary = self._prepare()
            try:
                result = await self._client.generate_async(primary, options, secondary)
            except Exception as e:
                self._record_failure(e)
                raise
            return self._record_success(options, result)

    def __repr__(self) -> str:
        return (
            f"StudioSession(theme={self.options.theme.value}, "
            f"loading={self.is_loading}, history={len(self.history)})"
        )


def _options_to_dict(options: GenerationOptions) -> dict:
    return {
        "theme": options.theme.value,
        "concept": options.concept,
        "aspect_ratio": options.aspect_ratio.value,
        "quality": options.quality.value,
        "face_consistency": options.face_consistency,
        "custom_prompt": options.custom_prompt,
    }

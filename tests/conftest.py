"""Shared pytest fixtures for Style Studio tests."""

import io
from types import SimpleNamespace
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient
from google.genai import types
from PIL import Image

from stylestudio.core.config import StudioConfig
from stylestudio.core.gemini_client import GenerationClient
from stylestudio.core.models import GenerationOptions, SourceImage, Theme
from stylestudio.core.prompt_library import CHRISTMAS_COUPLE_CONCEPTS, KOREAN_FASHION_CONCEPTS
from stylestudio.core.session import StudioSession

GENERATED_PNG_MARKER = b"\x89PNG-generated-bytes"


def make_png_bytes(color: tuple[int, int, int] = (255, 0, 0), fmt: str = "PNG") -> bytes:
    """Encode a tiny solid-colour image.

    Args:
        color: RGB fill colour
        fmt: Pillow format name (PNG, JPEG, GIF, ...)

    Returns:
        Encoded image bytes
    """
    buffer = io.BytesIO()
    Image.new("RGB", (8, 8), color=color).save(buffer, format=fmt)
    return buffer.getvalue()


def make_response(*parts: types.Part) -> types.GenerateContentResponse:
    """Build a one-candidate ``generate_content`` response with *parts*."""
    return types.GenerateContentResponse(
        candidates=[types.Candidate(content=types.Content(role="model", parts=list(parts)))]
    )


def image_part(data: bytes = GENERATED_PNG_MARKER, mime_type: str = "image/png") -> types.Part:
    return types.Part(inline_data=types.Blob(data=data, mime_type=mime_type))


def text_part(text: str) -> types.Part:
    return types.Part(text=text)


def make_genai_mock(response=None, side_effect=None) -> MagicMock:
    """Create a mock ``google.genai.Client`` with sync and async ``generate_content``.

    Args:
        response: Value returned by both entry points
        side_effect: Exception raised by both entry points instead

    Returns:
        MagicMock standing in for the SDK client
    """
    mock_client = MagicMock()
    mock_client.models.generate_content.return_value = response
    mock_client.models.generate_content.side_effect = side_effect
    mock_client.aio.models.generate_content = AsyncMock(
        return_value=response, side_effect=side_effect
    )
    return mock_client


@pytest.fixture
def test_config(monkeypatch) -> StudioConfig:
    """Create a test configuration isolated from the developer's environment."""
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("STYLESTUDIO_GEMINI_API_KEY", raising=False)
    return StudioConfig(
        _env_file=None,
        gemini_api_key="test-key",
        history_capacity=36,
    )


@pytest.fixture
def korean_options() -> GenerationOptions:
    """Single-mode options from the studio's worked Korean example."""
    return GenerationOptions(
        theme=Theme.KOREAN,
        concept=KOREAN_FASHION_CONCEPTS[0],
        aspect_ratio="3:4",
        quality="High",
        face_consistency=True,
        custom_prompt="",
    )


@pytest.fixture
def couple_options() -> GenerationOptions:
    return GenerationOptions(
        theme=Theme.CHRISTMAS_COUPLE,
        concept=CHRISTMAS_COUPLE_CONCEPTS[0],
        aspect_ratio="9:16",
        quality="Standard",
        face_consistency=True,
        custom_prompt="",
    )


@pytest.fixture
def primary_image() -> SourceImage:
    return SourceImage(data=make_png_bytes((255, 0, 0)), mime_type="image/png")


@pytest.fixture
def secondary_image() -> SourceImage:
    return SourceImage(data=make_png_bytes((0, 0, 255), fmt="JPEG"), mime_type="image/jpeg")


@pytest.fixture
def image_bytes():
    """Factory fixture exposing :func:`make_png_bytes` to test modules."""
    return make_png_bytes


@pytest.fixture
def gemini_parts():
    """Factory namespace for building SDK responses and mock clients."""
    return SimpleNamespace(
        response=make_response,
        image=image_part,
        text=text_part,
        client=make_genai_mock,
        marker=GENERATED_PNG_MARKER,
    )


@pytest.fixture
def genai_mock() -> MagicMock:
    """SDK mock that answers every request with one inline PNG."""
    return make_genai_mock(response=make_response(image_part()))


@pytest.fixture
def generation_client(genai_mock: MagicMock) -> GenerationClient:
    return GenerationClient(genai_mock, model="gemini-2.5-flash-image")


@pytest.fixture
def session(generation_client: GenerationClient) -> StudioSession:
    return StudioSession(generation_client, history_capacity=36)


@pytest.fixture
def test_client(session: StudioSession) -> Generator[TestClient, None, None]:
    """FastAPI TestClient bound to a session with a mocked Gemini client."""
    from stylestudio.api.main import app

    app.state.session = session
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.state.session = None

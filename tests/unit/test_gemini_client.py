"""Tests for stylestudio.core.gemini_client — the Gemini request/response layer.

Tests cover:
- Request shape (part order, system instruction, aspect ratio, model name).
- Response parsing (first inline image, refusal text, empty responses).
- Error propagation from the SDK.
- The async entry point.
- Construction from configuration.
"""

from __future__ import annotations

import dataclasses
import logging

import pytest
from google.genai import types

from stylestudio.core.config import StudioConfig
from stylestudio.core.gemini_client import (
    EMPTY_RESPONSE_MESSAGE,
    EmptyResponseError,
    GenerationClient,
    GenerationError,
    ModelRefusalError,
    parse_response,
)
from stylestudio.core.models import AspectRatio, Quality
from stylestudio.core.prompt_composer import compose
from stylestudio.core.prompt_library import SYSTEM_INSTRUCTION


def _call_kwargs(genai_mock):
    genai_mock.models.generate_content.assert_called_once()
    return genai_mock.models.generate_content.call_args.kwargs


class TestRequestShape:
    """What is sent to models.generate_content."""

    def test_single_mode_parts(self, generation_client, genai_mock, primary_image, korean_options):
        generation_client.generate(primary_image, korean_options)
        contents = _call_kwargs(genai_mock)["contents"]

        assert len(contents) == 2
        assert contents[0].inline_data.data == primary_image.data
        assert contents[0].inline_data.mime_type == "image/png"
        assert contents[1].text == compose(korean_options, False)

    def test_couple_mode_parts_in_order(
        self, generation_client, genai_mock, primary_image, secondary_image, couple_options
    ):
        generation_client.generate(primary_image, couple_options, secondary_image)
        contents = _call_kwargs(genai_mock)["contents"]

        assert [p.inline_data.data for p in contents[:2]] == [
            primary_image.data,
            secondary_image.data,
        ]
        assert contents[1].inline_data.mime_type == "image/jpeg"
        assert contents[2].text == compose(couple_options, True)

    def test_system_instruction_and_aspect_ratio(
        self, generation_client, genai_mock, primary_image, korean_options
    ):
        options = dataclasses.replace(korean_options, aspect_ratio=AspectRatio.STORY)
        generation_client.generate(primary_image, options)
        gen_config = _call_kwargs(genai_mock)["config"]

        assert gen_config.system_instruction == SYSTEM_INSTRUCTION
        assert gen_config.image_config.aspect_ratio == "9:16"

    def test_model_name(self, generation_client, genai_mock, primary_image, korean_options):
        generation_client.generate(primary_image, korean_options)
        assert _call_kwargs(genai_mock)["model"] == "gemini-2.5-flash-image"

    def test_quality_only_changes_prompt(self, generation_client, primary_image, korean_options):
        ultra = dataclasses.replace(korean_options, quality=Quality.ULTRA)
        _, _, high_config = generation_client.build_request(primary_image, korean_options)
        prompt, _, ultra_config = generation_client.build_request(primary_image, ultra)

        assert high_config.image_config.aspect_ratio == ultra_config.image_config.aspect_ratio
        assert "- Texture:" in prompt

    def test_request_summary_logged(
        self, generation_client, primary_image, secondary_image, couple_options, caplog
    ):
        with caplog.at_level(logging.INFO, logger="stylestudio.core.gemini_client"):
            generation_client.generate(primary_image, couple_options, secondary_image)

        assert (
            "Calling Gemini (model=gemini-2.5-flash-image, mode=couple, "
            "theme=christmas_couple, aspect_ratio=9:16, quality=Standard)." in caplog.text
        )

    def test_exactly_one_call(self, generation_client, genai_mock, primary_image, korean_options):
        generation_client.generate(primary_image, korean_options)
        assert genai_mock.models.generate_content.call_count == 1
        genai_mock.aio.models.generate_content.assert_not_called()


class TestResponseParsing:
    def test_returns_image_and_prompt(self, generation_client, gemini_parts, primary_image, korean_options):
        result = generation_client.generate(primary_image, korean_options)
        assert result.image == gemini_parts.marker
        assert result.mime_type == "image/png"
        assert result.prompt == compose(korean_options, False)

    def test_first_image_wins(self, gemini_parts):
        response = gemini_parts.response(
            gemini_parts.text("Here you go"),
            gemini_parts.image(b"first", "image/jpeg"),
            gemini_parts.image(b"second"),
        )
        result = parse_response(response, "p")
        assert result.image == b"first"
        assert result.mime_type == "image/jpeg"

    def test_text_only_is_refusal_verbatim(self, gemini_parts, caplog):
        refusal = "I can't edit photos of real people in that way."
        response = gemini_parts.response(gemini_parts.text(refusal))

        with caplog.at_level(logging.WARNING, logger="stylestudio.core.gemini_client"):
            with pytest.raises(ModelRefusalError) as exc_info:
                parse_response(response, "p")

        assert exc_info.value.text == refusal
        assert str(exc_info.value) == refusal
        assert "text instead of an image" in caplog.text

    def test_multiple_text_parts_joined(self, gemini_parts):
        response = gemini_parts.response(gemini_parts.text("Sorry, "), gemini_parts.text("no."))
        with pytest.raises(ModelRefusalError) as exc_info:
            parse_response(response, "p")
        assert exc_info.value.text == "Sorry, no."

    def test_thought_parts_ignored(self, gemini_parts):
        response = gemini_parts.response(
            types.Part(text="thinking about it", thought=True),
            gemini_parts.text("Cannot do that."),
        )
        with pytest.raises(ModelRefusalError) as exc_info:
            parse_response(response, "p")
        assert exc_info.value.text == "Cannot do that."

    def test_empty_inline_data_skipped(self, gemini_parts):
        response = gemini_parts.response(
            gemini_parts.image(b""),
            gemini_parts.image(b"real"),
        )
        assert parse_response(response, "p").image == b"real"

    @pytest.mark.parametrize(
        "response",
        [
            types.GenerateContentResponse(candidates=[]),
            types.GenerateContentResponse(),
            types.GenerateContentResponse(candidates=[types.Candidate()]),
            types.GenerateContentResponse(
                candidates=[types.Candidate(content=types.Content(role="model", parts=[]))]
            ),
        ],
    )
    def test_empty_response(self, response):
        with pytest.raises(EmptyResponseError) as exc_info:
            parse_response(response, "p")
        assert str(exc_info.value) == EMPTY_RESPONSE_MESSAGE

    def test_error_hierarchy(self):
        assert issubclass(ModelRefusalError, GenerationError)
        assert issubclass(EmptyResponseError, GenerationError)


class TestErrorPropagation:
    def test_sdk_error_propagates_unchanged(self, gemini_parts, primary_image, korean_options, caplog):
        boom = ConnectionError("network down")
        client = GenerationClient(gemini_parts.client(side_effect=boom))

        with caplog.at_level(logging.ERROR, logger="stylestudio.core.gemini_client"):
            with pytest.raises(ConnectionError) as exc_info:
                client.generate(primary_image, korean_options)

        assert exc_info.value is boom
        assert "Gemini API error" in caplog.text

    def test_no_retry(self, gemini_parts, primary_image, korean_options):
        mock = gemini_parts.client(side_effect=TimeoutError("slow"))
        with pytest.raises(TimeoutError):
            GenerationClient(mock).generate(primary_image, korean_options)
        assert mock.models.generate_content.call_count == 1


class TestAsync:
    async def test_generate_async(self, generation_client, genai_mock, gemini_parts, primary_image, korean_options):
        result = await generation_client.generate_async(primary_image, korean_options)

        assert result.image == gemini_parts.marker
        genai_mock.aio.models.generate_content.assert_awaited_once()
        genai_mock.models.generate_content.assert_not_called()

    async def test_async_refusal(self, gemini_parts, primary_image, korean_options):
        mock = gemini_parts.client(response=gemini_parts.response(gemini_parts.text("No.")))
        with pytest.raises(ModelRefusalError):
            await GenerationClient(mock).generate_async(primary_image, korean_options)

    async def test_async_sdk_error(self, gemini_parts, primary_image, korean_options):
        mock = gemini_parts.client(side_effect=RuntimeError("quota"))
        with pytest.raises(RuntimeError, match="quota"):
            await GenerationClient(mock).generate_async(primary_image, korean_options)


class TestFromConfig:
    def test_missing_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("STYLESTUDIO_GEMINI_API_KEY", raising=False)
        cfg = StudioConfig(_env_file=None)
        with pytest.raises(RuntimeError, match="GEMINI_API_KEY"):
            GenerationClient.from_config(cfg)

    def test_blank_key(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("STYLESTUDIO_GEMINI_API_KEY", raising=False)
        with pytest.raises(RuntimeError):
            GenerationClient.from_config(StudioConfig(_env_file=None, gemini_api_key=""))

    def test_builds_sdk_client(self, monkeypatch, test_config):
        created = {}

        def fake_client(**kwargs):
            created.update(kwargs)
            return object()

        monkeypatch.setattr("stylestudio.core.gemini_client.genai.Client", fake_client)
        cfg = test_config.model_copy(update={"gemini_model": "gemini-3-pro-image-preview"})
        client = GenerationClient.from_config(cfg)

        assert created == {"api_key": "test-key"}
        assert client.model == "gemini-3-pro-image-preview"

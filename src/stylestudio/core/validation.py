"""Validation utilities for Style Studio inputs.

The composer and the Gemini client never re-check their inputs.  Everything a
caller must guarantee before a request is issued is checked here, and every
failure is reported as a :class:`ValidationError` whose message can be shown
to the user as-is.
"""

import io
import logging

from PIL import Image, UnidentifiedImageError

from .models import GenerationOptions, SourceImage, Theme
from .prompt_library import get_concepts

logger = logging.getLogger(__name__)

# Pillow format name -> MIME type for the uploads the studio accepts.
ACCEPTED_IMAGE_FORMATS = {
    "PNG": "image/png",
    "JPEG": "image/jpeg",
}

MISSING_COUPLE_IMAGES = "Vui lòng tải đủ 2 ảnh (Người 1 và Người 2) cho chế độ cặp đôi."
MISSING_PRIMARY_IMAGE = "Vui lòng tải ảnh gốc lên trước."
MISSING_CUSTOM_PROMPT = "Vui lòng nhập mô tả cho ảnh bạn muốn tạo."


class ValidationError(Exception):
    """User-friendly validation error.

    This exception is raised when user input fails validation.
    The message is intended to be displayed directly to the user.
    """

    pass


class UnsupportedImageError(ValidationError):
    """Uploaded bytes are not a PNG or JPEG image."""

    pass


class ImageTooLargeError(ValidationError):
    """Uploaded image exceeds the configured size limit."""

    pass


def validate_options(options: GenerationOptions) -> None:
    """Validate the option snapshot on its own.

    Args:
        options: Options to validate

    Raises:
        ValidationError: If custom mode has no description or the concept does
            not belong to the selected theme
    """
    if options.is_custom and (not options.custom_prompt or not options.custom_prompt.strip()):
        raise ValidationError(MISSING_CUSTOM_PROMPT)

    # For the custom theme the only member is the placeholder caption.
    if options.concept not in get_concepts(options.theme):
        raise ValidationError(
            f"Concept không thuộc chủ đề '{options.theme.value}': {options.concept}"
        )


def validate_request(
    options: GenerationOptions,
    primary: SourceImage | None,
    secondary: SourceImage | None = None,
) -> None:
    """Validate everything required before a generation request is issued.

    Image checks come first so the user is asked for the photographs before
    being asked for a description, matching the order of the studio form.

    Args:
        options: Options for the request
        primary: First uploaded image, if any
        secondary: Second uploaded image, if any (couple mode only)

    Raises:
        ValidationError: If a precondition is not met
    """
    if options.theme is Theme.CHRISTMAS_COUPLE:
        if primary is None or secondary is None:
            raise ValidationError(MISSING_COUPLE_IMAGES)
    elif primary is None:
        raise ValidationError(MISSING_PRIMARY_IMAGE)

    validate_options(options)


def load_source_image(data: bytes, max_bytes: int | None = None) -> SourceImage:
    """Check uploaded bytes and wrap them as a :class:`SourceImage`.

    The MIME type is derived from the decoded image rather than trusted from
    the client.

    Args:
        data: Raw uploaded file content
        max_bytes: Optional size limit

    Returns:
        SourceImage carrying the original bytes

    Raises:
        ImageTooLargeError: If *data* exceeds *max_bytes*
        UnsupportedImageError: If *data* is empty, not an image, or not PNG/JPEG
    """
    if not data:
        raise UnsupportedImageError("Tệp tải lên trống.")

    if max_bytes is not None and len(data) > max_bytes:
        raise ImageTooLargeError(
            f"Ảnh quá lớn ({len(data)} bytes). Tối đa {max_bytes} bytes."
        )

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError) as e:
        logger.warning(f"Rejected upload that is not a readable image: {e}")
        raise UnsupportedImageError("Tệp tải lên không phải là ảnh hợp lệ.") from e

    mime_type = ACCEPTED_IMAGE_FORMATS.get(image_format or "")
    if mime_type is None:
        raise UnsupportedImageError(
            f"Định dạng ảnh {image_format} không được hỗ trợ. Chỉ chấp nhận PNG hoặc JPEG."
        )

    return SourceImage(data=data, mime_type=mime_type)

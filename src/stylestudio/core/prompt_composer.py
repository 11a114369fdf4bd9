"""Prompt composition for the Style Studio.

The composer turns a :class:`~stylestudio.core.models.GenerationOptions`
snapshot into the single natural-language instruction sent to Gemini
alongside the source image(s).  It is a pure function: the same options and
mode always produce byte-identical text.

Template Selection
------------------
Exactly one base template is used per call, chosen in this precedence:

1. **custom** - ``theme == custom``; the user's free text *is* the brief.
2. **couple** - two source images were supplied.
3. **single** - everything else.

Prompt Structure::

    [Base template: custom | couple | single]

    Style Details: (lighting, camera, quality)

    [CRITICAL INSTRUCTION: identity preservation]   <- face_consistency only

    - Texture: ...                                   <- Ultra quality only

    Ensure the image is not a cartoon ...

The fixed clauses below (the midriff wardrobe constraint, the ultra-luxury
register, the camera description) are product constants.  Their wording is
part of the output contract, including the indentation carried over from the
multi-line templates the studio has always sent.

Usage
-----
::

    prompt = compose(options, is_couple=False)
"""

from __future__ import annotations

from collections.abc import Callable

from stylestudio.core.models import GenerationOptions, Quality

# ---------------------------------------------------------------------------
# Fixed sections appended after the base template.
# ---------------------------------------------------------------------------

_STYLE_BLOCK = (
    "\n"
    "    Style Details:\n"
    "    - Lighting: Cinematic, soft, professional studio lighting or atmospheric "
    "natural light matching the concept.\n"
    "    - Camera: High-end DSLR, 85mm lens, f/1.8 aperture, sharp focus on eyes, "
    "bokeh background.\n"
    "    - Quality: 8k resolution, highly detailed, HDR, masterpiece.\n"
    "    "
)

_COUPLE_IDENTITY_CLAUSE = (
    "\n"
    "    CRITICAL INSTRUCTION: Maintain the facial features and identity of BOTH "
    "subjects from the input images. The first person in the output should resemble "
    "the first input image, and the second person should resemble the second input image."
)

_SINGLE_IDENTITY_CLAUSE = (
    "\n"
    "    CRITICAL INSTRUCTION: Maintain the facial features, identity, and expression "
    "of the person in the source image. The output person MUST look exactly like the "
    "input person, but wearing the clothes and in the environment described in the concept."
)

_ULTRA_TEXTURE_CLAUSE = (
    "\n"
    "    - Texture: Ultra-realistic skin texture, fabric details, and environmental depth."
)

_CLOSING_DIRECTIVE = (
    "\n"
    "    Ensure the image is not a cartoon, not a drawing, but a real photograph."
)


# ---------------------------------------------------------------------------
# Base templates.
# ---------------------------------------------------------------------------


def _additional_instructions(options: GenerationOptions) -> str:
    # The line is always present in the scaffold; it is simply empty when the
    # user gave no extra text.
    if options.custom_prompt:
        return f"Additional Instructions: {options.custom_prompt}"
    return ""


def _custom_template(options: GenerationOptions) -> str:
    return (
        "Transform this input image into a premium photorealistic image based on the "
        "following user description:\n"
        "        \n"
        f"        User Description: {options.custom_prompt or ''}\n"
        "        \n"
        "        Subject Aesthetics:\n"
        "        - Maintain the identity and facial features of the subject in the input image.\n"
        "        - Ensure the result is a realistic photograph, not an illustration.\n"
        "        "
    )


def _couple_template(options: GenerationOptions) -> str:
    return (
        "Transform these TWO input images into a premium photorealistic COUPLE portrait "
        "with the following style:\n"
        "    \n"
        f"    Theme: {options.theme.token}\n"
        f"    Concept: {options.concept}\n"
        f"    {_additional_instructions(options)}\n"
        "    \n"
        "    Subject Aesthetics:\n"
        "    - The image must feature TWO people corresponding to the two input images.\n"
        "    - Posing: The couple must strike a romantic, high-fashion, or natural pose "
        "based on the concept. Interactions should be genuine (holding hands, looking at "
        "each other, leaning in, hugging).\n"
        "    - Outfit: Matching or coordinated outfits as described in the concept.\n"
        "    - Clothing Value: Ultra-luxury, high-end fabrics, detailed textures.\n"
        "    - Composition: Balanced composition focusing on the connection between the "
        "two subjects.\n"
        "    "
    )


def _single_template(options: GenerationOptions) -> str:
    return (
        "Transform this image into a premium photorealistic portrait with the following "
        "style:\n"
        "    \n"
        f"    Theme: {options.theme.token}\n"
        f"    Concept: {options.concept}\n"
        f"    {_additional_instructions(options)}\n"
        "    \n"
        "    Subject Aesthetics:\n"
        "    - Body: The model must have a slim, high-fashion figure with a defined "
        "waistline.\n"
        "    - Posing: The model must strike a world-class, A-list supermodel pose. The pose "
        "should be DYNAMIC, ELEGANT, FLUID, and CONFIDENT.\n"
        "    - Outfit Constraint: The outfit must be modest around the waist; absolutely NO "
        "exposed navel or midriff.\n"
        '    - Clothing Value: The outfit must scream "ULTRA-LUXURY" and "BILLIONAIRE STYLE".\n'
        "    "
    )


def _select_template(
    options: GenerationOptions, is_couple: bool
) -> Callable[[GenerationOptions], str]:
    """Pick the base template builder; custom wins over couple, couple over single."""
    if options.is_custom:
        return _custom_template
    if is_couple:
        return _couple_template
    return _single_template


def compose(options: GenerationOptions, is_couple: bool) -> str:
    """Compose the full instruction text for one generation request.

    Args:
        options: The user's option snapshot.  Not validated here; callers are
            expected to have checked preconditions already.
        is_couple: ``True`` when a second source image accompanies the request.

    Returns:
        The composed prompt.  Sections are concatenated in a fixed order:
        base template, style block, identity directive (optional), Ultra
        texture clause (optional), closing directive.
    """
    template = _select_template(options, is_couple)
    parts: list[str] = [template(options), _STYLE_BLOCK]

    if options.face_consistency:
        # The couple wording keys each subject to its own input image.  Custom
        # mode with two images still counts as a couple for this clause.
        parts.append(_COUPLE_IDENTITY_CLAUSE if is_couple else _SINGLE_IDENTITY_CLAUSE)

    # Standard and High contribute nothing beyond the base template.
    if options.quality is Quality.ULTRA:
        parts.append(_ULTRA_TEXTURE_CLAUSE)

    parts.append(_CLOSING_DIRECTIVE)
    return "".join(parts)

"""Language code mapping utilities."""

import logging
from typing import Any

from translate_prompts.models.schema import Language

logger = logging.getLogger(__name__)

# ISO 639-1 code to the display name embedded in prompts
LANGUAGE_CODE_TO_NAME = {
    "zh": "中文",
    "en": "英文",
}

# Name used when a polish tag is not recognized
FALLBACK_LANGUAGE_NAME = LANGUAGE_CODE_TO_NAME[Language.EN.value]


def resolve_language_name(lang: Any, *, strict: bool = False) -> str:
    """Resolve a polish language tag to its display name.

    Only the exact tags "zh" and "en" (or the matching ``Language`` members)
    are recognized. Anything else resolves to English and logs a warning,
    unless ``strict`` is set.

    Args:
        lang: Language tag
        strict: Raise instead of falling back

    Returns:
        "中文" for "zh", "英文" otherwise

    Raises:
        ValueError: If strict is True and the tag is not recognized
    """
    code = lang.value if isinstance(lang, Language) else lang

    if isinstance(code, str) and code in LANGUAGE_CODE_TO_NAME:
        return LANGUAGE_CODE_TO_NAME[code]

    if strict:
        raise ValueError(
            f"Unsupported language tag: {lang!r}. "
            f"Supported: {', '.join(LANGUAGE_CODE_TO_NAME.keys())}"
        )

    logger.warning(
        f"Unrecognized language tag {lang!r}, falling back to {FALLBACK_LANGUAGE_NAME}",
        extra={"language_tag": repr(lang)},
    )
    return FALLBACK_LANGUAGE_NAME

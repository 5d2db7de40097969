"""Route a PromptRequest to the matching prompt builder."""

import logging

from translate_prompts.models.schema import PromptKind, PromptRequest
from translate_prompts.prompts.chinese_to_english import build_chinese_to_english_prompt
from translate_prompts.prompts.english_to_chinese import build_english_to_chinese_prompt
from translate_prompts.prompts.polish import build_polish_prompt

logger = logging.getLogger(__name__)


def build_prompt(request: PromptRequest, *, strict: bool = False) -> str:
    """Build the prompt described by a request.

    Args:
        request: Validated prompt request
        strict: Passed through to the polish builder

    Returns:
        Formatted prompt string
    """
    logger.debug(
        f"Building prompt: kind={request.kind.value}, text_length={len(request.text)}",
        extra={"kind": request.kind.value, "text_length": len(request.text)},
    )

    if request.kind == PromptKind.CHINESE_TO_ENGLISH:
        return build_chinese_to_english_prompt(request.text)
    if request.kind == PromptKind.ENGLISH_TO_CHINESE:
        return build_english_to_chinese_prompt(request.text)
    return build_polish_prompt(request.text, request.lang, strict=strict)

"""Prompts sent to the AI service for translation and polishing.

This package contains every prompt template used by the translator:
- chinese_to_english.py: Chinese → English translation (JSON response)
- english_to_chinese.py: English → Chinese translation (JSON response)
- polish.py: Chinese or English text polishing (plain-text response)
- dispatch.py: Build any of the above from a PromptRequest
"""

from .chinese_to_english import (
    CHINESE_TO_ENGLISH_PROMPT_TEMPLATE,
    build_chinese_to_english_prompt,
)
from .dispatch import build_prompt
from .english_to_chinese import (
    ENGLISH_TO_CHINESE_PROMPT_TEMPLATE,
    build_english_to_chinese_prompt,
)
from .polish import POLISH_PROMPT_TEMPLATE, build_polish_prompt

__all__ = [
    "CHINESE_TO_ENGLISH_PROMPT_TEMPLATE",
    "ENGLISH_TO_CHINESE_PROMPT_TEMPLATE",
    "POLISH_PROMPT_TEMPLATE",
    "build_chinese_to_english_prompt",
    "build_english_to_chinese_prompt",
    "build_polish_prompt",
    "build_prompt",
]

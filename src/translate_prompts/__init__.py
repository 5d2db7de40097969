"""Prompt builders for Chinese/English translation and text polishing."""

from translate_prompts.prompts import (
    build_chinese_to_english_prompt,
    build_english_to_chinese_prompt,
    build_polish_prompt,
)

__version__ = "0.1.0"

__all__ = [
    "build_chinese_to_english_prompt",
    "build_english_to_chinese_prompt",
    "build_polish_prompt",
]

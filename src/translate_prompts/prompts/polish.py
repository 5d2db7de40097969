"""Prompt for polishing Chinese or English text.

Unlike the translation prompts, the model is asked for plain text only.
"""

from typing import Union

from translate_prompts.models.schema import Language
from translate_prompts.utils.language_utils import resolve_language_name


POLISH_PROMPT_TEMPLATE = """请对以下{lang_name}文本进行润色，以易于理解但保留适当专业性的风格重写。

要润色的内容: {text}

要求:
1. 保持原文的核心含义和专业性
2. 使表达更清晰、流畅、易懂
3. 改善语法和用词的准确性
4. 保持适当的语气（正式/非正式根据原文判断）
5. 仅返回润色后的文本，不要添加任何其他文字或解释
6. 不要使用markdown代码块，直接返回纯文本

直接返回润色后的文本。"""


def build_polish_prompt(
    text: str,
    lang: Union[Language, str],
    *,
    strict: bool = False,
) -> str:
    """Build the text polishing prompt.

    Args:
        text: Text to polish (embedded verbatim)
        lang: Language of the text, "zh" or "en"
        strict: Raise on an unrecognized tag instead of falling back to English

    Returns:
        Formatted prompt string

    Raises:
        ValueError: If strict is True and lang is not a supported tag
    """
    lang_name = resolve_language_name(lang, strict=strict)
    return POLISH_PROMPT_TEMPLATE.format(lang_name=lang_name, text=text)

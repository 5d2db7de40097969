"""Unit tests for the Chinese/English translation prompts."""

import pytest

from translate_prompts.prompts import (
    CHINESE_TO_ENGLISH_PROMPT_TEMPLATE,
    ENGLISH_TO_CHINESE_PROMPT_TEMPLATE,
    build_chinese_to_english_prompt,
    build_english_to_chinese_prompt,
)

JSON_FIELDS = ['"translation"', '"phonetic"', '"definitions"', '"examples"']

TRICKY_INPUTS = [
    "",
    "你好",
    'He said "hi"',
    "{text} and {0} and {{braces}}",
    "line one\nline two\n",
    "%s %(name)s $var",
]

BUILDERS = [build_chinese_to_english_prompt, build_english_to_chinese_prompt]


class TestChineseToEnglishPrompt:
    """Tests for the Chinese → English prompt."""

    def test_hello_scenario(self):
        """Test the prompt for a simple greeting."""
        prompt = build_chinese_to_english_prompt("你好")

        assert prompt.startswith("请将以下中文翻译成英文")
        assert "你好" in prompt
        assert "translation" in prompt

    def test_text_follows_label(self):
        """Test the input text is placed after the content label."""
        prompt = build_chinese_to_english_prompt("银行")
        assert "要翻译的内容: 银行\n" in prompt

    def test_requests_english_fields(self):
        """Test the JSON example asks for English output and US IPA."""
        prompt = build_chinese_to_english_prompt("学习")

        assert '"translation": "英文翻译"' in prompt
        assert '"phonetic": "美式音标(IPA格式)"' in prompt
        assert "/ˈhɛloʊ/" in prompt
        assert "提供3-5个英文释义" in prompt
        assert "提供3-5个英文例句" in prompt

    def test_no_code_fence_instruction(self):
        """Test the prompt ends by forbidding markdown code blocks."""
        prompt = build_chinese_to_english_prompt("学习")
        assert prompt.endswith("直接返回JSON，不要使用markdown代码块。")

    def test_json_example_braces_rendered(self):
        """Test escaped template braces render as single braces."""
        prompt = build_chinese_to_english_prompt("学习")

        assert "\n{\n" in prompt
        assert "\n}\n" in prompt
        assert "{{" not in prompt

    def test_template_has_single_placeholder(self):
        """Test the template only interpolates the input text."""
        assert CHINESE_TO_ENGLISH_PROMPT_TEMPLATE.count("{text}") == 1


class TestEnglishToChinesePrompt:
    """Tests for the English → Chinese prompt."""

    def test_starts_with_instruction(self):
        """Test the prompt opens with the English → Chinese instruction."""
        prompt = build_english_to_chinese_prompt("hello")

        assert prompt.startswith("请将以下英文翻译成中文")
        assert "要翻译的内容: hello\n" in prompt

    def test_requests_chinese_translation_english_extras(self):
        """Test translation is Chinese while definitions/examples stay English."""
        prompt = build_english_to_chinese_prompt("bank")

        assert '"translation": "中文翻译"' in prompt
        assert '"phonetic": "英文原文的美式音标(IPA格式)"' in prompt
        assert "英文释义(保持英文)" in prompt
        assert "英文例句(保持英文)" in prompt

    def test_template_has_single_placeholder(self):
        """Test the template only interpolates the input text."""
        assert ENGLISH_TO_CHINESE_PROMPT_TEMPLATE.count("{text}") == 1


class TestTranslationPromptProperties:
    """Properties shared by both translation prompts."""

    @pytest.mark.parametrize("builder", BUILDERS)
    @pytest.mark.parametrize("text", TRICKY_INPUTS)
    def test_contains_text_and_fields(self, builder, text):
        """Test input is embedded verbatim alongside every JSON field."""
        prompt = builder(text)

        assert text in prompt
        for field in JSON_FIELDS:
            assert field in prompt

    @pytest.mark.parametrize("builder", BUILDERS)
    def test_deterministic(self, builder):
        """Test identical input gives byte-identical output."""
        assert builder("再见") == builder("再见")

    @pytest.mark.parametrize("builder", BUILDERS)
    def test_empty_input(self, builder):
        """Test empty input still renders the full instruction."""
        prompt = builder("")

        assert prompt
        assert "要翻译的内容: \n" in prompt

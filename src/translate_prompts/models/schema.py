"""Pydantic models describing a prompt request.

The builders themselves take plain strings; these models are the typed
surface used by the dispatcher and the CLI.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ============================================================================
# Enums
# ============================================================================


class Language(str, Enum):
    """Language of the text handed to the polish prompt."""

    ZH = "zh"
    EN = "en"


class PromptKind(str, Enum):
    """Which prompt to build."""

    CHINESE_TO_ENGLISH = "zh2en"
    ENGLISH_TO_CHINESE = "en2zh"
    POLISH = "polish"


# ============================================================================
# Requests
# ============================================================================


class PromptRequest(BaseModel):
    """A single prompt to render.

    ``lang`` is only meaningful for polish requests and is required there.
    It is kept as the raw tag; the polish builder decides whether an
    unrecognized tag falls back to English or is rejected.
    Empty ``text`` is accepted; the builders render the full template for it.
    """

    kind: PromptKind = Field(..., description="Prompt to build")
    text: str = Field(..., description="Input text, embedded verbatim")
    lang: Optional[str] = Field(
        None, description="Language tag of the text, \"zh\" or \"en\" (polish only)"
    )

    @field_validator("lang", mode="before")
    @classmethod
    def unwrap_language(cls, v):
        """Store Language members as their plain tag."""
        if isinstance(v, Language):
            return v.value
        return v

    @model_validator(mode="after")
    def validate_lang_for_polish(self) -> "PromptRequest":
        """Require a language for polish requests."""
        if self.kind == PromptKind.POLISH and self.lang is None:
            raise ValueError("lang is required for polish requests")
        return self

"""Pydantic models for prompt requests."""

from .schema import Language, PromptKind, PromptRequest

__all__ = [
    "Language",
    "PromptKind",
    "PromptRequest",
]

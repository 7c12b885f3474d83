"""Zodiac Prompt Generator - descriptive image prompts per zodiac sign."""

__version__ = "0.1.0"

from zodiacprompt.core.config import ZodiacPromptConfig, config
from zodiacprompt.core.prompt_builder import (
    PromptBuilder,
    Selection,
    build_prompt,
    build_prompts_for_all_signs,
    format_copy_all,
)

__all__ = [
    "PromptBuilder",
    "Selection",
    "ZodiacPromptConfig",
    "build_prompt",
    "build_prompts_for_all_signs",
    "config",
    "format_copy_all",
]

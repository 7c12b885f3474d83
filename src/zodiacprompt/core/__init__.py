"""Core prompt generation for the Zodiac Prompt Generator.

Architecture Overview
---------------------
The core is layered leaf-first:

1. **Fragment Tables** (fragments.py):
   - Static gender, tone, theme and zodiac tables
   - Each table has a fixed field set and a guaranteed fallback key

2. **Template Engine** (template.py):
   - ``[token]`` placeholder templates, tokens extracted once
   - Single-pass substitution; unknown tokens are left literally

3. **Prompt Builder** (prompt_builder.py):
   - Resolves a Selection against the tables
   - Renders one prompt, or one per sign in canonical order

4. **Configuration** (config.py):
   - Environment-based settings using Pydantic Settings (ZODIACPROMPT_ prefix)

Usage Example
-------------
    from zodiacprompt.core import Selection, build_prompt

    prompt = build_prompt(Selection(gender="female", tone="dark", theme="winter", sign="Aries"))
"""

from zodiacprompt.core.config import ZodiacPromptConfig, config
from zodiacprompt.core.fragments import (
    ALL_TABLES,
    SIGNS,
    FragmentTable,
    FragmentTableError,
    MissingFallbackError,
    validate_tables,
)
from zodiacprompt.core.prompt_builder import (
    PromptBuilder,
    Selection,
    build_prompt,
    build_prompts_for_all_signs,
    format_copy_all,
    resolve,
)
from zodiacprompt.core.template import TEMPLATES, PromptTemplate, UnknownTemplateError, render

__all__ = [
    "ALL_TABLES",
    "SIGNS",
    "TEMPLATES",
    "FragmentTable",
    "FragmentTableError",
    "MissingFallbackError",
    "PromptBuilder",
    "PromptTemplate",
    "Selection",
    "UnknownTemplateError",
    "ZodiacPromptConfig",
    "build_prompt",
    "build_prompts_for_all_signs",
    "config",
    "format_copy_all",
    "render",
    "resolve",
    "validate_tables",
]

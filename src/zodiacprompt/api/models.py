"""Pydantic request and response models for the Zodiac Prompt API.

Models
------
PromptRequest
    Payload for the ``/api/prompt/*`` endpoints — the form selections plus
    an optional template name.
SignPrompt
    One ``(sign, prompt)`` entry of a batch.
PromptResponse
    Response of ``POST /api/prompt/compile``.
BatchResponse
    Response of ``POST /api/prompt/batch``.
CopyAllResponse
    Response of ``POST /api/prompt/copy-all``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from zodiacprompt.core.prompt_builder import Selection


class PromptRequest(BaseModel):
    """Request body for the prompt endpoints.

    Every key is free text.  Unknown or empty keys are not rejected; they
    resolve to the corresponding table's fallback entry.

    Attributes:
        gender: Gender option key (``female``, ``male``, ``non-binary``).
        tone: Tone option key (e.g. ``dark``).
        theme: Theme option key (e.g. ``winter``).
        sign: Zodiac sign name, or ``"all"`` for one prompt per sign.
        template: Template name (``classic`` or ``rich``).  ``None`` uses
            the configured default.
    """

    gender: str = Field(default="", description="Gender option key.")
    tone: str = Field(default="", description="Tone option key.")
    theme: str = Field(default="", description="Theme option key.")
    sign: str = Field(default="all", description="Zodiac sign name, or 'all'.")
    template: str | None = Field(
        default=None,
        description="Template name; None uses the configured default.",
    )

    def to_selection(self) -> Selection:
        """Convert to the core :class:`Selection` value."""
        return Selection(gender=self.gender, tone=self.tone, theme=self.theme, sign=self.sign)


class SignPrompt(BaseModel):
    """One entry of a batch."""

    sign: str
    prompt: str


class PromptResponse(BaseModel):
    """Response for ``POST /api/prompt/compile``.

    Exactly one of ``prompt`` (single sign) or ``prompts`` (batch) is set.
    """

    template: str
    prompt: str | None = None
    prompts: list[SignPrompt] | None = None


class BatchResponse(BaseModel):
    """Response for ``POST /api/prompt/batch``."""

    template: str
    prompts: list[SignPrompt]


class CopyAllResponse(BaseModel):
    """Response for ``POST /api/prompt/copy-all``."""

    template: str
    text: str

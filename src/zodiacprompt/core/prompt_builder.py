"""Zodiac prompt assembly from form selections.

A :class:`Selection` names one key per category (gender, tone, theme, sign).
The builder resolves each key against its fragment table, falling back to
the table's fallback key when the selection is unknown. It then collects
every resolved field into a token bundle and renders a template with it.

Token Bundle
------------
===========================  ============================================
Token                        Source
===========================  ============================================
``gender_representation``    gender table, ``representation`` field
``tone_<field>``             tone record (atmosphere, lighting, expression)
``theme_<field>``            theme record (clothes, background, elements)
``zodiac_<field>``           zodiac record (persona, iconography, ...)
``Zodiac Sign``              the sign name exactly as requested
===========================  ============================================

Batch Mode
----------
A selection whose sign is ``"all"`` produces one prompt per sign in the
canonical order of :data:`~zodiacprompt.core.fragments.SIGNS`, sharing the
gender, tone and theme. :func:`format_copy_all` joins a batch into the
single block used by the "Copy all" action::

    Aries:
    <prompt>

    Taurus:
    <prompt>

Usage
-----
::

    selection = Selection(gender="female", tone="dark", theme="winter", sign="Aries")
    build_prompt(selection)
    build_prompts_for_all_signs(selection)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from zodiacprompt.core.config import config
from zodiacprompt.core.fragments import (
    GENDER_TABLE,
    SIGNS,
    THEME_TABLE,
    TONE_TABLE,
    ZODIAC_TABLE,
    FragmentTable,
    MissingFallbackError,
    validate_tables,
)
from zodiacprompt.core.template import PromptTemplate, get_template

logger = logging.getLogger(__name__)

ALL_SIGNS = "all"
SIGN_TOKEN = "Zodiac Sign"


@dataclass(frozen=True)
class Selection:
    """The user's current category choices.

    Any field may hold an empty or unrecognised key; resolution falls back
    to the table's fallback key.  ``sign`` may be ``"all"`` for batch mode.
    """

    gender: str = ""
    tone: str = ""
    theme: str = ""
    sign: str = ""

    @property
    def is_batch(self) -> bool:
        return self.sign == ALL_SIGNS


def resolve(table: Mapping[str, Mapping[str, str]], key: str, fallback_key: str) -> Mapping[str, str]:
    """Return ``table[key]`` if present, otherwise ``table[fallback_key]``.

    Args:
        table: Mapping of category key to fragment record.
        key: Requested key (may be empty or unknown).
        fallback_key: Key that must exist in ``table``.

    Returns:
        The stored record, unchanged.

    Raises:
        MissingFallbackError: If ``key`` is absent and so is ``fallback_key``.
    """
    if key in table:
        return table[key]
    if fallback_key not in table:
        raise MissingFallbackError(f"Fallback key {fallback_key!r} missing from table")
    return table[fallback_key]


class PromptBuilder:
    """Resolve selections against fragment tables and render a template.

    Args:
        template: Template used when a call does not supply one.
        gender_table: Table providing ``gender_representation``.
        tone_table: Table providing ``tone_*`` tokens.
        theme_table: Table providing ``theme_*`` tokens.
        zodiac_table: Table providing ``zodiac_*`` tokens.
        signs: Batch order.

    The tables are validated on construction so that a missing fallback key
    surfaces at startup rather than on the first request.
    """

    def __init__(
        self,
        template: PromptTemplate,
        *,
        gender_table: FragmentTable = GENDER_TABLE,
        tone_table: FragmentTable = TONE_TABLE,
        theme_table: FragmentTable = THEME_TABLE,
        zodiac_table: FragmentTable = ZODIAC_TABLE,
        signs: tuple[str, ...] = SIGNS,
    ):
        self.template = template
        self.gender_table = gender_table
        self.tone_table = tone_table
        self.theme_table = theme_table
        self.zodiac_table = zodiac_table
        self.signs = signs
        validate_tables((gender_table, tone_table, theme_table, zodiac_table))

    def build_bundle(self, selection: Selection, sign: str | None = None) -> dict[str, str]:
        """Assemble the token bundle for ``selection``.

        Args:
            selection: Category choices.
            sign: Sign to use instead of ``selection.sign`` (batch mode).

        Returns:
            Mapping of token name to fragment text.
        """
        sign_key = selection.sign if sign is None else sign
        bundle: dict[str, str] = {}

        for table, key in (
            (self.gender_table, selection.gender),
            (self.tone_table, selection.tone),
            (self.theme_table, selection.theme),
            (self.zodiac_table, sign_key),
        ):
            record = table.resolve(key)
            for field in table.fields:
                bundle[f"{table.prefix}_{field}"] = record[field]

        # The literal name is kept even when the record falls back.
        bundle[SIGN_TOKEN] = sign_key
        return bundle

    def build_prompt(self, selection: Selection, template: PromptTemplate | None = None) -> str:
        """Render a single prompt for ``selection.sign``."""
        return (template or self.template).render(self.build_bundle(selection))

    def build_prompts_for_all_signs(
        self, selection: Selection, template: PromptTemplate | None = None
    ) -> list[tuple[str, str]]:
        """Render one prompt per sign, in canonical order.

        ``selection.sign`` is ignored.
        """
        template = template or self.template
        results = [
            (sign, template.render(self.build_bundle(selection, sign=sign))) for sign in self.signs
        ]
        logger.debug(
            f"Built {len(results)} prompts (gender={selection.gender!r}, "
            f"tone={selection.tone!r}, theme={selection.theme!r}, template={template.name!r})"
        )
        return results


def format_copy_all(pairs: list[tuple[str, str]]) -> str:
    """Join ``(sign, prompt)`` pairs into the "Copy all" text block."""
    return "\n\n".join(f"{sign}:\n{prompt}" for sign, prompt in pairs)


# Process-wide builder used by the module-level helpers below.
default_builder = PromptBuilder(get_template(config.default_template))


def build_prompt(selection: Selection, template: PromptTemplate | None = None) -> str:
    """Render a single prompt with the default builder."""
    return default_builder.build_prompt(selection, template)


def build_prompts_for_all_signs(
    selection: Selection, template: PromptTemplate | None = None
) -> list[tuple[str, str]]:
    """Render the twelve-sign batch with the default builder."""
    return default_builder.build_prompts_for_all_signs(selection, template)

"""Placeholder template rendering for zodiac prompts.

A template is plain text containing placeholder tokens of the form
``[token_name]``.  A token may appear any number of times.

Token Names
-----------
A token name is one or more characters other than ``[``, ``]`` and newline.
Spaces are allowed (``[Zodiac Sign]``).  Empty brackets ``[]`` and bracket
text spanning a newline are not tokens: they are copied through unchanged,
and bundle keys that are empty or contain brackets or newlines never match.

Rendering Rules
---------------
- Every occurrence of every token present in the bundle is replaced with
  the bundle value.
- Tokens absent from the bundle are left in the output literally, brackets
  included.
- Bundle entries that the template never references are ignored.
- Rendering is a single left-to-right scan.  Substituted text is never
  rescanned, so a value that happens to contain ``[other_token]`` is copied
  through verbatim and the result does not depend on bundle ordering.

Usage
-----
::

    template = PromptTemplate("portrait of a [gender_representation], [tone_lighting] lighting")
    template.tokens
    # ['gender_representation', 'tone_lighting']
    template.render({"gender_representation": "woman"})
    # 'portrait of a woman, [tone_lighting] lighting'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(r"\[([^\[\]\n]+)\]")


class UnknownTemplateError(KeyError):
    """Raised when a template name is not in :data:`TEMPLATES`."""

    pass


class PromptTemplate:
    """A template string with its token list extracted once up front.

    Args:
        text: Template text containing ``[token]`` placeholders.
        name: Optional registry name, used in log messages.
    """

    def __init__(self, text: str, name: str = ""):
        self.text = text
        self.name = name
        # Ordered, de-duplicated token names
        self.tokens: list[str] = list(dict.fromkeys(TOKEN_PATTERN.findall(text)))

    def __repr__(self) -> str:
        return f"PromptTemplate(name={self.name!r}, tokens={len(self.tokens)})"

    def missing_tokens(self, bundle: Mapping[str, str]) -> list[str]:
        """Return the tokens that ``bundle`` does not supply."""
        return [token for token in self.tokens if token not in bundle]

    def render(self, bundle: Mapping[str, str]) -> str:
        """Substitute every supplied token in a single pass.

        Args:
            bundle: Mapping of token name to replacement text.

        Returns:
            The rendered text.  Unsupplied tokens remain as literal
            ``[token]`` text.
        """
        missing = self.missing_tokens(bundle)
        if missing:
            logger.debug(f"Template {self.name or '<inline>'} left unresolved: {missing}")

        def _substitute(match: re.Match) -> str:
            value = bundle.get(match.group(1))
            return match.group(0) if value is None else value

        return TOKEN_PATTERN.sub(_substitute, self.text)


def render(template: str | PromptTemplate, bundle: Mapping[str, str]) -> str:
    """Render ``template`` with ``bundle``.

    Args:
        template: Template text or a prepared :class:`PromptTemplate`.
        bundle: Mapping of token name to replacement text.

    Returns:
        The rendered text.
    """
    if not isinstance(template, PromptTemplate):
        template = PromptTemplate(template)
    return template.render(bundle)


# ---------------------------------------------------------------------------
# Shipped templates.
# ---------------------------------------------------------------------------

CLASSIC_TEMPLATE = PromptTemplate(
    "mystical fantasy portrait of a beautiful [gender_representation] representing [Zodiac Sign], "
    "[theme_clothes], [theme_background] background, [zodiac_in_background], glowing zodiac symbol, "
    "[tone_atmosphere] atmosphere, [tone_expression] facial expression, highly detailed digital "
    "illustration, [tone_lighting] lighting, [theme_elements] elements, [zodiac_iconography], "
    "ethereal, fantasy art, 4k, ultra detailed",
    name="classic",
)

# Repeats the sign name and persona cues so a set of twelve renders reads as
# one consistent character series.
RICH_TEMPLATE = PromptTemplate(
    "mystical fantasy portrait of a beautiful [gender_representation] embodying [Zodiac Sign], "
    "[zodiac_persona], wearing [theme_clothes], holding [zodiac_prop], "
    "[theme_background] background, [zodiac_in_background], glowing [Zodiac Sign] zodiac symbol, "
    "[tone_atmosphere] atmosphere, [tone_expression] facial expression, [tone_lighting] lighting, "
    "[theme_elements] elements, [zodiac_iconography], consistent [Zodiac Sign] character design, "
    "highly detailed digital illustration, ethereal, fantasy art, 4k, ultra detailed",
    name="rich",
)

TEMPLATES: dict[str, PromptTemplate] = {
    CLASSIC_TEMPLATE.name: CLASSIC_TEMPLATE,
    RICH_TEMPLATE.name: RICH_TEMPLATE,
}


def get_template(name: str) -> PromptTemplate:
    """Look up a shipped template by name.

    Raises:
        UnknownTemplateError: If ``name`` is not registered.
    """
    try:
        return TEMPLATES[name]
    except KeyError:
        raise UnknownTemplateError(
            f"Unknown template: {name!r} (available: {', '.join(TEMPLATES)})"
        ) from None

"""Static fragment tables for zodiac prompt generation.

Each table maps a category key (a tone name, a theme name, a zodiac sign, a
gender option) to a record of named, prompt-ready text fragments.  The tables
are process-wide constants: they are built once at import time, exposed
through read-only mappings and never mutated afterwards.

Tables
------
========  ==========  ==============================================  ===========
Table     Prefix      Fields                                          Fallback
========  ==========  ==============================================  ===========
gender    ``gender``  representation                                  female
tone      ``tone``    atmosphere, lighting, expression                neutral
theme     ``theme``   clothes, background, elements                   space
zodiac    ``zodiac``  persona, iconography, in_background, prop       Aries
========  ==========  ==============================================  ===========

Every field of a resolved record becomes a template token named
``<prefix>_<field>`` (for example ``[tone_atmosphere]``).

Authoring Rules
---------------
- Every record in a table has exactly the table's field set.
- Every table contains its fallback key.
- Fragment text never contains square brackets, so it can never be mistaken
  for a template token.

:func:`validate_tables` checks the first two rules and is called at startup;
the third is covered by the test suite.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

logger = logging.getLogger(__name__)


class FragmentTableError(Exception):
    """A static fragment table violates its authoring rules.

    This is a configuration bug in the shipped data, not a user error, and
    is never recovered from.
    """

    pass


class MissingFallbackError(FragmentTableError, KeyError):
    """A table does not contain its documented fallback key."""

    pass


# Canonical presentation order for batch generation.
SIGNS: tuple[str, ...] = (
    "Aries",
    "Taurus",
    "Gemini",
    "Cancer",
    "Leo",
    "Virgo",
    "Libra",
    "Scorpio",
    "Sagittarius",
    "Capricorn",
    "Aquarius",
    "Pisces",
)


@dataclass(frozen=True, eq=False)
class FragmentTable:
    """An immutable category table with a guaranteed fallback record.

    Attributes:
        name: Human-readable table name (used in log and error messages).
        prefix: Token prefix for the table's fields.
        fields: The fixed field names every record must carry.
        entries: Read-only mapping of category key to fragment record.
        fallback_key: Key used when a requested key is not in ``entries``.
    """

    name: str
    prefix: str
    fields: tuple[str, ...]
    entries: Mapping[str, Mapping[str, str]]
    fallback_key: str

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Return the category keys in authoring order."""
        return list(self.entries)

    def tokens(self) -> list[str]:
        """Return the token names this table contributes to a bundle."""
        return [f"{self.prefix}_{field}" for field in self.fields]

    def resolve(self, key: str) -> Mapping[str, str]:
        """Return the record for ``key``, or the fallback record if absent.

        Args:
            key: Requested category key.  Empty or unrecognised keys are
                not errors.

        Returns:
            The stored fragment record.

        Raises:
            MissingFallbackError: If ``key`` is absent and the fallback key
                is missing too.
        """
        record = self.entries.get(key)
        if record is not None:
            return record
        logger.debug(f"{self.name}: unknown key {key!r}, using fallback {self.fallback_key!r}")
        try:
            return self.entries[self.fallback_key]
        except KeyError:
            raise MissingFallbackError(
                f"{self.name} table has no fallback key {self.fallback_key!r}"
            ) from None

    def resolve_key(self, key: str) -> str:
        """Return ``key`` if present, otherwise the fallback key."""
        return key if key in self.entries else self.fallback_key


def _freeze(entries: dict[str, dict[str, str]]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({key: MappingProxyType(dict(record)) for key, record in entries.items()})


GENDER_TABLE = FragmentTable(
    name="gender",
    prefix="gender",
    fields=("representation",),
    entries=_freeze(
        {
            "female": {"representation": "woman"},
            "male": {"representation": "man"},
            "non-binary": {"representation": "androgynous deity"},
        }
    ),
    fallback_key="female",
)


TONE_TABLE = FragmentTable(
    name="tone",
    prefix="tone",
    fields=("atmosphere", "lighting", "expression"),
    entries=_freeze(
        {
            "dark": {
                "atmosphere": "ominous, mysterious, arcane",
                "lighting": "low-key cinematic, deep shadows, high contrast",
                "expression": "piercing, enigmatic gaze with a subtle smirk",
            },
            "light": {
                "atmosphere": "radiant, uplifting, serene",
                "lighting": "bright soft glow, high-key, gentle bloom",
                "expression": "soft, kind smile with bright eyes",
            },
            "happy": {
                "atmosphere": "joyful, warm, celebratory",
                "lighting": "golden hour glow, soft rim light",
                "expression": "wide warm smile, cheerful sparkling eyes",
            },
            "sad": {
                "atmosphere": "melancholic, quiet, reflective",
                "lighting": "cool muted light, soft overcast",
                "expression": "downcast eyes, gentle sorrowful expression",
            },
            "neutral": {
                "atmosphere": "calm, balanced, composed",
                "lighting": "natural studio light, even diffusion",
                "expression": "serene neutral expression, relaxed features",
            },
            "angry": {
                "atmosphere": "fierce, intense, volatile",
                "lighting": "dramatic hard light, sharp highlights",
                "expression": "furrowed brows, intense glare, clenched jaw",
            },
            "fear": {
                "atmosphere": "tense, eerie, unsettling",
                "lighting": "dim moody light, foggy beams, chiaroscuro",
                "expression": "wide anxious eyes, tense lips, startled look",
            },
            "surprised": {
                "atmosphere": "electric, vivid, sudden",
                "lighting": "sparkling highlights, dynamic accent lighting",
                "expression": "raised brows, slightly parted lips, astonished eyes",
            },
            "disgusted": {
                "atmosphere": "toxic, corrupted, uneasy",
                "lighting": "sickly greenish cast, harsh underlight",
                "expression": "subtle grimace, narrowed eyes, curled lip",
            },
            "anticipating": {
                "atmosphere": "charged, expectant, suspenseful",
                "lighting": "glowing backlight, dramatic gradient light",
                "expression": "focused intent stare, poised half-smile, alert eyes",
            },
        }
    ),
    fallback_key="neutral",
)


THEME_TABLE = FragmentTable(
    name="theme",
    prefix="theme",
    fields=("clothes", "background", "elements"),
    entries=_freeze(
        {
            "winter": {
                "clothes": "fur-trimmed royal cloak, icy blue silk gown",
                "background": "snowy aurora night sky with drifting frost",
                "elements": "crystalline ice filigree, snowflakes, silver ornaments",
            },
            "spring": {
                "clothes": "floral-embroidered flowing dress, pastel ribbons",
                "background": "blooming meadow with soft sunrise haze",
                "elements": "petals, vines, dew-kissed gold accents",
            },
            "summer": {
                "clothes": "sunlit golden gown, airy sheer cape",
                "background": "bright coastal horizon with shimmering heat haze",
                "elements": "sun motifs, warm glints, sparkling dust",
            },
            "fall": {
                "clothes": "velvet dress in amber tones, leaf-patterned mantle",
                "background": "autumn forest with swirling golden leaves",
                "elements": "maple leaves, bronze filigree, harvest glow",
            },
            "Christmas": {
                "clothes": "festive regal dress with red-and-gold trim, fur-lined cape",
                "background": "snowy village lights and twinkling winter sky",
                "elements": "holly, ornaments, warm fairy lights, gold ribbons",
            },
            "Easter": {
                "clothes": "soft pastel ceremonial gown, delicate lace veil",
                "background": "spring garden with bright morning light",
                "elements": "painted eggs, lilies, gentle sparkles, gold accents",
            },
            "jungle": {
                "clothes": "emerald ceremonial dress, leaf-like shoulder pieces",
                "background": "lush rainforest with sunbeams through canopy",
                "elements": "vines, exotic flowers, mist, carved gold totems",
            },
            "space": {
                "clothes": "starlit royal dress with nebula patterns, celestial cape",
                "background": "deep nebula with distant planets and starfields",
                "elements": "orbit rings, constellations, cosmic dust, golden astrolabe motifs",
            },
            "mountain": {
                "clothes": "rugged regal cloak, slate-and-silver embroidered gown",
                "background": "majestic peaks with thin clouds and cold light",
                "elements": "stone runes, wind trails, glinting crystalline accents",
            },
            "clouds": {
                "clothes": "airy flowing dress, cloudlike chiffon layers",
                "background": "vast sky of billowing clouds and sun rays",
                "elements": "feathered motifs, pearlescent glow, soft golden filigree",
            },
            "city": {
                "clothes": "modern royal couture dress, sleek metallic embroidery",
                "background": "neon-lit skyline with reflective wet streets",
                "elements": "holographic accents, geometric gold patterns, glowing signage bokeh",
            },
            "grass": {
                "clothes": "verdant gown with botanical embroidery, woven crown",
                "background": "open green fields with gentle breeze and light",
                "elements": "wildflowers, pollen glow, golden nature filigree",
            },
            "future": {
                "clothes": "futuristic ceremonial suit-dress, chrome and luminous seams",
                "background": "sleek sci-fi metropolis with holograms and light trails",
                "elements": "holographic glyphs, circuitry filigree, radiant energy lines",
            },
            "middle ages": {
                "clothes": "medieval royal gown with brocade, ornate cape and corset",
                "background": "stone castle hall with banners and torchlight",
                "elements": "heraldic emblems, gilded armor accents, carved golden trim",
            },
            "ancient": {
                "clothes": "ancient ceremonial robe with gold jewelry and linen folds",
                "background": "temple ruins with carved pillars and sacred incense haze",
                "elements": "hieroglyph-like symbols, sun discs, antique gold relics",
            },
        }
    ),
    fallback_key="space",
)


ZODIAC_TABLE = FragmentTable(
    name="zodiac",
    prefix="zodiac",
    fields=("persona", "iconography", "in_background", "prop"),
    entries=_freeze(
        {
            "Aries": {
                "persona": (
                    "athletic angular face, strong brow ridge, sharp cheekbones, intense forward "
                    "gaze, short windswept hair, subtle cheek scar, bold geometric warpaint accent"
                ),
                "iconography": "ram-horn crown, horn-etched gold filigree, ember accents",
                "in_background": (
                    "oversized Aries glyph halo behind the head; repeating Aries sigil pattern "
                    "faintly across the background; Aries constellation blazing in starlight"
                ),
                "prop": "a flaming ram-horn scepter",
            },
            "Taurus": {
                "persona": (
                    "broad soft jawline, calm heavy-lidded eyes, full eyebrows, thick wavy hair, "
                    "warm grounded expression, faint freckles across nose, earthy gemstone ear-cuffs"
                ),
                "iconography": "bull-horn tiara, earthy gemstones, engraved horn motifs",
                "in_background": (
                    "large Taurus glyph carved in luminous aura; repeating Taurus sigils; "
                    "Taurus constellation forming a glowing ring"
                ),
                "prop": "a jade bull medallion emitting light",
            },
            "Gemini": {
                "persona": (
                    "symmetrical face, bright playful eyes, expressive brows, two-tone hair streak "
                    "or split hairstyle, subtle beauty mark near lip, quick mischievous half-smile"
                ),
                "iconography": "twin mirrored ornaments, dual-pattern embroidery, perfect symmetry",
                "in_background": (
                    "Gemini glyph mirrored twice as a halo motif; repeating twin-glyph pattern; "
                    "Gemini constellation forming a crown"
                ),
                "prop": "a pair of identical crystal mirrors",
            },
            "Cancer": {
                "persona": (
                    "soft rounded features, luminous watery eyes, gentle smile, long flowing hair "
                    "like tide waves, pearly highlight on cheeks, delicate moon-shaped face jewelry"
                ),
                "iconography": "moon-pearl jewelry, crab-like filigree, tidal shimmer",
                "in_background": (
                    "Cancer glyph as glowing lunar halo; repeating Cancer sigils; "
                    "Cancer constellation arcing overhead"
                ),
                "prop": "a pearl moon-chalice with glowing water",
            },
            "Leo": {
                "persona": (
                    "regal high cheekbones, confident chin, fierce catlike eyes, thick voluminous "
                    "hair like a mane, radiant grin, sun-kissed glow, bold gold eyeliner"
                ),
                "iconography": "sunburst diadem, lion-mane collar, regal radiance",
                "in_background": (
                    "huge Leo glyph burning like a sun behind the subject; repeating Leo glyphs as "
                    "faint pattern; Leo constellation shining boldly"
                ),
                "prop": "a radiant sun-disc staff",
            },
            "Virgo": {
                "persona": (
                    "fine delicate features, focused observant eyes, neat brows, smooth braided "
                    "hair crown, subtle freckle cluster on cheek, calm composed expression, "
                    "minimal elegant makeup"
                ),
                "iconography": "wheat-and-vine embroidery, delicate gold vines, maiden motifs",
                "in_background": (
                    "Virgo glyph softly glowing in the background haze; repeating Virgo sigils; "
                    "Virgo constellation drawn in fine starlight"
                ),
                "prop": "a golden wheat-sheaf pendant",
            },
            "Libra": {
                "persona": (
                    "harmonious oval face, balanced proportions, serene gaze, glossy mid-length "
                    "hair, symmetrical earrings, subtle dimple when smiling, refined soft makeup"
                ),
                "iconography": "scales-shaped jewelry, perfectly balanced symmetry, polished gold",
                "in_background": (
                    "Libra glyph as luminous emblem behind the head; repeating Libra glyph "
                    "patterns; Libra constellation forming a balanced arc"
                ),
                "prop": "a hovering pair of golden scales",
            },
            "Scorpio": {
                "persona": (
                    "sharp sculpted cheekbones, piercing narrowed eyes, intense arched brows, "
                    "sleek dark hair, small tattoo-like sigil near temple, subtle smirk, "
                    "dramatic eyeliner"
                ),
                "iconography": "stinger-shaped ornament, dark jeweled accents, subtle venom glow",
                "in_background": (
                    "Scorpio glyph carved as radiant sigil behind the subject; repeating Scorpio "
                    "sigils; Scorpio constellation like a hooked blade"
                ),
                "prop": "a jeweled stinger dagger",
            },
            "Sagittarius": {
                "persona": (
                    "bright adventurous eyes, confident open expression, slightly sun-touched skin "
                    "glow, tousled hair tied back, small nose bridge bandage or mark, playful grin"
                ),
                "iconography": "bow-and-arrow motifs, star-forged arrow charm, dynamic linework",
                "in_background": (
                    "Sagittarius glyph projected across the background; repeating Sagittarius "
                    "glyphs; constellation shaped like a glowing arrow"
                ),
                "prop": "a star-bow with a luminous arrow",
            },
            "Capricorn": {
                "persona": (
                    "mature stoic features, strong nose bridge, steady calculating gaze, neatly "
                    "pulled-back hair, faint forehead crease, minimal smile, polished antique "
                    "jewelry near face"
                ),
                "iconography": "sea-goat crest motifs, antique gold clasps, mountain-wave patterns",
                "in_background": (
                    "Capricorn glyph as a grand sigil halo; repeating Capricorn sigils; "
                    "Capricorn constellation spiraling behind"
                ),
                "prop": "a sea-goat crest banner glowing",
            },
            "Aquarius": {
                "persona": (
                    "unique angular features, curious far-looking eyes, slightly raised brows, "
                    "flowing hair with airy strands, subtle iridescent cheek highlight, "
                    "asymmetrical ear jewelry"
                ),
                "iconography": "water-vessel jewelry, flowing liquid-light ribbons, wave filigree",
                "in_background": (
                    "Aquarius glyph pouring light in the background; repeating Aquarius sigils; "
                    "Aquarius constellation like a streaming river"
                ),
                "prop": "a glowing amphora spilling starlight-water",
            },
            "Pisces": {
                "persona": (
                    "dreamy soft gaze, gentle rounded face, glossy wet-look eyes, long flowing hair "
                    "like underwater ribbons, tiny beauty mark under eye, serene wistful smile"
                ),
                "iconography": "twin fish motifs, swirling water embroidery, pearlescent shimmer",
                "in_background": (
                    "Pisces glyph as luminous seal behind the head; repeating Pisces sigils; "
                    "Pisces constellation as two linked arcs"
                ),
                "prop": "a floating twin-fish orb of light",
            },
        }
    ),
    fallback_key="Aries",
)


ALL_TABLES: tuple[FragmentTable, ...] = (GENDER_TABLE, TONE_TABLE, THEME_TABLE, ZODIAC_TABLE)


def validate_tables(tables: Iterable[FragmentTable] = ALL_TABLES) -> None:
    """Check that every table honours its authoring rules.

    Args:
        tables: Tables to validate.  Defaults to all shipped tables.

    Raises:
        MissingFallbackError: If a table lacks its fallback key.
        FragmentTableError: If a record's field set differs from the table's.
    """
    for table in tables:
        if table.fallback_key not in table.entries:
            logger.error(f"{table.name} table is missing fallback key {table.fallback_key!r}")
            raise MissingFallbackError(
                f"{table.name} table has no fallback key {table.fallback_key!r}"
            )

        expected = set(table.fields)
        for key, record in table.entries.items():
            actual = set(record)
            if actual != expected:
                missing = sorted(expected - actual)
                extra = sorted(actual - expected)
                logger.error(f"{table.name}[{key!r}] schema mismatch: missing={missing} extra={extra}")
                raise FragmentTableError(
                    f"{table.name} record {key!r} has fields {sorted(actual)}, "
                    f"expected {sorted(expected)}"
                )

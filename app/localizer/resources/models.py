"""String resource models.

Defines locales, resolution policy, per-call options and string catalogs.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

_LANGUAGE_PATTERN = re.compile(r"^[A-Za-z]{2,3}$")
_SCRIPT_PATTERN = re.compile(r"^[A-Za-z]{4}$")
_REGION_PATTERN = re.compile(r"^(?:[A-Za-z]{2}|\d{3})$")
_VARIANT_PATTERN = re.compile(r"^[A-Za-z0-9]{1,8}$")


@dataclass(frozen=True)
class Locale:
    """Language identifier with optional script, region and variant.

    Examples: de, fr-FR, zh-Hant-TW, en-US-POSIX.

    Attributes:
        language: Lowercase language code (e.g., "fr").
        region: Uppercase region code, empty when absent.
        script: Title-case script code (e.g., "Hant"), empty when absent.
        variant: Variant subtags joined with "-" (e.g., "POSIX").
    """

    language: str
    region: str = ""
    script: str = ""
    variant: str = ""

    def __str__(self) -> str:
        return "-".join(
            part for part in (self.language, self.script, self.region, self.variant) if part
        )

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale.

        Subtags may be separated by "-" or "_": "fr-FR", "fr_FR", "fr",
        "zh-Hant-TW", "en_US_POSIX".

        Raises:
            ValueError: If locale string is not a language tag.
        """
        parts = re.split(r"[-_]", locale_str.strip())
        if not _LANGUAGE_PATTERN.match(parts[0]):
            raise ValueError(f"Unsupported locale: {locale_str}")

        rest = parts[1:]
        script = ""
        if rest and _SCRIPT_PATTERN.match(rest[0]):
            script = rest.pop(0).title()
        region = ""
        if rest and _REGION_PATTERN.match(rest[0]):
            region = rest.pop(0).upper()
        if not all(_VARIANT_PATTERN.match(part) for part in rest):
            raise ValueError(f"Unsupported locale: {locale_str}")

        return cls(
            language=parts[0].lower(),
            region=region,
            script=script,
            variant="-".join(rest),
        )

    @property
    def parent(self) -> Optional["Locale"]:
        """Next less specific locale: variant, then region, then script dropped."""
        if self.variant:
            return Locale(self.language, self.region, self.script)
        if self.region:
            return Locale(self.language, script=self.script)
        if self.script:
            return Locale(self.language)
        return None


LocaleLike = Union[Locale, str, None]


def coerce_locale(value: LocaleLike) -> Optional[Locale]:
    """Normalize a Locale, locale string or None to Optional[Locale]."""
    if value is None or isinstance(value, Locale):
        return value
    return Locale.from_string(value)


Variant = Tuple[Optional[Locale], Optional[str]]


def fallback_variants(locale: Optional[Locale], style: Optional[str]) -> List[Variant]:
    """List (locale, style) variants from most to least specific.

    Style is loosened last: (style, fr-FR), (style, fr), (style, -),
    then (-, fr-FR), (-, fr), (-, -).
    """
    locales: List[Optional[Locale]] = []
    current = locale
    while current is not None:
        locales.append(current)
        current = current.parent
    locales.append(None)

    styles: List[Optional[str]] = [style, None] if style else [None]

    variants: List[Variant] = []
    for candidate_style in styles:
        for candidate_locale in locales:
            variants.append((candidate_locale, candidate_style))
    return variants


VariantTag = Union[str, Tuple[LocaleLike, Optional[str]]]


def parse_variant_tag(tag: VariantTag) -> Variant:
    """Parse a variant tag into (locale, style).

    String tags read "[<locale>][@<style>]": "", "fr", "@dark",
    "fr-FR@dark". A (locale, style) tuple is accepted as is, so any style
    name can be given without a marker.

    Raises:
        ValueError: If the locale part is not a language tag, or the
            style after "@" is empty or contains another "@".
    """
    if isinstance(tag, tuple):
        locale, style = tag
        return coerce_locale(locale), style or None

    locale_part, marker, style = tag.strip().partition("@")
    if marker and (not style or "@" in style):
        raise ValueError(f"Variant tag must be [<locale>][@<style>]: {tag}")
    locale = Locale.from_string(locale_part) if locale_part else None
    return locale, style or None


def flatten_messages(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dot-separated keys.

    {"form": {"name": "Name"}} -> {"form.name": "Name"}
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten_messages(value, full_key))
        elif value is None:
            flat[full_key] = ""
        else:
            flat[full_key] = str(value)
    return flat


@dataclass
class ResourceCatalog:
    """Strings for one (locale, style) variant.

    Attributes:
        locale: Locale this catalog is for (None for the base catalog).
        style: Style this catalog is for (None when unstyled).
        messages: Flat {key: message} mapping.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    locale: Optional[Locale] = None
    style: Optional[str] = None
    messages: Dict[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    @property
    def variant(self) -> Variant:
        return (self.locale, self.style)

    def get_message(self, key: str) -> Optional[str]:
        """Return the message for key, or None if absent.

        An empty string is a valid message.
        """
        return self.messages.get(key)

    def set_message(self, key: str, message: str) -> None:
        self.messages[key] = message

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def merge(self, other: "ResourceCatalog") -> None:
        """Merge another catalog into this one. Later entries override earlier ones."""
        self.messages.update(other.messages)


@dataclass(frozen=True)
class ResolutionPolicy:
    """Missing resource behavior, consulted only when no loader finds a key.

    Attributes:
        use_default_on_missing: Return the caller's default, if one was given.
        throw_on_missing: Raise ResourceNotFound instead of the warning string.
    """

    use_default_on_missing: bool = True
    throw_on_missing: bool = True


@dataclass(frozen=True)
class SessionContext:
    """Locale and style preference of the session a requester belongs to."""

    locale: Optional[Locale] = None
    style: Optional[str] = None


@dataclass(frozen=True)
class ResolveOptions:
    """Named optional arguments for a single resolution call.

    Attributes:
        requester: Entity asking for the string; passed through to loaders.
        context: Object placeholders are interpolated from. None skips
            interpolation.
        locale: Locale to resolve for. Taken from the requester's session
            when None and inherit_session is set.
        style: Style to resolve for. Same session rule as locale.
        default: Value returned when nothing is found and the policy allows.
        inherit_session: Fill a missing locale/style from the requester's
            session context.
    """

    requester: Any = None
    context: Any = None
    locale: LocaleLike = None
    style: Optional[str] = None
    default: Optional[str] = None
    inherit_session: bool = True


def requester_path(requester: Any) -> List[str]:
    """Ids from the outermost ancestor down to the requester.

    Reads ``id`` and ``parent`` attributes; nodes without an id are skipped.
    """
    ids: List[str] = []
    for node in iter_ancestry(requester):
        node_id = getattr(node, "id", None)
        if node_id:
            ids.append(str(node_id))
    ids.reverse()
    return ids


def iter_ancestry(requester: Any) -> Iterator[Any]:
    """Yield the requester, then each parent outward.

    Stops at the first node already yielded, so a cyclic parent chain ends.
    """
    seen = set()
    node = requester
    while node is not None and id(node) not in seen:
        seen.add(id(node))
        yield node
        node = getattr(node, "parent", None)

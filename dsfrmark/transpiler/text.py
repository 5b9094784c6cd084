"""Small string helpers shared by the component renderers."""

import re

_ACCENTS = {
    "a": "àâä",
    "e": "éèêë",
    "i": "îï",
    "o": "ôö",
    "u": "ùûü",
    "c": "ç",
}
_ACCENT_TABLE = str.maketrans({ch: base for base, chars in _ACCENTS.items() for ch in chars})
_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def generate_id(text: str) -> str:
    """Derive a DOM id from a title.

    "Été à Paris !" -> "ete-a-paris"
    """
    slug = text.lower().translate(_ACCENT_TABLE)
    slug = _NON_SLUG_RE.sub("-", slug)
    return slug.strip("-")


def split_label(value: str, default_modifier: str = "info") -> tuple[str, str]:
    """Split a compact "label|modifier" value, e.g. a card badge."""
    label, _, modifier = value.partition("|")
    # Only the first two parts count: "a|b|c" -> ("a", "b")
    modifier = modifier.split("|")[0].strip()
    return label.strip(), modifier or default_modifier


def split_list(value: str) -> list[str]:
    """Split a comma-separated option value, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]


def class_attr(classes: list[str]) -> str:
    return " ".join(c for c in classes if c)

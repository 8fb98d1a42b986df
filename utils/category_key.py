import re
from typing import Iterable, List, Optional, Sequence, Tuple
from exceptions.custom_errors import BookingValidationError
from utils.constants import CATEGORY_KEY_DELIMITER, MAX_CATEGORY_DEPTH

"""
Canonical keys for hierarchical category paths.

A path such as ("RESTAURANTES", "Comida Rápida", "Hamburguesas / Pizza") becomes
"RESTAURANTES:Comida Rápida:Hamburguesas / Pizza". Two reservations compete for
the same slot only when their keys are identical (exact depth, not prefix).
"""

_ARROW_SEPARATOR = re.compile(r"\s*>\s*")
_SPACE_AFTER_DELIM = re.compile(re.escape(CATEGORY_KEY_DELIMITER) + r"\s+")
_SPACE_BEFORE_DELIM = re.compile(r"\s+" + re.escape(CATEGORY_KEY_DELIMITER))


def _clean_segments(segments: Iterable[Optional[str]]) -> List[str]:
    return [str(s).strip() for s in segments if s is not None and str(s).strip()]


def build_category_key(
    segments: Optional[Sequence[Optional[str]]],
    legacy_category: Optional[str] = None,
) -> Optional[str]:
    """
    Build the canonical key for a category path.

    Hierarchical segments are the primary representation: empty or missing
    segments are skipped and the rest are joined with ':'. Only when no segment
    is present does the legacy free-text category get used.

    Args:
        segments (Sequence[Optional[str]]): Parent category followed by up to four subcategories.
        legacy_category (Optional[str]): Legacy string such as "HOTELES > Hotel de Playa".

    Returns:
        Optional[str]: Canonical key, or None when neither source has a category.
    """
    parts = _clean_segments(segments or ())
    if parts:
        return CATEGORY_KEY_DELIMITER.join(parts)
    if legacy_category:
        return normalize_legacy_category(legacy_category)
    return None


def normalize_legacy_category(raw: str) -> Optional[str]:
    """Compatibility path for pre-hierarchy categories ("A > B", "A: B :C")."""
    normalized = _ARROW_SEPARATOR.sub(CATEGORY_KEY_DELIMITER, raw).strip()
    normalized = _SPACE_AFTER_DELIM.sub(CATEGORY_KEY_DELIMITER, normalized)
    normalized = _SPACE_BEFORE_DELIM.sub(CATEGORY_KEY_DELIMITER, normalized)
    return normalized or None


def category_keys_match(key1: Optional[str], key2: Optional[str]) -> bool:
    """Exact equality after trimming; a missing key never matches."""
    if not key1 or not key2:
        return False
    return key1.strip() == key2.strip()


def validate_category_path(path: Optional[Sequence[Optional[str]]]) -> Tuple[str, ...]:
    """Return the cleaned path or raise BookingValidationError."""
    if not path:
        raise BookingValidationError("Category path must not be empty.")
    first = path[0]
    if first is None or not str(first).strip():
        raise BookingValidationError("Category path must start with a parent category.")
    parts = _clean_segments(path)
    if len(parts) > MAX_CATEGORY_DEPTH:
        raise BookingValidationError(
            f"Category path has {len(parts)} levels; at most {MAX_CATEGORY_DEPTH} are allowed."
        )
    return tuple(parts)


def category_key_prefixes(path: Sequence[str]) -> List[str]:
    """Keys for the path and each ancestor, most specific first."""
    parts = _clean_segments(path)
    return [
        CATEGORY_KEY_DELIMITER.join(parts[:depth]) for depth in range(len(parts), 0, -1)
    ]

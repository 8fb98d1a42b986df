from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Union
from exceptions.custom_errors import BookingValidationError


class ExceptionKind(str, Enum):
    DURATION = "duration"
    COOLDOWN_DAYS = "cooldownDays"
    DAILY_LIMIT_EXEMPT = "dailyLimitExempt"


# Older settings documents store the cool-down override as "repeatDays"
KIND_ALIASES = {"repeatdays": "cooldowndays"}


@dataclass(frozen=True)
class EntityException:
    """Per-business override of a booking default."""

    entity_name: str
    kind: str
    value: int


def _normalise(text: Union[str, ExceptionKind, None]) -> str:
    if isinstance(text, ExceptionKind):
        text = text.value
    return str(text or "").strip().lower()


def _normalise_kind(kind: Union[str, ExceptionKind, None]) -> str:
    key = _normalise(kind)
    return KIND_ALIASES.get(key, key)


def resolve_exception(
    entity_name: Optional[str],
    kind: Union[str, ExceptionKind],
    default_value,
    exceptions: Optional[Iterable[EntityException]],
):
    """
    Look up the override for `entity_name` and `kind`.

    Both name and kind are matched case-insensitively; there is no partial or
    wildcard matching. Returns `default_value` when nothing matches.
    """
    name = _normalise(entity_name)
    if not name or not exceptions:
        return default_value
    wanted = _normalise_kind(kind)
    for ex in exceptions:
        if _normalise(ex.entity_name) == name and _normalise_kind(ex.kind) == wanted:
            return ex.value
    return default_value


def validate_exceptions(exceptions: Sequence[EntityException]) -> None:
    """At most one exception per (entity, kind), and only known kinds."""
    known = {_normalise_kind(k) for k in ExceptionKind}
    seen = set()
    errors = []
    for ex in exceptions:
        key = (_normalise(ex.entity_name), _normalise_kind(ex.kind))
        if not key[0]:
            errors.append(" • Exception without a business name.\n")
        if key[1] not in known:
            errors.append(f" • Unknown exception type '{ex.kind}' for {ex.entity_name}.\n")
        if key in seen:
            errors.append(f" • Duplicate '{ex.kind}' exception for {ex.entity_name}.\n")
        seen.add(key)
        if isinstance(ex.value, bool) or not isinstance(ex.value, int) or ex.value < 0:
            errors.append(
                f" • Exception value for {ex.entity_name} ({ex.kind}) must be a non-negative integer.\n"
            )
    if errors:
        raise BookingValidationError("Invalid business exceptions:\n" + "".join(errors))

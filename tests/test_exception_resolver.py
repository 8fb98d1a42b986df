import pytest
from core.exception_resolver import (
    EntityException,
    ExceptionKind,
    resolve_exception,
    validate_exceptions,
)
from exceptions.custom_errors import BookingValidationError

EXCEPTIONS = (
    EntityException("Hotel Playa Azul", "cooldownDays", 10),
    EntityException("Pizza Roma", "duration", 3),
    EntityException("Pizza Roma", "dailyLimitExempt", 1),
)


def test_resolves_case_insensitively():
    assert resolve_exception(" hotel playa azul ", ExceptionKind.COOLDOWN_DAYS, 30, EXCEPTIONS) == 10
    assert resolve_exception("PIZZA ROMA", "DURATION", None, EXCEPTIONS) == 3


def test_falls_back_to_default():
    assert resolve_exception("Hotel Playa Azul", ExceptionKind.DURATION, 5, EXCEPTIONS) == 5
    assert resolve_exception("Hotel Playa", ExceptionKind.COOLDOWN_DAYS, 30, EXCEPTIONS) == 30
    assert resolve_exception(None, ExceptionKind.COOLDOWN_DAYS, 30, EXCEPTIONS) == 30
    assert resolve_exception("Pizza Roma", ExceptionKind.DURATION, 5, ()) == 5


def test_valid_exceptions_pass():
    validate_exceptions(EXCEPTIONS)


@pytest.mark.parametrize(
    "exceptions",
    [
        (EntityException("A", "duration", 3), EntityException(" a ", "Duration", 4)),
        (EntityException("A", "priority", 3),),
        (EntityException("", "duration", 3),),
        (EntityException("A", "duration", -1),),
        (EntityException("A", "dailyLimitExempt", True),),
    ],
)
def test_invalid_exceptions_raise(exceptions):
    with pytest.raises(BookingValidationError):
        validate_exceptions(exceptions)


def test_repeat_days_is_a_cooldown_override():
    legacy = (EntityException("Spa Luna", "repeatDays", 5),)
    validate_exceptions(legacy)
    assert resolve_exception("Spa Luna", ExceptionKind.COOLDOWN_DAYS, 30, legacy) == 5
    with pytest.raises(BookingValidationError):
        validate_exceptions(legacy + (EntityException("spa luna", "cooldownDays", 7),))

from config_lite import errors
from config_lite.errors import ErrorKind


def test_every_kind_has_one_exception():
    subclasses = errors.ConfigLiteError.__subclasses__()
    kinds = [cls.kind for cls in subclasses]
    assert sorted(kinds, key=lambda k: k.value) == list(ErrorKind)
    assert len(set(kinds)) == len(kinds)


def test_lookup_errors_are_lookup_errors():
    assert issubclass(errors.KeyNotFoundError, LookupError)
    assert issubclass(errors.SectionNotFoundError, LookupError)


def test_value_errors_are_value_errors():
    assert issubclass(errors.InvalidBooleanError, ValueError)
    assert issubclass(errors.InvalidArgumentError, ValueError)


def test_kind_available_on_instances():
    exc = errors.WriteError("failed")
    assert exc.kind is ErrorKind.WRITE
    assert str(exc) == "failed"

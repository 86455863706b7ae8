import pytest

from dotazure import Error, ErrorKind


@pytest.mark.parametrize("exc, kind", [
    (FileNotFoundError(2, "No such file or directory", "x.json"), ErrorKind.NOT_FOUND),
    (PermissionError(13, "Permission denied", "x.json"), ErrorKind.IO),
    (IsADirectoryError(21, "Is a directory", "x.json"), ErrorKind.IO),
])
def test_from_os_error_classifies_by_type(exc, kind):
    err = Error.from_os_error(exc, "failed to read x.json")
    assert err.kind is kind
    assert err.cause is exc
    assert err.__cause__ is exc

def test_message_includes_cause():
    err = Error(ErrorKind.IO, "failed to load .env", PermissionError("denied"))
    assert str(err) == "failed to load .env: denied"

def test_message_without_cause():
    err = Error(ErrorKind.INVALID_DATA, "bad config")
    assert str(err) == "bad config"
    assert err.cause is None
    assert repr(err) == "Error(kind='invalid_data', message='bad config')"

def test_default_message_is_not_duplicated():
    exc = FileNotFoundError("missing")
    assert str(Error.from_os_error(exc)) == "missing"

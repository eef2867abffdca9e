from vlerrors.exceptions import ArgumentException, VlException


def test_exception_message():
    e = VlException("ABC")
    assert e.message == "ABC"
    assert str(e) == "ABC"


def test_exception_default_message_is_empty():
    assert VlException().message == ""


def test_argument_exception_fields():
    e = ArgumentException("ABC", "DEF", "GHI")
    assert e.message == "ABC"
    assert e.function == "DEF"
    assert e.name == "GHI"


def test_argument_exception_defaults_are_empty():
    e = ArgumentException()
    assert (e.message, e.function, e.name) == ("", "", "")


def test_argument_exception_caught_as_base():
    e = ArgumentException("bad", "f", "x")
    caught = None
    try:
        raise e
    except VlException as exc:
        caught = exc
    assert caught is e
    assert caught.message == "bad"
    assert caught.function == "f"
    assert caught.name == "x"


def test_argument_exception_repr():
    e = ArgumentException("ABC", "DEF", "GHI")
    assert repr(e) == "ArgumentException(message='ABC', function='DEF', name='GHI')"
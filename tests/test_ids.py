import pytest
from notedata.ids import parse_id, validate_id, new_id, JUST_ID_MESSAGE
from notedata.exceptions import InvalidIdentifier, NoteDataError


def test_new_id_unique():
    ids = {new_id() for _ in range(50)}
    assert len(ids) == 50
    assert all(parse_id(i).ok for i in ids)


@pytest.mark.parametrize(
    "value",
    ["123e4567-e89b-12d3-a456-426614174000", "123E4567-E89B-12D3-A456-426614174000"],
)
def test_parse_id_ok(value):
    check = parse_id(value)
    assert check.ok
    assert check.error is None
    assert check.value == value


@pytest.mark.parametrize("value", ["", "abc", "123e4567e89b12d3a456426614174000", 5, None])
def test_parse_id_bad(value):
    check = parse_id(value)
    assert not check.ok
    assert check.error


def test_validate_id_returns_value():
    value = "123e4567-e89b-12d3-a456-426614174000"
    assert validate_id(value) is value


def test_validate_id_message():
    with pytest.raises(InvalidIdentifier, match="blank") as exc:
        validate_id("bad", JUST_ID_MESSAGE)
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, NoteDataError)
    assert isinstance(exc.value.__cause__, ValueError)

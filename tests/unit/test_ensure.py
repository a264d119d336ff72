import pytest

from pathmap import pathmap
from pathmap.errors import (
    InvalidInitializerError,
    InvalidPathError,
    MissingError,
    NotAMapError,
)


class CountingInitializer:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.value


def test_ensure__leaves_existing_value_untouched():
    data = {"a": 1}
    init = CountingInitializer(0)

    result = pathmap.ensure(data, ["a"], init)

    assert result == {"a": 1}
    assert init.calls == 0


def test_ensure__returns_same_root_when_nested_leaf_exists():
    data = {"a": {"b": {"c": 1}}}
    init = CountingInitializer(0)

    assert pathmap.ensure(data, ["a", "b", "c"], init) is data
    assert init.calls == 0


def test_ensure__initializes_missing_leaf():
    data = {"a": {}}
    init = CountingInitializer([])

    result = pathmap.ensure(data, ["a", "b"], init)

    assert result == {"a": {"b": []}}
    assert init.calls == 1
    assert data == {"a": {}}


def test_ensure__accepts_builtin_initializer():
    assert pathmap.ensure({}, ["items"], list) == {"items": []}


@pytest.mark.parametrize(
    "initializer", [None, 1, lambda value: value, lambda *values: values]
)
def test_ensure__invalid_initializer(initializer):
    with pytest.raises(InvalidInitializerError) as ex:
        pathmap.ensure({}, ["a"], initializer)

    assert ex.value.value is initializer


def test_ensure__root_check_beats_invalid_initializer():
    with pytest.raises(NotAMapError):
        pathmap.ensure("oops", ["a"], None)


def test_ensure__path_check_beats_invalid_initializer():
    with pytest.raises(InvalidPathError):
        pathmap.ensure({}, "a", None)


def test_ensure__missing_intermediate():
    with pytest.raises(MissingError) as ex:
        pathmap.ensure({}, ["a", "b"], dict)

    assert ex.value.prefix == ["a"]


def test_ensure__non_map_intermediate():
    with pytest.raises(NotAMapError) as ex:
        pathmap.ensure({"a": 1}, ["a", "b"], dict)

    assert ex.value.value == 1
    assert ex.value.prefix == ["a"]


def test_ensure__empty_path_is_noop():
    data = {"a": 1}
    init = CountingInitializer(0)

    assert pathmap.ensure(data, [], init) is data
    assert init.calls == 0

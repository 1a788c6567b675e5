"""Tests for FrozenDict and the map builders."""

from __future__ import annotations

import pickle
from enum import Enum

import pytest

from lazyvoids._internal.frozen import FrozenDict
from lazyvoids.maps import MapBuildError, enum_entry_map, map_of, map_of_pairs


class Color(Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


class TestFrozenDict:
    """Tests for FrozenDict."""

    def test_from_kwargs(self) -> None:
        """Keyword arguments become entries."""
        frozen = FrozenDict(a=1, b=2)
        assert frozen["a"] == 1
        assert len(frozen) == 2

    def test_from_pairs(self) -> None:
        """An iterable of pairs becomes entries."""
        assert FrozenDict([("a", 1)]) == {"a": 1}

    def test_not_mutable(self) -> None:
        """Item assignment is not supported."""
        frozen = FrozenDict(a=1)
        with pytest.raises(TypeError):
            frozen["a"] = 2  # type: ignore[index]

    def test_hashable(self) -> None:
        """Equal FrozenDicts hash equally and nest in sets."""
        assert hash(FrozenDict(a=1)) == hash(FrozenDict(a=1))
        assert len({FrozenDict(a=1), FrozenDict(a=1)}) == 1

    def test_not_equal_to_non_mapping(self) -> None:
        """Comparison with non-mappings is False."""
        assert FrozenDict(a=1) != [("a", 1)]

    def test_to_dict_is_copy(self) -> None:
        """to_dict returns an independent plain dict."""
        frozen = FrozenDict(a=1)
        plain = frozen.to_dict()
        plain["a"] = 2
        assert frozen["a"] == 1

    def test_repr(self) -> None:
        """repr shows the entries."""
        assert repr(FrozenDict(a=1)) == "FrozenDict({'a': 1})"

    def test_equality_ignores_order(self) -> None:
        """Entry order does not affect equality."""
        assert FrozenDict([("a", 1), ("b", 2)]) == FrozenDict([("b", 2), ("a", 1)])
        assert FrozenDict(a=1) != FrozenDict(a=1, b=2)
        assert FrozenDict(a=1) != {"a": 2}

    def test_merge_returns_new_map(self) -> None:
        """| builds a new FrozenDict; the right side wins on shared keys."""
        left = FrozenDict(a=1, b=2)
        merged = left | {"b": 3, "c": 4}

        assert isinstance(merged, FrozenDict)
        assert merged == {"a": 1, "b": 3, "c": 4}
        assert left == {"a": 1, "b": 2}

    def test_merge_from_plain_dict(self) -> None:
        """A plain dict on the left still produces a FrozenDict."""
        merged = {"a": 1, "b": 2} | FrozenDict(b=3)

        assert isinstance(merged, FrozenDict)
        assert merged == {"a": 1, "b": 3}

    def test_pickle(self) -> None:
        """FrozenDict survives pickling with order intact."""
        original = FrozenDict([("z", 1), ("a", 2)])
        restored = pickle.loads(pickle.dumps(original))

        assert restored == original
        assert list(restored) == ["z", "a"]
        assert isinstance(restored, FrozenDict)


class TestMapOf:
    """Tests for map_of()."""

    def test_empty(self) -> None:
        """No arguments builds an empty map."""
        assert map_of() == {}

    def test_alternating_pairs(self) -> None:
        """Arguments alternate between keys and values."""
        built = map_of("a", 1, "b", 2, "c", 3)
        assert built == {"a": 1, "b": 2, "c": 3}
        assert isinstance(built, FrozenDict)

    def test_keeps_order(self) -> None:
        """Entries keep argument order."""
        assert list(map_of("z", 1, "a", 2)) == ["z", "a"]

    def test_odd_argument_count(self) -> None:
        """An odd number of arguments is rejected."""
        with pytest.raises(MapBuildError, match="alternating keys and values"):
            map_of("a", 1, "b")

    def test_duplicate_key(self) -> None:
        """A repeated key is rejected."""
        with pytest.raises(MapBuildError, match="Duplicate key 'a'"):
            map_of("a", 1, "a", 2)

    def test_error_is_value_error(self) -> None:
        """MapBuildError can be caught as ValueError."""
        with pytest.raises(ValueError):
            map_of("a")


class TestMapOfPairs:
    """Tests for map_of_pairs()."""

    def test_from_generator(self) -> None:
        """Any iterable of pairs works."""
        assert map_of_pairs((str(i), i) for i in range(3)) == {"0": 0, "1": 1, "2": 2}

    def test_duplicate_key(self) -> None:
        """A repeated key is rejected."""
        with pytest.raises(MapBuildError):
            map_of_pairs([("a", 1), ("a", 1)])


class TestEnumEntryMap:
    """Tests for enum_entry_map()."""

    def test_maps_derived_key_to_member(self) -> None:
        """Each member is stored under its derived key."""
        by_value = enum_entry_map(Color, lambda c: c.value)
        assert by_value == {"r": Color.RED, "g": Color.GREEN, "b": Color.BLUE}

    def test_definition_order(self) -> None:
        """Members appear in definition order."""
        assert list(enum_entry_map(Color, lambda c: c.name)) == ["RED", "GREEN", "BLUE"]

    def test_duplicate_derived_key(self) -> None:
        """Two members deriving one key are rejected."""
        with pytest.raises(MapBuildError):
            enum_entry_map(Color, lambda c: len(c.name) > 3)

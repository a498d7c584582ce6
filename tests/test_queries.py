import math

import pytest
from kungfu import Error, Ok

from lazyseq import NotFoundError, Seq


class TestFind:
    """find / find_index / try_find"""

    def test_find_first_match(self):
        assert Seq([1, 4, 6, 9]).find(lambda x: x % 2 == 0) == 4

    def test_find_missing_returns_none(self):
        assert Seq([1, 3]).find(lambda x: x > 5) is None

    def test_find_missing_returns_default(self):
        assert Seq([1, 3]).find(lambda x: x > 5, default="nope") == "nope"

    def test_find_uses_index(self):
        assert Seq("abcd").find(lambda _, index: index == 2) == "c"

    def test_find_stops_at_match(self, counting_source):
        source = counting_source([1, 2, 3, 4])
        seq = Seq(source)
        assert seq.find(lambda x: x == 2) == 2
        assert source.pulls == 2
        assert list(seq) == [3, 4]

    def test_find_index(self):
        assert Seq("abc").find_index(lambda x: x == "c") == 2

    def test_find_index_missing(self):
        assert Seq("abc").find_index(lambda x: x == "z") == -1

    def test_find_index_on_infinite_source(self):
        pulls = []
        seq = Seq.init_infinite(lambda i: pulls.append(i) or i)
        assert seq.find_index(lambda x: x == 7) == 7
        assert len(pulls) == 8

    def test_try_find_ok(self):
        match Seq([3, 5, 8]).try_find(lambda x: x > 4):
            case Ok(value):
                assert value == 5
            case Error(err):
                pytest.fail(f"unexpected {err!r}")

    def test_try_find_error(self):
        match Seq([1, 2, 3]).try_find(lambda x: x > 4):
            case Ok(value):
                pytest.fail(f"unexpected {value!r}")
            case Error(err):
                assert isinstance(err, NotFoundError)
                assert err.examined == 3

    def test_try_find_matches_none_element(self):
        match Seq([None, 1]).try_find(lambda x: x is None):
            case Ok(value):
                assert value is None
            case Error(err):
                pytest.fail(f"unexpected {err!r}")


class TestEverySome:
    """every / some short-circuit"""

    def test_every_empty_is_true(self):
        assert Seq([]).every(lambda x: False) is True

    def test_some_empty_is_false(self):
        assert Seq([]).some(lambda x: True) is False

    def test_every(self):
        assert Seq([2, 4, 6]).every(lambda x: x % 2 == 0)
        assert not Seq([2, 3, 6]).every(lambda x: x % 2 == 0)

    def test_some(self):
        assert Seq([1, 3, 4]).some(lambda x: x % 2 == 0)
        assert not Seq([1, 3, 5]).some(lambda x: x % 2 == 0)

    def test_some_counts_none_element(self):
        assert Seq([1, None]).some(lambda x: x is None)

    def test_every_stops_at_first_failure(self, counting_source):
        source = counting_source([2, 3, 4, 5])
        assert not Seq(source).every(lambda x: x % 2 == 0)
        assert source.pulls == 2

    def test_some_stops_at_first_match(self, counting_source):
        source = counting_source([1, 2, 3])
        assert Seq(source).some(lambda x: x == 1)
        assert source.pulls == 1

    def test_every_passes_index(self):
        assert Seq([0, 1, 2]).every(lambda value, index: value == index)

    def test_every_on_infinite_source_terminates(self):
        assert not Seq.init_infinite().every(lambda x: x < 100)


class TestIncludes:
    """includes with NaN-aware equality"""

    def test_includes(self):
        assert Seq([1, 2, 3]).includes(2)
        assert not Seq([1, 2, 3]).includes(4)

    def test_includes_nan(self):
        assert Seq([1.0, math.nan]).includes(float("nan"))

    def test_from_index_skips_earlier_positions(self):
        assert not Seq(["a", "b", "c"]).includes("a", 1)
        assert Seq(["a", "b", "a"]).includes("a", from_index=1)

    def test_includes_stops_at_match(self, counting_source):
        source = counting_source([5, 6, 7])
        assert Seq(source).includes(6)
        assert source.pulls == 2

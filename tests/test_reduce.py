import operator

import pytest
from kungfu import Error, Ok

from lazyseq import EmptyReductionError, Seq


class TestReduce:
    """reduce, seeded and unseeded"""

    def test_seeded_sum(self):
        assert Seq([1, 2, 3]).reduce(lambda acc, x: acc + x, 10) == 16

    def test_unseeded_sum(self):
        assert Seq([1, 2, 3]).reduce(lambda acc, x: acc + x) == 6

    def test_unseeded_empty_raises(self):
        with pytest.raises(EmptyReductionError):
            Seq([]).reduce(lambda acc, x: acc + x)

    def test_empty_reduction_is_type_error(self):
        with pytest.raises(TypeError, match="Reduce of empty Seq with no initial value"):
            Seq.empty.reduce(lambda acc, x: acc + x)

    def test_seeded_empty_returns_seed(self):
        assert Seq([]).reduce(lambda acc, x: acc + x, "seed") == "seed"

    def test_single_element_skips_reducer(self):
        calls = []
        assert Seq(["only"]).reduce(lambda acc, x: calls.append(x)) == "only"
        assert calls == []

    def test_unseeded_indices_start_at_one(self):
        seen = []

        def collect(acc, value, index):
            seen.append((acc, value, index))
            return acc + value

        assert Seq([1, 2, 3]).reduce(collect) == 6
        assert seen == [(1, 2, 1), (3, 3, 2)]

    def test_seeded_indices_start_at_zero(self):
        seen = []
        Seq("ab").reduce(lambda acc, value, index: seen.append(index) or acc, None)
        assert seen == [0, 1]

    def test_none_is_a_valid_seed(self):
        assert Seq([1]).reduce(lambda acc, x: (acc, x), None) == (None, 1)

    def test_reducer_receives_owner(self):
        seq = Seq([1, 2])
        owners = []
        seq.reduce(lambda acc, value, index, owner: owners.append(owner) or acc, 0)
        assert owners == [seq, seq]

    def test_fold_order_is_left_to_right(self):
        assert Seq("abc").reduce(lambda acc, x: acc + x, "") == "abc"

    def test_builtin_reducer(self):
        assert Seq([2, 3, 4]).reduce(operator.mul) == 24


class TestTryReduce:
    """try_reduce returns a Result"""

    def test_ok(self):
        match Seq([1, 2]).try_reduce(lambda acc, x: acc * 10 + x):
            case Ok(value):
                assert value == 12
            case Error(err):
                pytest.fail(f"unexpected {err!r}")

    def test_error_on_empty(self):
        match Seq([]).try_reduce(lambda acc, x: acc + x):
            case Ok(value):
                pytest.fail(f"unexpected {value!r}")
            case Error(err):
                assert isinstance(err, EmptyReductionError)

    def test_reducer_error_propagates(self):
        def boom(acc, x):
            raise KeyError(x)

        with pytest.raises(KeyError):
            Seq([1, 2]).try_reduce(boom)

from functools import reduce

import pytest

from tramp import Base, Cont, compk, compose_all, identity, run_cont, trampoline_cont


def inc(x):
    return x + 1


class TestCompk:
    def test_link_returns_cont(self):
        link = compk(inc, inc)
        assert isinstance(link(0), Cont)

    def test_link_defers_invocation(self):
        calls = []

        def spy(x):
            calls.append(x)
            return x

        deferred = compk(spy, spy)(1)

        assert calls == []
        assert deferred.k(identity) == 1
        assert calls == [1, 1]

    def test_applies_right_operand_first(self):
        link = compk(lambda x: x * 2, lambda x: x + 3)
        assert run_cont(link(1)) == 8


class TestRunCont:
    def test_long_composition_chain(self):
        composed = compose_all(*[inc] * 100_000)
        assert run_cont(composed(0)) == 100_000

    def test_native_nested_composition_overflows(self):
        native = reduce(lambda f, g: lambda x: f(g(x)), [inc] * 100_000)
        with pytest.raises(RecursionError):
            native(0)

    def test_compose_all_order(self):
        composed = compose_all(str, lambda x: x * 10, inc)
        assert trampoline_cont(composed, 4) == "50"

    def test_compose_all_single_and_empty(self):
        assert trampoline_cont(compose_all(inc), 1) == 2
        assert trampoline_cont(compose_all(), "same") == "same"

    def test_plain_value_is_final(self):
        assert run_cont(42) == 42

    def test_base_is_unwrapped(self):
        assert run_cont(Cont(lambda k: k(Base("done")))) == "done"

    def test_base_on_first_call_returns_initial(self):
        assert trampoline_cont(lambda x: Base(x), 7) == 7

    def test_continuation_invoked_once_per_link(self):
        invocations = []

        def k_fn(k):
            invocations.append(k)
            return k(3)

        assert run_cont(Cont(k_fn)) == 3
        assert invocations == [identity]

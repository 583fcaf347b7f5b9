import pytest
from loguru import logger

from tramp import Base, Call, Chain, Step, compose_all, run_chain, run_modcons, run_tail, trampoline_cont
from tramp import config
from tramp.config import Settings, load_settings


class TestLoadSettings:
    def test_defaults_when_unset(self):
        assert load_settings({}) == Settings(debug=False, trace_steps=False)

    @pytest.mark.parametrize("raw", ["1", "true", "YES"])
    def test_truthy_values(self, raw):
        assert load_settings({"TRAMP_DEBUG": raw}).debug

    @pytest.mark.parametrize("raw", ["", "0", "no", "off"])
    def test_falsy_values(self, raw):
        assert not load_settings({"TRAMP_DEBUG": raw}).debug

    def test_trace_requires_debug(self):
        assert not load_settings({"TRAMP_TRACE_STEPS": "1"}).trace_steps
        assert load_settings({"TRAMP_DEBUG": "1", "TRAMP_TRACE_STEPS": "1"}).trace_steps


class TestDriverLogging:
    def test_tail_logs_iterations(self, log_messages):
        run_tail(lambda n: Base(n) if n == 0 else Step((n - 1,)), 2)

        assert log_messages[-1] == "done after 2 steps"
        assert sum(m.startswith("step ") for m in log_messages) == 2

    def test_modcons_logs_short_circuit(self, log_messages):
        def gen(n):
            if n == 0:
                return Base(0)
            return Call(lambda r: Base(r), Step((n - 1,)))

        assert run_modcons(gen, 3) == 0
        assert "descent finished with 3 pending function(s)" in log_messages
        assert "short-circuit with 2 pending function(s) discarded" in log_messages

    def test_chain_logs_hops(self, log_messages):
        def down(n):
            return Base(n) if n == 0 else Chain(down, (n - 1,))

        run_chain(down, 3)
        assert "done after 3 hops" in log_messages

    def test_cont_logs_unwraps(self, log_messages):
        trampoline_cont(compose_all(abs, abs, abs), -1)
        assert "done after 2 unwraps" in log_messages

    def test_silent_by_default(self, monkeypatch):
        monkeypatch.setattr(config, "settings", Settings())
        logger.disable("tramp")
        messages = []
        sink_id = logger.add(lambda m: messages.append(m), level="TRACE")
        try:
            run_tail(lambda: Base(1))
        finally:
            logger.remove(sink_id)
        assert messages == []

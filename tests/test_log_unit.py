import logging

import pytest

import readme_toc.log as log_module
from readme_toc.log import (
    bind_log_context,
    get_log_context,
    log_info,
    set_log_context,
    timed,
)


@pytest.fixture(autouse=True)
def _reset_log_context_between_tests():
    # `set_log_context()` is persistent; avoid leaking state.
    log_module._CTX.set(None)
    yield
    log_module._CTX.set(None)


def test_bound_context_is_scoped_and_copied() -> None:
    assert get_log_context() == {}

    with bind_log_context(op="unit", path="README.md"):
        ctx = get_log_context()
        assert ctx == {"op": "unit", "path": "README.md"}
        ctx["op"] = "mutated"
        assert get_log_context()["op"] == "unit"

    assert get_log_context() == {}


def test_set_log_context_persists_fields() -> None:
    set_log_context(run_id="abc123", skipped=None)
    assert get_log_context() == {"run_id": "abc123"}


def test_event_formatting(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("readme_toc.test.log_unit")

    with caplog.at_level(logging.INFO, logger=logger.name), bind_log_context(path="README.md"):
        log_info(
            logger,
            "inject.updated",
            regions=2,
            moved=True,
            active=None,
            lines=[1, 2, 3, 4, 5],
            long_value="x" * 400,
        )

    msg = caplog.records[0].message
    assert msg.startswith("inject.updated path=README.md")
    assert "regions=2" in msg
    assert "moved=true" in msg
    assert "active=" not in msg
    assert "lines=[len=5]" in msg
    assert "..." in msg


def test_timed_logs_error_and_reraises(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("readme_toc.test.log_unit.timed")

    with caplog.at_level(logging.DEBUG, logger=logger.name):
        with pytest.raises(RuntimeError), timed(logger, "toc.run"):
            raise RuntimeError("boom")

    messages = [r.message for r in caplog.records]
    assert messages[0].startswith("toc.run.start")
    assert messages[1].startswith("toc.run.error")
    assert "exc=RuntimeError" in messages[1]

"""Unit tests for the timing decorator."""

import pytest
from loguru import logger

from print_resizer.utils.profiling import timed


@pytest.fixture
def log_messages():
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    yield messages
    logger.remove(handler_id)


def test_timed_returns_result(log_messages: list[str]):
    @timed
    def add(a: int, b: int) -> int:
        return a + b

    assert add(2, 3) == 5
    assert any("[PROFILE]" in m and "add" in m for m in log_messages)


def test_timed_logs_on_failure(log_messages: list[str]):
    @timed
    def fail() -> None:
        raise ValueError("nope")

    with pytest.raises(ValueError):
        fail()

    assert any("[PROFILE]" in m and "fail" in m for m in log_messages)


def test_timed_preserves_name():
    @timed
    def step() -> None:
        pass

    assert step.__name__ == "step"

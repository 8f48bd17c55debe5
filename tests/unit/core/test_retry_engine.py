"""Тесты классификации статусов и паузы retry."""

import threading
import time

import pytest

from socialhttp.core.retry_engine import (
    AttemptState,
    Outcome,
    RetryEngine,
    classify,
    is_success_code,
)


@pytest.mark.parametrize("status", [200, 201, 204, 299, 302])
def test_success_codes(status):
    assert is_success_code(status)
    assert classify(status, 0, 3) is Outcome.SUCCESS


@pytest.mark.parametrize("status", [100, 199, 300, 301, 304, 307])
def test_non_success_codes(status):
    assert not is_success_code(status)


@pytest.mark.parametrize("status", [400, 401, 404, 420, 429, 499, 301])
def test_below_500_fails_immediately(status):
    assert classify(status, 0, 5) is Outcome.FAIL


@pytest.mark.parametrize("status", [500, 502, 503, 504])
def test_server_errors_retry_until_last_attempt(status):
    assert classify(status, 0, 2) is Outcome.RETRY
    assert classify(status, 1, 2) is Outcome.RETRY
    assert classify(status, 2, 2) is Outcome.FAIL


def test_no_retries_configured():
    assert classify(503, 0, 0) is Outcome.FAIL


def test_outcome_next_state():
    assert Outcome.SUCCESS.next_state is AttemptState.SUCCESS
    assert Outcome.RETRY.next_state is AttemptState.RETRYING
    assert Outcome.FAIL.next_state is AttemptState.FAILED


class TestRetryEngine:

    def test_attempts(self):
        engine = RetryEngine(retry_count=2)
        assert engine.max_attempts == 3
        assert list(engine.attempts()) == [0, 1, 2]
        assert not engine.is_last(1)
        assert engine.is_last(2)

    def test_classify_uses_retry_count(self):
        engine = RetryEngine(retry_count=1)
        assert engine.classify(503, 0) is Outcome.RETRY
        assert engine.classify(503, 1) is Outcome.FAIL

    def test_zero_interval_does_not_block(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=0)
        start = time.monotonic()
        engine.sleep()
        assert time.monotonic() - start < 0.1

    def test_sleep_waits_interval(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=0.05)
        start = time.monotonic()
        engine.sleep()
        assert time.monotonic() - start >= 0.05

    def test_interrupt_cuts_sleep_short(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=10)
        timer = threading.Timer(0.05, engine.interrupt)
        timer.start()

        start = time.monotonic()
        engine.sleep()
        elapsed = time.monotonic() - start
        timer.join()

        assert elapsed < 5

    def test_interrupt_without_sleep_does_not_shorten_next_sleep(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=0.2)
        engine.interrupt()

        start = time.monotonic()
        engine.sleep()
        assert time.monotonic() - start >= 0.2

    def test_sleeping_counts_threads_in_pause(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=10)
        assert engine.sleeping == 0

        worker = threading.Thread(target=engine.sleep)
        worker.start()
        wait_until(lambda: engine.sleeping == 1)
        engine.interrupt()
        worker.join(timeout=5)

        assert not worker.is_alive()
        assert engine.sleeping == 0

    def test_interrupt_targets_one_thread(self):
        engine = RetryEngine(retry_count=1, retry_interval_seconds=10)
        finished = []

        def pause(name):
            engine.sleep()
            finished.append(name)

        first = threading.Thread(target=pause, args=("first",))
        second = threading.Thread(target=pause, args=("second",))
        first.start()
        second.start()
        wait_until(lambda: engine.sleeping == 2)

        engine.interrupt(first)
        first.join(timeout=5)
        assert finished == ["first"]
        assert second.is_alive()

        engine.interrupt(second)
        second.join(timeout=5)
        assert finished == ["first", "second"]


def wait_until(predicate, timeout=5.0):
    deadline = time.monotonic() + timeout
    while not predicate():
        assert time.monotonic() < deadline, "condition not reached"
        time.sleep(0.01)

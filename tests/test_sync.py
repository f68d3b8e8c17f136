"""
Tests for the poisonable guard and the closable channel.
"""
import threading

import pytest

from core.errors import ChannelClosed, LockPoisoned
from core.sync import Channel, Guarded


class TestGuarded:
    """Tests for Guarded."""

    def test_lock_yields_value(self):
        guard = Guarded([1, 2], "numbers")
        with guard.lock() as numbers:
            numbers.append(3)
        with guard.lock() as numbers:
            assert numbers == [1, 2, 3]
        assert not guard.poisoned

    def test_failure_inside_poisons(self):
        guard = Guarded({}, "state")
        with pytest.raises(KeyError):
            with guard.lock() as state:
                state["missing"]
        assert guard.poisoned
        with pytest.raises(LockPoisoned) as info:
            with guard.lock():
                pass
        assert info.value.name == "state"

    def test_lock_released_after_poisoning(self):
        guard = Guarded(0)
        with pytest.raises(RuntimeError):
            with guard.lock():
                raise RuntimeError("boom")
        # A second attempt must fail fast rather than deadlock
        result = []

        def attempt():
            try:
                with guard.lock():
                    pass
            except LockPoisoned:
                result.append("poisoned")

        t = threading.Thread(target=attempt)
        t.start()
        t.join(timeout=2)
        assert result == ["poisoned"]

    def test_default_name(self):
        assert Guarded([]).name == "list"


class TestChannel:
    """Tests for Channel."""

    def test_preserves_order(self):
        channel = Channel("c")
        for i in range(5):
            channel.send(i)
        assert [channel.recv() for _ in range(5)] == [0, 1, 2, 3, 4]

    def test_timeout_returns_none(self):
        assert Channel().recv(timeout=0.01) is None

    def test_send_after_close(self):
        channel = Channel("c")
        channel.close()
        assert channel.closed
        with pytest.raises(ChannelClosed):
            channel.send(1)

    def test_pending_items_delivered_before_close(self):
        channel = Channel("c")
        channel.send("a")
        channel.close()
        assert channel.recv() == "a"
        with pytest.raises(ChannelClosed):
            channel.recv()

    def test_close_cause_is_chained(self):
        channel = Channel("c")
        cause = ValueError("worker died")
        channel.close(cause=cause)
        with pytest.raises(ChannelClosed) as info:
            channel.recv(timeout=0.1)
        assert info.value.__cause__ is cause
        # Still closed for the next receiver
        with pytest.raises(ChannelClosed):
            channel.recv(timeout=0.1)

    def test_close_is_idempotent(self):
        channel = Channel()
        first = ValueError("first")
        channel.close(cause=first)
        channel.close(cause=ValueError("second"))
        with pytest.raises(ChannelClosed) as info:
            channel.recv()
        assert info.value.__cause__ is first

    def test_recv_across_threads(self):
        channel = Channel()
        t = threading.Thread(target=lambda: channel.send("hello"))
        t.start()
        assert channel.recv(timeout=2) == "hello"
        t.join()

"""Unit tests for per-user profile locks."""

import asyncio

import pytest

from mealmate.application.shared.profile_locks import ProfileLocks


class TestProfileLocks:
    """Test per-user serialization."""

    def setup_method(self):
        """Set up test fixtures."""
        self.locks = ProfileLocks()

    @pytest.mark.asyncio
    async def test_same_user_runs_one_at_a_time(self):
        events = []

        async def work(name):
            async with self.locks.hold("user123"):
                events.append(f"{name} start")
                await asyncio.sleep(0)
                events.append(f"{name} end")

        await asyncio.gather(work("first"), work("second"))

        assert events == ["first start", "first end", "second start", "second end"]

    @pytest.mark.asyncio
    async def test_different_users_do_not_block(self):
        events = []

        async def work(user_id):
            async with self.locks.hold(user_id):
                events.append(f"{user_id} start")
                await asyncio.sleep(0)
                events.append(f"{user_id} end")

        await asyncio.gather(work("alice"), work("bob"))

        assert events[:2] == ["alice start", "bob start"]

    @pytest.mark.asyncio
    async def test_lock_released_after_error(self):
        with pytest.raises(RuntimeError):
            async with self.locks.hold("user123"):
                raise RuntimeError("boom")

        assert len(self.locks) == 0
        async with self.locks.hold("user123"):
            assert len(self.locks) == 1

    @pytest.mark.asyncio
    async def test_unused_locks_are_dropped(self):
        async with self.locks.hold("user123"):
            pass

        assert len(self.locks) == 0

"""EvictionSweeper: eviction notices, single-flight, failure handling."""

import asyncio
from datetime import datetime, timedelta, timezone

from redis.exceptions import ConnectionError as RedisConnectionError

from chatroom.application.commands.participants import EvictExpiredHandler
from chatroom.application.services.eviction_sweeper import EvictionSweeper
from chatroom.domain.entities.participant import Participant
from chatroom.domain.value_objects.participant_name import ParticipantName


def later(minutes: int = 5) -> datetime:
    return datetime.now(timezone.utc) + timedelta(minutes=minutes)


class FailingOnceAnnouncer:
    """Fails the first record, then delegates. Optionally the failed write still lands."""

    def __init__(self, inner, write_before_failing=False):
        self._inner = inner
        self._write_before_failing = write_before_failing
        self.failed = False

    def build(self, name, text):
        return self._inner.build(name, text)

    async def record(self, notice):
        if not self.failed:
            self.failed = True
            if self._write_before_failing:
                await self._inner.record(notice)
            raise TimeoutError("reply lost")
        return await self._inner.record(notice)


class FailingSecondRemoval:
    """Participant repository whose second remove_if_inactive call raises."""

    def __init__(self, inner):
        self._inner = inner
        self.removals = 0

    async def list_all(self):
        return await self._inner.list_all()

    async def remove_if_inactive(self, name, cutoff):
        self.removals += 1
        if self.removals == 2:
            raise RedisConnectionError("connection reset")
        return await self._inner.remove_if_inactive(name, cutoff)


class BlockingEvictHandler:
    def __init__(self):
        self.entered = asyncio.Event()
        self.release = asyncio.Event()

    async def execute(self, command):
        self.entered.set()
        await self.release.wait()
        return []


class ExplodingEvictHandler:
    async def execute(self, command):
        raise RuntimeError("boom")


async def _join_stale(participant_repository, *names):
    stale = datetime.now(timezone.utc) - timedelta(minutes=1)
    for name in names:
        await participant_repository.add(Participant.create(ParticipantName(name), now=stale))


def _sweeper(participant_repository, announcer, interval_seconds=15):
    return EvictionSweeper(
        EvictExpiredHandler(participant_repository),
        announcer,
        interval_seconds=interval_seconds,
        ttl_seconds=10,
        leave_text="sai da sala...",
        clock=later,
    )


async def test_sweep_evicts_and_announces(participant_repository, message_repository, announcer):
    await _join_stale(participant_repository, "alice", "bob")
    await participant_repository.add(Participant.create(ParticipantName("carol"), now=later()))

    evicted = await _sweeper(participant_repository, announcer).sweep()

    assert sorted(p.name.value for p in evicted) == ["alice", "bob"]
    assert [p.name.value for p in await participant_repository.list_all()] == ["carol"]

    notices = await message_repository.list_chronological()
    assert sorted(n.sender.value for n in notices) == ["alice", "bob"]
    assert {(n.to, n.text, n.kind.value) for n in notices} == {
        ("Todos", "sai da sala...", "status")
    }


async def test_failed_notice_is_retried_on_next_sweep(
    participant_repository, message_repository, announcer
):
    await _join_stale(participant_repository, "alice")
    sweeper = _sweeper(participant_repository, FailingOnceAnnouncer(announcer))

    await sweeper.sweep()

    assert await participant_repository.list_all() == []
    assert await message_repository.list_chronological() == []
    assert [n.value for n in sweeper.pending_departures] == ["alice"]

    evicted = await sweeper.sweep()

    assert evicted == []
    assert sweeper.pending_departures == []
    notices = await message_repository.list_chronological()
    assert [(n.sender.value, n.text) for n in notices] == [("alice", "sai da sala...")]


async def test_overlapping_sweep_is_skipped(announcer):
    handler = BlockingEvictHandler()
    sweeper = EvictionSweeper(handler, announcer, interval_seconds=15, ttl_seconds=10)

    first = asyncio.create_task(sweeper.sweep())
    await handler.entered.wait()

    assert await sweeper.sweep() is None

    handler.release.set()
    assert await first == []


async def test_sweep_failure_does_not_raise(announcer):
    sweeper = EvictionSweeper(ExplodingEvictHandler(), announcer, interval_seconds=15, ttl_seconds=10)

    assert await sweeper.sweep() == []
    # The lock is released, so the next sweep runs
    assert await sweeper.sweep() == []


async def test_start_and_stop(participant_repository, message_repository, announcer):
    await _join_stale(participant_repository, "alice")
    sweeper = _sweeper(participant_repository, announcer, interval_seconds=0.01)

    sweeper.start()
    assert sweeper.is_running
    for _ in range(100):
        if await message_repository.list_chronological():
            break
        await asyncio.sleep(0.01)
    await sweeper.stop()

    assert not sweeper.is_running
    assert await participant_repository.list_all() == []
    notices = await message_repository.list_chronological()
    assert [n.sender.value for n in notices] == ["alice"]


async def test_failed_removal_keeps_notices_for_removed_participants(
    participant_repository, message_repository, announcer
):
    await _join_stale(participant_repository, "alice", "bob")
    flaky = FailingSecondRemoval(participant_repository)
    sweeper = _sweeper(flaky, announcer)

    first = await sweeper.sweep()
    assert len(first) == 1
    assert len(await participant_repository.list_all()) == 1

    second = await sweeper.sweep()
    assert len(second) == 1

    assert await participant_repository.list_all() == []
    notices = await message_repository.list_chronological()
    assert sorted(n.sender.value for n in notices) == ["alice", "bob"]
    assert sweeper.pending_departures == []


async def test_notice_written_before_error_is_not_duplicated(
    participant_repository, message_repository, announcer
):
    await _join_stale(participant_repository, "alice")
    sweeper = _sweeper(
        participant_repository, FailingOnceAnnouncer(announcer, write_before_failing=True)
    )

    await sweeper.sweep()
    assert [n.value for n in sweeper.pending_departures] == ["alice"]

    await sweeper.sweep()

    notices = await message_repository.list_chronological()
    assert [(n.sender.value, n.text) for n in notices] == [("alice", "sai da sala...")]
    assert sweeper.pending_departures == []

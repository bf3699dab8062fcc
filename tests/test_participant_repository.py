"""RedisParticipantRepository against an in-memory Redis."""

from datetime import datetime, timedelta, timezone

from chatroom.domain.entities.participant import Participant
from chatroom.domain.value_objects.participant_name import ParticipantName


async def test_add_rejects_duplicate_name(participant_repository):
    assert await participant_repository.add(Participant.create(ParticipantName("alice")))
    assert not await participant_repository.add(Participant.create(ParticipantName("alice")))

    participants = await participant_repository.list_all()
    assert [p.name.value for p in participants] == ["alice"]


async def test_get_returns_stored_document(participant_repository):
    seen = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    participant = Participant.create(ParticipantName("bob"), now=seen)
    await participant_repository.add(participant)

    stored = await participant_repository.get(ParticipantName("bob"))

    assert stored.id == participant.id
    assert stored.last_seen_at == seen
    assert await participant_repository.get(ParticipantName("nobody")) is None


async def test_touch_refreshes_last_seen(participant_repository):
    seen = datetime(2024, 1, 1, tzinfo=timezone.utc)
    await participant_repository.add(Participant.create(ParticipantName("carol"), now=seen))

    refreshed = seen + timedelta(seconds=30)
    assert await participant_repository.touch(ParticipantName("carol"), refreshed)

    stored = await participant_repository.get(ParticipantName("carol"))
    assert stored.last_seen_at == refreshed


async def test_touch_does_not_create_missing_participant(participant_repository):
    assert not await participant_repository.touch(
        ParticipantName("ghost"), datetime.now(timezone.utc)
    )
    assert await participant_repository.list_all() == []


async def test_remove_if_inactive_keeps_refreshed_participant(participant_repository):
    seen = datetime(2024, 1, 1, tzinfo=timezone.utc)
    await participant_repository.add(Participant.create(ParticipantName("dan"), now=seen))

    kept = await participant_repository.remove_if_inactive(ParticipantName("dan"), cutoff=seen)
    assert kept is None
    assert await participant_repository.get(ParticipantName("dan")) is not None

    removed = await participant_repository.remove_if_inactive(
        ParticipantName("dan"), cutoff=seen + timedelta(seconds=1)
    )
    assert removed.name.value == "dan"
    assert await participant_repository.get(ParticipantName("dan")) is None


async def test_remove(participant_repository):
    await participant_repository.add(Participant.create(ParticipantName("erin")))

    assert await participant_repository.remove(ParticipantName("erin"))
    assert not await participant_repository.remove(ParticipantName("erin"))

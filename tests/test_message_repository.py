"""RedisMessageRepository against an in-memory Redis."""

from chatroom.domain.entities.message import Message
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.participant_name import ParticipantName


def _message(sender: str, text: str, to: str = "Todos", kind: str = "broadcast-message"):
    return Message.create(sender=ParticipantName(sender), to=to, text=text, kind=kind)


async def test_list_chronological_keeps_creation_order(message_repository):
    first = _message("alice", "one")
    second = _message("bob", "two")
    third = _message("alice", "three")
    for message in (first, second, third):
        await message_repository.add(message)

    # An edit refreshes sentAt but not the position in the log
    first.edit(to="Todos", text="one (edited)", kind="broadcast-message")
    assert await message_repository.replace(first)

    stored = await message_repository.list_chronological()
    assert [m.text for m in stored] == ["one (edited)", "two", "three"]


async def test_get_by_id_round_trips_wire_fields(message_repository):
    message = _message("alice", "hi bob", to="bob", kind="private-message")
    await message_repository.add(message)

    stored = await message_repository.get_by_id(message.id)

    assert stored.sender == ParticipantName("alice")
    assert stored.to == "bob"
    assert stored.kind.value == "private-message"
    assert stored.sent_at == message.sent_at


async def test_replace_does_not_resurrect_deleted_message(message_repository):
    message = _message("alice", "short lived")
    await message_repository.add(message)
    assert await message_repository.delete(message.id)

    message.edit(to="Todos", text="back again?", kind="broadcast-message")

    assert not await message_repository.replace(message)
    assert await message_repository.get_by_id(message.id) is None
    assert await message_repository.list_chronological() == []


async def test_delete_unknown_id(message_repository):
    assert not await message_repository.delete(MessageId.generate())

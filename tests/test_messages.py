"""Message handlers: creation, visibility, ownership."""

import pytest

from chatroom.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from chatroom.application.queries.messages import (
    ListVisibleMessagesHandler,
    ListVisibleMessagesQuery,
)
from chatroom.domain.entities.message import Message
from chatroom.domain.entities.participant import Participant
from chatroom.domain.exceptions import (
    DomainValidationError,
    EntityNotFoundError,
    UnauthorizedError,
)
from chatroom.domain.services import is_owner
from chatroom.domain.value_objects.message_id import MessageId
from chatroom.domain.value_objects.participant_name import ParticipantName


@pytest.fixture()
async def registered(participant_repository):
    for name in ("alice", "bob", "carol", "dan"):
        await participant_repository.add(Participant.create(ParticipantName(name)))


@pytest.fixture()
def create(message_repository, participant_repository):
    handler = CreateMessageHandler(message_repository, participant_repository)

    async def _create(sender, to, text, kind="broadcast-message"):
        return await handler.execute(
            CreateMessageCommand(sender=ParticipantName(sender), to=to, text=text, kind=kind)
        )

    return _create


@pytest.fixture()
def visible_to(message_repository):
    handler = ListVisibleMessagesHandler(message_repository)

    async def _visible_to(user, limit=None):
        messages = await handler.execute(
            ListVisibleMessagesQuery(user=ParticipantName(user), limit=limit)
        )
        return [m.text for m in messages]

    return _visible_to


async def test_create_requires_registered_sender(create):
    with pytest.raises(EntityNotFoundError):
        await create("stranger", "Todos", "hello")


async def test_create_rejects_unknown_kind(create, registered):
    with pytest.raises(DomainValidationError):
        await create("alice", "Todos", "hello", kind="shout")


async def test_status_notice_from_departed_sender_is_accepted(create):
    message = await create("gone", "Todos", "sai da sala...", kind="status")
    assert message.kind.value == "status"


async def test_private_message_hidden_from_third_party(create, visible_to, registered):
    await create("carol", "Todos", "hi all")
    await create("alice", "bob", "psst bob", kind="private-message")
    await create("bob", "Todos", "a broadcast")

    assert await visible_to("bob") == ["hi all", "psst bob", "a broadcast"]
    assert await visible_to("alice") == ["hi all", "psst bob", "a broadcast"]
    assert await visible_to("dan") == ["hi all", "a broadcast"]


async def test_broadcast_kind_is_visible_whatever_the_recipient(create, visible_to, registered):
    await create("alice", "bob", "loud to bob", kind="broadcast-message")

    assert await visible_to("dan") == ["loud to bob"]


async def test_limit_keeps_most_recent(create, visible_to, registered):
    for text in ("m1", "m2", "m3", "m4", "m5"):
        await create("carol", "Todos", text)

    assert await visible_to("bob", limit=2) == ["m4", "m5"]
    assert await visible_to("bob", limit=10) == ["m1", "m2", "m3", "m4", "m5"]
    assert await visible_to("bob", limit=0) == ["m1", "m2", "m3", "m4", "m5"]
    assert await visible_to("bob", limit=-3) == ["m1", "m2", "m3", "m4", "m5"]


async def test_update_by_author(create, message_repository, participant_repository, registered):
    message = await create("alice", "Todos", "typo")
    handler = UpdateMessageHandler(message_repository, participant_repository)

    updated = await handler.execute(
        UpdateMessageCommand(
            message_id=message.id,
            requester=ParticipantName("alice"),
            to="bob",
            text="fixed",
            kind="private-message",
        )
    )

    stored = await message_repository.get_by_id(message.id)
    assert stored.text == "fixed"
    assert stored.to == "bob"
    assert stored.kind.value == "private-message"
    assert stored.sender.value == "alice"
    assert updated.sent_at >= message.sent_at


async def test_update_by_someone_else_is_unauthorized(
    create, message_repository, participant_repository, registered
):
    message = await create("alice", "Todos", "mine")
    handler = UpdateMessageHandler(message_repository, participant_repository)

    with pytest.raises(UnauthorizedError):
        await handler.execute(
            UpdateMessageCommand(
                message_id=message.id,
                requester=ParticipantName("bob"),
                to="Todos",
                text="not yours",
                kind="broadcast-message",
            )
        )
    assert (await message_repository.get_by_id(message.id)).text == "mine"


async def test_update_cannot_turn_message_into_status(
    create, message_repository, participant_repository, registered
):
    message = await create("alice", "Todos", "hello")
    handler = UpdateMessageHandler(message_repository, participant_repository)

    with pytest.raises(DomainValidationError):
        await handler.execute(
            UpdateMessageCommand(
                message_id=message.id,
                requester=ParticipantName("alice"),
                to="Todos",
                text="entra na sala...",
                kind="status",
            )
        )


async def test_update_missing_message(message_repository, participant_repository, registered):
    handler = UpdateMessageHandler(message_repository, participant_repository)

    with pytest.raises(EntityNotFoundError):
        await handler.execute(
            UpdateMessageCommand(
                message_id=MessageId.generate(),
                requester=ParticipantName("alice"),
                to="Todos",
                text="x",
                kind="broadcast-message",
            )
        )


async def test_delete_checks_owner(create, message_repository, registered):
    message = await create("alice", "Todos", "bye")
    handler = DeleteMessageHandler(message_repository)

    with pytest.raises(UnauthorizedError):
        await handler.execute(
            DeleteMessageCommand(message_id=message.id, requester=ParticipantName("bob"))
        )

    await handler.execute(
        DeleteMessageCommand(message_id=message.id, requester=ParticipantName("alice"))
    )
    assert await message_repository.get_by_id(message.id) is None

    with pytest.raises(EntityNotFoundError):
        await handler.execute(
            DeleteMessageCommand(message_id=message.id, requester=ParticipantName("alice"))
        )


def test_is_owner():
    message = Message.create(
        sender=ParticipantName("alice"), to="Todos", text="x", kind="broadcast-message"
    )

    assert is_owner(message, ParticipantName("alice"))
    assert is_owner(message, ParticipantName("  alice "))
    assert not is_owner(message, ParticipantName("Alice"))


def test_malformed_message_id_is_not_found():
    with pytest.raises(EntityNotFoundError):
        MessageId("not-a-uuid")

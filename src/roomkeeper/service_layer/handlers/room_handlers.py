"""Handlers relating to room membership."""

import logging
from collections.abc import Awaitable, Callable

from roomkeeper.domain.aggregates import Room
from roomkeeper.domain.errors import ParticipantNotFoundError, RoomClosedError
from roomkeeper.interfaces.room_store import (
    PersistenceError,
    RoomNotFoundError,
    RoomStore,
)
from roomkeeper.service_layer import commands
from roomkeeper.service_layer.results import Failure, Success

logger = logging.getLogger(__name__)

FIELD_IDENTITY_CODE = "identity_code"
FIELD_TARGET_ID = "target_id"
FIELD_ROOM = "room"

ACTOR_NOT_FOUND_MSG = "Participant with the specified identity code was not found."
NOT_ADMIN_MSG = "Only the room administrator can remove participants."
TARGET_NOT_IN_ROOM_MSG = (
    "Participant with the specified id does not belong to this room."
)
DIFFERENT_TARGET_MSG = (
    "Cannot remove a different participant: "
    "only the acting participant can be removed."
)
ROOM_CLOSED_MSG = "The room is already closed. Cannot remove participant."
ROOM_VANISHED_MSG = "The room could not be reloaded after the update."


# ============================================================================
#                   Room Membership Handlers
# ============================================================================


async def remove_participant(
    cmd: commands.RemoveParticipant, room_store: RoomStore
) -> Success[Room] | Failure:
    """Remove a participant from the acting participant's room.

    The checks run in a fixed order and stop at the first failure. The room is
    written once, only after every check and the aggregate mutation passed,
    and the returned room is re-read from the store.

    Note:
        The actor must be an administrator *and* the target must be the actor,
        so the only removal this path allows is an administrator leaving.
    """

    # 1) Resolve the acting room
    try:
        room = await room_store.get_by_participant_code(cmd.identity_code)
    except RoomNotFoundError:
        logger.debug("RemoveParticipant: no room for identity code")
        return Failure.not_found(FIELD_IDENTITY_CODE, ACTOR_NOT_FOUND_MSG)

    # 2) Acting participant must be an administrator
    actor = room.find_by_identity_code(cmd.identity_code)
    if actor is None or not actor.is_admin:
        logger.debug("RemoveParticipant %s: actor is not admin", room.room_code)
        return Failure.forbidden(FIELD_IDENTITY_CODE, NOT_ADMIN_MSG)

    # 3) Target must belong to the same room
    if room.find_by_id(cmd.target_id) is None:
        logger.debug(
            "RemoveParticipant %s: target %s not in room", room.room_code, cmd.target_id
        )
        return Failure.bad_request(FIELD_TARGET_ID, TARGET_NOT_IN_ROOM_MSG)

    # 4) Target must be the actor
    if actor.participant_id != cmd.target_id:
        logger.debug(
            "RemoveParticipant %s: actor %s targets %s",
            room.room_code,
            actor.participant_id,
            cmd.target_id,
        )
        return Failure.bad_request(FIELD_TARGET_ID, DIFFERENT_TARGET_MSG)

    # 5) Room must be open
    if room.is_closed:
        logger.debug("RemoveParticipant %s: room closed", room.room_code)
        return Failure.bad_request(FIELD_ROOM, ROOM_CLOSED_MSG)

    # 6) Mutate through the aggregate
    try:
        room.remove_participant(cmd.target_id)
    except ParticipantNotFoundError as e:
        return Failure.not_found(FIELD_TARGET_ID, str(e))
    except RoomClosedError as e:
        return Failure.bad_request(FIELD_ROOM, str(e))

    # 7) Persist
    try:
        await room_store.update(room)
    except PersistenceError as e:
        logger.warning("RemoveParticipant %s: update rejected: %s", room.room_code, e)
        return Failure.bad_request("", str(e))

    logger.info(
        "Removed participant %s from room %s", cmd.target_id, room.room_code
    )

    # 8) Return what was committed
    return await _reload(room_store, cmd.identity_code, room.room_code)


async def _reload(
    room_store: RoomStore, identity_code: str, room_code: str
) -> Success[Room] | Failure:
    """Re-read the room, by the actor's code while it still resolves."""
    try:
        return Success(await room_store.get_by_participant_code(identity_code))
    except RoomNotFoundError:
        # the actor removed themselves
        logger.debug("Reloading room %s by room code", room_code)
    try:
        return Success(await room_store.get_by_room_code(room_code))
    except RoomNotFoundError:
        return Failure.not_found(FIELD_ROOM, ROOM_VANISHED_MSG)


COMMAND_HANDLERS: dict[type, Callable[..., Awaitable[object]]] = {
    commands.RemoveParticipant: remove_participant
}

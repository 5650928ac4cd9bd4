"""Presentation shapes for handler results.

Turns `Success`/`Failure` values into plain dicts ready for JSON or inline
display, and holds the advisory rule deciding whether a viewer should be
offered the remove action at all.

Identity codes are credentials and are never rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from roomkeeper.service_layer.results import Failure, Success

if TYPE_CHECKING:
    from roomkeeper.domain.aggregates import Room
    from roomkeeper.domain.entities import Participant


def render_participant(participant: Participant) -> dict[str, Any]:
    """Public view of a participant."""
    return {
        "id": participant.participant_id,
        "first_name": participant.first_name,
        "last_name": participant.last_name,
        "is_admin": participant.is_admin,
    }


def render_room(room: Room) -> dict[str, Any]:
    """Public view of a room and its participant list, in display order."""
    return {
        "room_code": room.room_code,
        "closed_on": room.closed_on.isoformat() if room.closed_on else None,
        "participants": [render_participant(p) for p in room.participants],
    }


def render_failure(failure: Failure) -> dict[str, Any]:
    """Error object: ``{"kind": ..., "failures": [{"field", "message"}, ...]}``."""
    return {
        "kind": failure.kind.value,
        "failures": [
            {"field": item.field, "message": item.message}
            for item in failure.failures
        ],
    }


def render_result(result: Success[Room] | Failure) -> dict[str, Any]:
    """Render either side of a room-returning handler result."""
    match result:
        case Success(value=room):
            return render_room(room)
        case Failure():
            return render_failure(result)
        case _:
            raise TypeError(f"Unexpected result type: {type(result).__name__}")


def can_offer_removal(viewer: Participant, target: Participant) -> bool:
    """Whether a client should show the remove action for ``target``.

    Only administrators see it, and never on their own card or on another
    administrator's. This is a display hint; the removal workflow enforces
    its own rules regardless.
    """
    return (
        viewer.is_admin
        and target.participant_id != viewer.participant_id
        and not target.is_admin
    )

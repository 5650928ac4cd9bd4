"""Room Aggregate"""

from collections.abc import Iterable
from datetime import datetime, timezone

from roomkeeper.domain import errors
from roomkeeper.domain.entities import Participant

from .base import Aggregate


class Room(Aggregate):
    """Aggregate root representing a shared room and its participants.

    The room is the only sanctioned mutator of its participant collection.
    Participant order is the insertion order and is preserved across
    mutations.
    """

    def __init__(
        self,
        room_code: str,
        participants: Iterable[Participant] = (),
        *,
        closed_on: datetime | None = None,
        version: int = 0,
    ) -> None:
        super().__init__(room_code, version=version)
        self._participants: list[Participant] = list(participants)
        self.closed_on: datetime | None = None
        self._check_unique_members()
        if closed_on is not None:
            self.close(closed_on)

    # --- Queries ---

    @property
    def room_code(self) -> str:
        """The externally assigned code identifying the room."""
        return self.aggregate_id

    @property
    def participants(self) -> tuple[Participant, ...]:
        """Participants of the room in display order."""
        return tuple(self._participants)

    @property
    def is_closed(self) -> bool:
        """True once the room has a closed timestamp."""
        return self.closed_on is not None

    def find_by_identity_code(self, identity_code: str) -> Participant | None:
        """Return the participant holding ``identity_code``, if any."""
        for participant in self._participants:
            if participant.identity_code == identity_code:
                return participant
        return None

    def find_by_id(self, participant_id: int) -> Participant | None:
        """Return the participant with ``participant_id``, if any."""
        for participant in self._participants:
            if participant.participant_id == participant_id:
                return participant
        return None

    # --- State Transitions ---

    def remove_participant(self, participant_id: int) -> None:
        """Remove exactly one participant from the room.

        Args:
            participant_id: Numeric id of the participant to remove.

        Raises:
            RoomClosedError: If the room is closed.
            ParticipantNotFoundError: If no participant has ``participant_id``.
        """

        if self.is_closed:
            raise errors.RoomClosedError(self.room_code)

        for index, participant in enumerate(self._participants):
            if participant.participant_id == participant_id:
                del self._participants[index]
                return

        raise errors.ParticipantNotFoundError(self.room_code, participant_id)

    def close(self, closed_on: datetime) -> None:
        """Mark the room as closed at ``closed_on``.

        Naive datetimes are taken as UTC. Closing an already closed room keeps
        the original timestamp.
        """
        if self.is_closed:
            return
        if closed_on.tzinfo is None:
            closed_on = closed_on.replace(tzinfo=timezone.utc)
        self.closed_on = closed_on.astimezone(timezone.utc)

    # --- Internal Helpers ---

    def _check_unique_members(self) -> None:
        ids = [p.participant_id for p in self._participants]
        if len(ids) != len(set(ids)):
            raise errors.InvalidRoomError(
                f"Room {self.room_code} has duplicate participant ids."
            )
        codes = [p.identity_code for p in self._participants]
        if len(codes) != len(set(codes)):
            raise errors.InvalidRoomError(
                f"Room {self.room_code} has duplicate identity codes."
            )

    def __repr__(self) -> str:
        return (
            f"Room(room_code={self.room_code!r}, "
            f"participants={len(self._participants)}, "
            f"closed_on={self.closed_on!r}, version={self.version})"
        )

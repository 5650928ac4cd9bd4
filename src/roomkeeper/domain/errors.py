"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidRoomError(DomainError):
    """Raised when a room would be built in a state that breaks its invariants."""


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                       Room membership related errors
# ============================================================================


class ParticipantNotFoundError(DomainError):
    """Raised when a room has no participant with the requested id."""

    def __init__(self, room_code: str, participant_id: int) -> None:
        super().__init__(
            f"Participant with id {participant_id} does not exist in room {room_code}."
        )
        self.room_code = room_code
        self.participant_id = participant_id


class RoomClosedError(InvalidTransitionError):
    """Raised when a membership change is attempted on a closed room."""

    def __init__(self, room_code: str) -> None:
        super().__init__(f"Room {room_code} is already closed.")
        self.room_code = room_code

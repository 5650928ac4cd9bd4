"""Entities owned by the Room aggregate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Participant:
    """A member of a room.

    The numeric id and the identity code are both unique within the owning
    room. The identity code proves which participant a request acts as.
    """

    participant_id: int
    identity_code: str
    first_name: str
    last_name: str
    is_admin: bool = False

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

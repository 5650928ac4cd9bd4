"""Module defining Commands."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class RemoveParticipant(Command):
    """Command to remove a participant from the acting participant's room."""

    identity_code: str = field(repr=False)
    target_id: int

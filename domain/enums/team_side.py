"""Team side enumeration."""
from enum import Enum

# Upstream slots: 0-4 Radiant, 128-132 Dire.
DIRE_SLOT_OFFSET = 128


class TeamSide(Enum):
    """The two sides of a Dota 2 match."""

    RADIANT = "radiant"
    DIRE = "dire"

    @classmethod
    def from_slot(cls, player_slot: int) -> 'TeamSide':
        """Resolve the side encoded in an upstream player slot."""
        return cls.RADIANT if player_slot < DIRE_SLOT_OFFSET else cls.DIRE

    @classmethod
    def winner(cls, radiant_win: bool) -> 'TeamSide':
        """Get the winning side from the upstream winner flag."""
        return cls.RADIANT if radiant_win else cls.DIRE

    @property
    def label(self) -> str:
        return self.value.capitalize()

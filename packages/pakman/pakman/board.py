"""Board - the simulation context shared by every system."""
from __future__ import annotations

from dataclasses import dataclass, field

from pakman.grid import Grid
from pakman.occupants import Adversary, Occupant, Player
from pakman.types import Coord


@dataclass
class Board:
    """Owns the grid, the actors and the remaining small-item count.

    The player is not stored in the grid: the cell beneath it always holds
    an Empty, and :meth:`occupant_at` overlays the player for display.
    """

    grid: Grid
    player: Player
    adversaries: list[Adversary] = field(default_factory=list)
    dots_remaining: int = 0

    def occupant_at(self, coord: Coord) -> Occupant:
        """What should be drawn at *coord*."""
        if self.player.alive and self.player.coord == coord:
            return self.player
        return self.grid.at(coord)

    def spawn_adversary(self, coord: Coord) -> Adversary:
        """Place a new adversary at *coord*, covering whatever is there."""
        under = self.grid.at(coord)
        adversary = Adversary(
            coord=coord,
            ident=len(self.adversaries) + 1,
            understudy=None if isinstance(under, Adversary) else under,
        )
        self.grid.set(coord, adversary)
        self.adversaries.append(adversary)
        return adversary

    def remove_adversary(self, adversary: Adversary) -> None:
        self.adversaries.remove(adversary)

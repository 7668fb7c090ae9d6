"""The ocean: a registry of ships and pirates with the operations on them."""

from __future__ import annotations

from .avltree import AVLTree
from .ship import Pirate, Ship


class OceanError(Exception):
    """Base class for errors raised by :class:`Ocean`."""


class InvalidInput(OceanError, ValueError):
    """An argument is out of its allowed range."""


class Failure(OceanError):
    """The operation cannot be carried out in the ocean's current state."""


class Ocean:
    """Ships and pirates, indexed by id."""

    def __init__(self) -> None:
        self._ships: AVLTree[int, Ship] = AVLTree()
        self._pirates: AVLTree[int, Pirate] = AVLTree()

    def _ship(self, ship_id: int) -> Ship:
        ship = self._ships.find(ship_id)
        if ship is None:
            raise Failure(f"no ship with id {ship_id}")
        return ship

    def _pirate(self, pirate_id: int) -> Pirate:
        pirate = self._pirates.find(pirate_id)
        if pirate is None:
            raise Failure(f"no pirate with id {pirate_id}")
        return pirate

    def add_ship(self, ship_id: int, cannons: int) -> None:
        """Add a new empty ship."""
        if ship_id <= 0 or cannons < 0:
            raise InvalidInput("ship id must be positive and cannons non-negative")
        if ship_id in self._ships:
            raise Failure(f"ship {ship_id} already exists")
        self._ships.insert(ship_id, Ship(ship_id, cannons))

    def remove_ship(self, ship_id: int) -> None:
        """Remove a ship that has no crew."""
        if ship_id <= 0:
            raise InvalidInput("ship id must be positive")
        ship = self._ship(ship_id)
        if len(ship):
            raise Failure(f"ship {ship_id} still has a crew")
        self._ships.remove(ship_id)

    def add_pirate(self, pirate_id: int, ship_id: int, treasure: int) -> None:
        """Put a new pirate with ``treasure`` aboard an existing ship."""
        if ship_id <= 0 or pirate_id <= 0:
            raise InvalidInput("ids must be positive")
        if pirate_id in self._pirates:
            raise Failure(f"pirate {pirate_id} already exists")
        ship = self._ship(ship_id)
        pirate = Pirate(pirate_id, treasure, ship)
        self._pirates.insert(pirate_id, pirate)
        ship.add_pirate(pirate)

    def remove_pirate(self, pirate_id: int) -> None:
        """Remove a pirate from the ocean and from its ship."""
        if pirate_id <= 0:
            raise InvalidInput("pirate id must be positive")
        pirate = self._pirate(pirate_id)
        if pirate.ship is not None:
            pirate.ship.free_pirate(pirate)
        self._pirates.remove(pirate_id)

    def treason(self, source_ship_id: int, dest_ship_id: int) -> None:
        """Move the longest-serving pirate of the source ship to the destination."""
        if source_ship_id <= 0 or dest_ship_id <= 0 or source_ship_id == dest_ship_id:
            raise InvalidInput("ship ids must be positive and distinct")
        source = self._ship(source_ship_id)
        dest = self._ship(dest_ship_id)
        oldest = source.oldest_pirate_id()
        if oldest is None:
            raise Failure(f"ship {source_ship_id} has no crew")
        pirate = self._pirate(oldest)
        source.free_pirate(pirate)
        pirate.settle_bonus()
        dest.add_pirate(pirate)

    def update_pirate_treasure(self, pirate_id: int, change: int) -> None:
        """Change a pirate's treasure by ``change``."""
        if pirate_id <= 0:
            raise InvalidInput("pirate id must be positive")
        pirate = self._pirate(pirate_id)
        assert pirate.ship is not None
        pirate.ship.change_treasure(pirate, change)

    def get_treasure(self, pirate_id: int) -> int:
        """Return a pirate's current treasure."""
        if pirate_id <= 0:
            raise InvalidInput("pirate id must be positive")
        return self._pirate(pirate_id).treasure()

    def get_cannons(self, ship_id: int) -> int:
        """Return the number of cannons on a ship."""
        if ship_id <= 0:
            raise InvalidInput("ship id must be positive")
        return self._ship(ship_id).cannons

    def get_richest_pirate(self, ship_id: int) -> int:
        """Return the id of the richest pirate aboard a ship."""
        if ship_id <= 0:
            raise InvalidInput("ship id must be positive")
        richest = self._ship(ship_id).richest_pirate()
        if richest is None:
            raise Failure(f"ship {ship_id} has no crew")
        return richest

    def ships_battle(self, ship_id1: int, ship_id2: int) -> None:
        """Fight two ships; the winner's crew gains, the loser's crew pays."""
        if ship_id1 <= 0 or ship_id2 <= 0 or ship_id1 == ship_id2:
            raise InvalidInput("ship ids must be positive and distinct")
        first = self._ship(ship_id1)
        second = self._ship(ship_id2)
        strength1 = min(len(first), first.cannons)
        strength2 = min(len(second), second.cannons)
        if strength1 > strength2:
            winner, loser = first, second
        elif strength2 > strength1:
            winner, loser = second, first
        else:
            return
        winner_size, loser_size = len(winner), len(loser)
        winner.add_bonus_treasure(loser_size)
        loser.add_bonus_treasure(-winner_size)
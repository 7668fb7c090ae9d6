"""Ships and the pirates that crew them."""

from __future__ import annotations

from .avltree import AVLTree


class Pirate:
    """A pirate whose visible treasure includes the bonus of the ship it sails on.

    The stored amount is kept relative to the ship's bonus at the moment the
    pirate joined, so a bonus granted to a whole ship costs O(1).
    """

    def __init__(self, pirate_id: int, treasure: int, ship: Ship | None = None) -> None:
        self.pirate_id = pirate_id
        self.ship = ship
        self.joined = 0
        self._stored = treasure

    def treasure(self) -> int:
        """Return the pirate's current treasure, ship bonus included."""
        bonus = self.ship.bonus_treasure if self.ship is not None else 0
        return self._stored + bonus

    def settle_bonus(self) -> None:
        """Fold the current ship's bonus into the pirate's own stored treasure."""
        if self.ship is not None:
            self._stored += self.ship.bonus_treasure

    def _wealth_key(self) -> tuple[int, int]:
        # Smallest key is the richest pirate; ties go to the higher id.
        return (-self._stored, -self.pirate_id)

    def __repr__(self) -> str:
        return f"Pirate(pirate_id={self.pirate_id}, treasure={self.treasure()})"


class Ship:
    """A ship tracking its crew by id, by order of arrival and by wealth."""

    def __init__(self, ship_id: int, cannons: int) -> None:
        self.ship_id = ship_id
        self.cannons = cannons
        self.bonus_treasure = 0
        self._members: AVLTree[int, Pirate] = AVLTree()
        self._by_age: AVLTree[int, Pirate] = AVLTree()
        self._by_wealth: AVLTree[tuple[int, int], Pirate] = AVLTree()
        self._next_order = 0

    def __len__(self) -> int:
        return len(self._members)

    def add_pirate(self, pirate: Pirate) -> bool:
        """Take ``pirate`` aboard; return False if it is already a crew member."""
        if pirate.pirate_id in self._members:
            return False
        pirate.ship = self
        pirate._stored -= self.bonus_treasure
        pirate.joined = self._next_order
        self._members.insert(pirate.pirate_id, pirate)
        self._by_age.insert(pirate.joined, pirate)
        self._by_wealth.insert(pirate._wealth_key(), pirate)
        self._next_order += 1
        return True

    def free_pirate(self, pirate: Pirate) -> bool:
        """Drop ``pirate`` from the crew; return False if it was not aboard."""
        if not self._members.remove(pirate.pirate_id):
            return False
        self._by_age.remove(pirate.joined)
        self._by_wealth.remove(pirate._wealth_key())
        return True

    def add_bonus_treasure(self, amount: int) -> None:
        """Add ``amount`` to the treasure of every pirate currently aboard."""
        self.bonus_treasure += amount

    def oldest_pirate_id(self) -> int | None:
        """Return the id of the pirate aboard the longest, or None if empty."""
        entry = self._by_age.first()
        return entry[1].pirate_id if entry is not None else None

    def change_treasure(self, pirate: Pirate, amount: int) -> None:
        """Change the treasure of a crew member by ``amount``."""
        self._by_wealth.remove(pirate._wealth_key())
        pirate._stored += amount
        self._by_wealth.insert(pirate._wealth_key(), pirate)

    def richest_pirate(self) -> int | None:
        """Return the id of the richest pirate (higher id on ties), or None."""
        entry = self._by_wealth.first()
        return entry[1].pirate_id if entry is not None else None

    def __repr__(self) -> str:
        return f"Ship(ship_id={self.ship_id}, cannons={self.cannons}, crew={len(self)})"
# pirateocean

A small library that models an ocean of ships and the pirates aboard them.
Ships and pirates are kept in self-balancing AVL trees, so lookups, inserts and
removals take logarithmic time. A bonus given to a whole ship costs constant
time.

It has no dependencies outside the standard library. It needs Python 3.10 or
later.

## Installing

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## The ocean

`pirateocean.ocean.Ocean` is the main entry point.

```python
from pirateocean.ocean import Ocean, Failure, InvalidInput

ocean = Ocean()
ocean.add_ship(1, cannons=3)
ocean.add_ship(2, cannons=1)

ocean.add_pirate(10, 1, treasure=50)
ocean.add_pirate(11, 1, treasure=20)
ocean.add_pirate(12, 2, treasure=5)

ocean.get_richest_pirate(1)    # 10
ocean.update_pirate_treasure(11, 40)
ocean.get_richest_pirate(1)    # 11

ocean.ships_battle(1, 2)       # ship 1 wins: its pirates gain 1 each, ship 2's lose 2
ocean.get_treasure(12)         # 3

ocean.treason(1, 2)            # pirate 10, aboard ship 1 the longest, moves to ship 2
ocean.get_cannons(2)           # 1
```

Operations on `Ocean`:

- `add_ship(ship_id, cannons)` adds an empty ship. `remove_ship(ship_id)`
  removes a ship, which must have no crew.
- `add_pirate(pirate_id, ship_id, treasure)` puts a new pirate aboard an
  existing ship. `remove_pirate(pirate_id)` removes a pirate from the ocean
  and from its ship.
- `treason(source_ship_id, dest_ship_id)` moves the pirate who has been aboard
  the source ship the longest to the destination ship. The pirate keeps the
  treasure it had, bonuses from its old ship included.
- `update_pirate_treasure(pirate_id, change)` adds `change` (which may be
  negative) to a pirate's treasure.
- `ships_battle(ship_id1, ship_id2)` compares, for each ship, the smaller of
  its crew size and its cannon count. Every pirate of the winning ship gains
  the loser's crew size in treasure, and every pirate of the losing ship loses
  the winner's crew size. A draw changes nothing.
- `get_treasure(pirate_id)`, `get_cannons(ship_id)` and
  `get_richest_pirate(ship_id)` return their values directly. The richest
  pirate is the one with the most treasure; among equals the higher id wins.

The mutating operations return `None`.

### Errors

Bad arguments, such as non-positive ids, negative cannons or the same ship
given twice, raise `InvalidInput` (which is also a `ValueError`). Calls that
cannot be carried out in the ocean's current state, such as an unknown id, an
id already in use, removing a ship with a crew, or asking an empty ship for
its richest pirate or for a traitor, raise `Failure`. Both derive from
`OceanError`.

```python
try:
    ocean.remove_ship(1)
except Failure:
    ...  # ship 1 still has a crew
```

## Building blocks

`pirateocean.ship` provides the two classes the ocean is made of:

- `Pirate(pirate_id, treasure, ship=None)` has `pirate_id`, `ship`, the
  method `treasure()` that returns its current treasure including its ship's
  bonus, and `settle_bonus()` that folds the current ship's bonus into the
  pirate's own amount.
- `Ship(ship_id, cannons)` has `ship_id`, `cannons` and `bonus_treasure`;
  `len(ship)` is its crew size. `add_pirate(pirate)` and `free_pirate(pirate)`
  return `False` when the pirate is already aboard or not aboard.
  `add_bonus_treasure(amount)` changes every crew member's treasure at once,
  `change_treasure(pirate, amount)` changes one crew member's, and
  `oldest_pirate_id()` and `richest_pirate()` return an id, or `None` for an
  empty ship.

`pirateocean.avltree.AVLTree` is a general ordered map over any keys that
support `<`:

```python
from pirateocean.avltree import AVLTree

tree = AVLTree()
tree.insert(3, "c")     # True
tree.insert(1, "a")
tree.insert(2, "b")
tree.insert(2, "x")     # False: the key exists, the tree is unchanged
list(tree)              # [1, 2, 3]
list(tree.items())      # [(1, "a"), (2, "b"), (3, "c")]
list(tree.values())     # ["a", "b", "c"]
tree.first()            # (1, "a")
tree.find(2)            # "b"
tree.find(7)            # None
2 in tree               # True
tree.remove(2)          # True
tree.remove(2)          # False
len(tree)               # 2
tree.height()           # 1; 0 for one node, -1 when empty
```

## What it does not do

The package is a library only. It has no command-line program and keeps
everything in memory: there is no way to save an ocean to a file or load one.
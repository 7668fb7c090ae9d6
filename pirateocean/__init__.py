"""Ships, pirates and treasure kept in balanced AVL trees."""

__version__ = "0.1.0"
__all__ = ["avltree", "ship", "ocean"]
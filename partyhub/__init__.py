"""Board graph and game-tree search primitives shared by the party game hub."""

__version__ = "0.1.0"

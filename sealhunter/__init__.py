"""A small sprite-animated arcade game: a player that walks, sits down and gets up."""

__version__ = "0.0.1"
__all__ = ["game", "player"]
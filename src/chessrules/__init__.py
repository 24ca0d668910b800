"""chessrules — a chess rules core: move generation, legality, outcomes, hashing."""

__version__ = "0.1.0"

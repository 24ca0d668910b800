"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.fen import STARTING_FEN, position_from_fen
from chessrules.core.position import Position


@pytest.fixture
def start() -> Position:
    """A fresh standard starting position."""
    return position_from_fen(STARTING_FEN)

"""Tests for laying tile graphs out on the grid."""

import pytest

from src.blockworld import Position, Tile, WoodBlock, WorldMapInconsistentError
from src.mapfile import compute_positions, render_grid


def link(tiles, source, direction, target):
    tiles[source].add_exit(direction, tiles[target])


class TestConsistentLayouts:
    """Test graphs that can be placed on the grid."""

    def test_single_tile(self):
        """A lone tile sits at the start position."""
        tile = Tile()
        index = compute_positions(tile, Position(4, -2))
        assert index.order == [tile]
        assert index.tile_at(Position(4, -2)) is tile
        assert index.position_of(tile) == Position(4, -2)

    def test_reciprocal_pair(self):
        """0 north to 1 and 1 south back to 0 puts tile 1 at (0, 1)."""
        tiles = [Tile() for _ in range(2)]
        link(tiles, 0, "north", 1)
        link(tiles, 1, "south", 0)
        index = compute_positions(tiles[0], Position(0, 0))
        assert index.position_of(tiles[1]) == Position(0, 1)

    def test_direction_vectors(self):
        """Each direction moves one cell along its axis."""
        tiles = [Tile() for _ in range(5)]
        for target, direction in enumerate(["north", "east", "south", "west"], start=1):
            link(tiles, 0, direction, target)
        index = compute_positions(tiles[0], Position(10, 10))
        assert index.position_of(tiles[1]) == Position(10, 11)
        assert index.position_of(tiles[2]) == Position(11, 10)
        assert index.position_of(tiles[3]) == Position(10, 9)
        assert index.position_of(tiles[4]) == Position(9, 10)

    def test_breadth_first_order(self):
        """Tiles are ordered by distance, exits visited north first."""
        tiles = [Tile() for _ in range(4)]
        link(tiles, 0, "west", 1)
        link(tiles, 0, "north", 2)
        link(tiles, 2, "north", 3)
        index = compute_positions(tiles[0], Position(0, 0))
        assert index.order == [tiles[0], tiles[2], tiles[1], tiles[3]]

    def test_loop_around_a_square(self):
        """A cycle that closes on its start is consistent."""
        tiles = [Tile() for _ in range(4)]
        link(tiles, 0, "north", 1)
        link(tiles, 1, "east", 2)
        link(tiles, 2, "south", 3)
        link(tiles, 3, "west", 0)
        index = compute_positions(tiles[0], Position(0, 0))
        assert len(index.order) == 4
        assert index.tile_at(Position(1, 0)) is tiles[3]

    def test_unreachable_tiles_are_left_out(self):
        """Tiles only pointing in are not part of the layout."""
        tiles = [Tile() for _ in range(3)]
        link(tiles, 0, "east", 1)
        link(tiles, 2, "west", 0)
        index = compute_positions(tiles[0], Position(0, 0))
        assert index.order == [tiles[0], tiles[1]]
        assert index.position_of(tiles[2]) is None


class TestInconsistentLayouts:
    """Test graphs that imply impossible positions."""

    def test_tile_needs_two_positions(self):
        """Reaching a tile from two sides at different cells fails."""
        tiles = [Tile() for _ in range(3)]
        link(tiles, 0, "north", 1)
        link(tiles, 0, "east", 2)
        link(tiles, 1, "east", 2)
        with pytest.raises(WorldMapInconsistentError) as exc_info:
            compute_positions(tiles[0], Position(0, 0))
        assert exc_info.value.code == "POSITION_CONFLICT"

    def test_two_tiles_claim_one_cell(self):
        """Two distinct tiles cannot share a cell."""
        tiles = [Tile() for _ in range(5)]
        link(tiles, 0, "north", 1)
        link(tiles, 0, "east", 2)
        link(tiles, 1, "east", 4)
        link(tiles, 2, "north", 3)
        with pytest.raises(WorldMapInconsistentError) as exc_info:
            compute_positions(tiles[0], Position(0, 0))
        assert exc_info.value.code == "CELL_CONFLICT"

    def test_exit_to_itself(self):
        """A tile cannot be its own neighbour."""
        tile = Tile()
        tile.add_exit("north", tile)
        with pytest.raises(WorldMapInconsistentError):
            compute_positions(tile, Position(0, 0))

    def test_one_way_back_to_wrong_side(self):
        """Going north twice cannot return to the start."""
        tiles = [Tile() for _ in range(2)]
        link(tiles, 0, "north", 1)
        link(tiles, 1, "north", 0)
        with pytest.raises(WorldMapInconsistentError):
            compute_positions(tiles[0], Position(0, 0))

    def test_coordinate_overflow(self):
        """Stepping past the 32-bit range fails without wrapping."""
        tiles = [Tile() for _ in range(2)]
        link(tiles, 0, "east", 1)
        with pytest.raises(WorldMapInconsistentError) as exc_info:
            compute_positions(tiles[0], Position(2 ** 31 - 1, 0))
        assert exc_info.value.code == "COORDINATE_OVERFLOW"


class TestRenderGrid:
    """Test rendering tile heights."""

    def test_empty(self):
        """No cells render as an empty string."""
        assert render_grid({}) == ""

    def test_north_at_top(self):
        """Higher y rows come first and gaps show as dots."""
        low = Tile()
        high = Tile.create([WoodBlock(), WoodBlock()])
        cells = {Position(0, 0): low, Position(1, 1): high}
        assert render_grid(cells) == ".2\n0."

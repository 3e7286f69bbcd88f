"""Tests for the action interpreter."""

import io

import pytest

from src.blockworld import (
    ActionFormatError,
    SoilBlock,
    WoodBlock,
    WorldMap,
    parse_action,
    process_actions,
)


@pytest.fixture
def world(sample_map):
    return WorldMap.load(sample_map)


def run(world, text):
    out = io.StringIO()
    process_actions(io.StringIO(text), world, out=out)
    return out.getvalue().splitlines()


class TestParseAction:
    """Test the action line grammar."""

    @pytest.mark.parametrize("line,expected", [
        ("MOVE_BUILDER north", ("MOVE_BUILDER", "north")),
        ("MOVE_BLOCK up", ("MOVE_BLOCK", "up")),
        ("DIG", ("DIG", None)),
        ("DROP 2", ("DROP", "2")),
    ])
    def test_valid(self, line, expected):
        """Keywords split from their single argument."""
        assert parse_action(line) == expected

    @pytest.mark.parametrize("line", [
        "",
        "JUMP",
        "dig",
        "DIG now",
        "DROP",
        "MOVE_BUILDER",
        "MOVE_BUILDER north east",
    ])
    def test_invalid(self, line):
        """Unknown keywords and wrong argument counts are rejected."""
        with pytest.raises(ActionFormatError):
            parse_action(line)


class TestProcessActions:
    """Test running actions against the sample world."""

    def test_move_builder(self, world):
        """The builder follows an exit."""
        assert run(world, "MOVE_BUILDER north\n") == ["Moving builder north"]
        assert world.builder.current_tile is world.tile_at((0, 1))

    def test_move_builder_without_exit(self, world):
        """A missing exit is reported and processing continues."""
        messages = run(world, "MOVE_BUILDER north\nMOVE_BUILDER east\n")
        assert messages == ["Moving builder north", "No exit this way"]

    def test_move_builder_bad_direction(self, world):
        """An unknown direction prints the invalid action message."""
        assert run(world, "MOVE_BUILDER up\n") == ["Error: Invalid action"]

    def test_move_block(self, world):
        """The top block moves to the lower neighbour."""
        assert run(world, "MOVE_BLOCK north\n") == ["Moving block north"]
        assert world.tile_at((0, 1)).blocks == [SoilBlock(), WoodBlock()]

    def test_move_block_uphill(self, world):
        """Blocks cannot be moved onto a higher tile."""
        assert run(world, "MOVE_BLOCK east\n") == ["Too high"]

    def test_move_block_without_exit(self, world):
        """Moving a block needs an exit."""
        assert run(world, "MOVE_BLOCK west\n") == ["No exit this way"]

    def test_dig(self, world):
        """Digging down to nothing ends with too low."""
        messages = run(world, "DIG\nDIG\nDIG\n")
        assert messages == [
            "Top block on current tile removed",
            "Top block on current tile removed",
            "Too low",
        ]
        assert world.builder.inventory == [WoodBlock(), SoilBlock(), WoodBlock()]

    def test_drop(self, world):
        """Dropping a missing index cannot use that block."""
        assert run(world, "DROP 0\nDROP 5\n") == [
            "Dropped a block from inventory",
            "Cannot use that block",
        ]
        assert world.builder.current_tile.height == 3

    def test_drop_negative_index(self, world):
        """A negative index is well formed but names no block."""
        assert run(world, "DROP -1\n") == ["Cannot use that block"]

    @pytest.mark.parametrize("argument", ["x", "0_0", "1.0", "١"])
    def test_drop_malformed_index(self, world, argument):
        """Only ASCII decimal indexes are accepted."""
        with pytest.raises(ActionFormatError):
            run(world, f"DROP {argument}\n")
        assert len(world.builder.inventory) == 2

    def test_drop_ground_block_too_high(self, world):
        """Soil cannot be dropped onto a tile two blocks high."""
        assert run(world, "DROP 1\n") == ["Too high"]

    def test_format_error_stops_processing(self, world):
        """A malformed line aborts after the earlier actions ran."""
        out = io.StringIO()
        with pytest.raises(ActionFormatError):
            process_actions(io.StringIO("DIG\nDROP x\nDIG\n"), world, out=out)
        assert out.getvalue().splitlines() == ["Top block on current tile removed"]

    def test_prints_to_stdout_by_default(self, world, capsys):
        """Messages go to stdout when no stream is given."""
        process_actions(io.StringIO("DIG\n"), world)
        assert capsys.readouterr().out == "Top block on current tile removed\n"

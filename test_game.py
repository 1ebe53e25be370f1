"""
Test script for the Osero game driver.
"""
import io
import sys
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from osero.board import Board, CellKind, Position, Side
from osero.cli import main
from osero.config import Config, GameConfig
from osero.game import MalformedPosition, OseroGame, TurnOutcome, parse_position

EMPTY_ROW = "++++++++"


def scripted(lines):
    """Input function that replays the given lines."""
    answers = iter(lines)

    def input_fn(prompt):
        return next(answers)
    return input_fn


def no_input(prompt):
    raise AssertionError(f"Unexpected prompt: {prompt}")


def test_parse_position():
    """Well-formed coordinates become grid indices as typed."""
    assert parse_position("3,5") == Position(3, 5)
    assert parse_position(" 4 , 6 ") == (4, 6)
    assert parse_position("0,12") == (0, 12)


@pytest.mark.parametrize("text", ["", "3", "3,", ",5", "a,b", "3,5,1", "-1,2", "3.0,5", "3 5"])
def test_parse_position_rejects_malformed(text):
    """Anything but two unsigned integers is rejected."""
    with pytest.raises(MalformedPosition):
        parse_position(text)


def test_current_side_alternates():
    """Black moves on odd turns."""
    game = OseroGame(out=io.StringIO())
    assert game.current_side is Side.BLACK
    game.turn = 2
    assert game.current_side is Side.WHITE


def test_play_turn_reprompts_until_legal():
    """Bad and illegal input re-prompt without changing the board."""
    out = io.StringIO()
    game = OseroGame(input_fn=scripted(["abc", "1,2,3", "1,1", "4,4", "3,5"]), out=out)

    assert game.play_turn() is TurnOutcome.PLACED

    text = out.getvalue()
    assert text.count("The coordinate is invalid.") == 2
    assert "Cannot place at (1,1)." in text
    assert "Cannot place at (4,4)." in text
    assert "Black's turn" in text
    assert "Black: 2 White: 2" in text
    assert "Legal moves\n(3, 5)\n(4, 6)\n(5, 3)\n(6, 4)\n" in text
    assert game.turn == 2
    assert game.board.cell((4, 5)) == CellKind.BLACK
    assert game.move_history == [(1, Side.BLACK, (3, 5), 1)]


def test_legal_move_listing_can_be_hidden():
    """show_legal_moves=False leaves the list out."""
    out = io.StringIO()
    config = Config(game=GameConfig(show_legal_moves=False))
    game = OseroGame(config=config, input_fn=scripted(["3,5"]), out=out)
    game.play_turn()

    assert "Legal moves" not in out.getvalue()


def test_skip_turn():
    """A side without a move is skipped without prompting; the game goes on."""
    board = Board.from_rows(["WB++++++"] + [EMPTY_ROW] * 7)
    out = io.StringIO()
    game = OseroGame(board=board, input_fn=no_input, out=out)

    assert not board.can_play(Side.BLACK)
    assert board.can_play(Side.WHITE)

    assert game.play_turn() is TurnOutcome.SKIPPED
    assert game.turn == 2
    assert not game.is_over()
    assert "No legal moves, skipping this turn." in out.getvalue()

    game.input_fn = scripted(["1,3"])
    assert game.play_turn() is TurnOutcome.PLACED
    assert board.score() == (0, 3)

    assert game.is_over()
    assert game.play_turn() is TurnOutcome.FINISHED
    assert game.winner() is Side.WHITE


def test_game_end_with_winner():
    """When nobody can move the loop ends and the larger count wins."""
    board = Board.from_rows(["BB++++++"] + [EMPTY_ROW] * 6 + ["+++++++W"])
    out = io.StringIO()
    game = OseroGame(board=board, input_fn=no_input, out=out)

    assert game.is_over()
    assert game.run() is Side.BLACK

    text = out.getvalue()
    assert "Result" in text
    assert "Black: 2 White: 1" in text
    assert text.rstrip().endswith("Black wins.")


def test_game_end_draw():
    """Equal counts are reported as a draw."""
    board = Board.from_rows(["B+++++++"] + [EMPTY_ROW] * 6 + ["+++++++W"])
    out = io.StringIO()
    game = OseroGame(board=board, input_fn=no_input, out=out)

    assert game.run() is None
    assert out.getvalue().rstrip().endswith("It's a draw.")


def test_full_game():
    """Play a whole game choosing the first legal move each time."""
    out = io.StringIO()
    game = OseroGame(out=out)

    def first_legal(prompt):
        move = game.board.legal_moves(game.current_side)[0]
        return f"{move.row},{move.col}"
    game.input_fn = first_legal

    winner = game.run()

    assert game.is_over()
    black, white = game.board.score()
    assert winner == (Side.BLACK if black > white else Side.WHITE if white > black else None)
    assert len(game.move_history) == black + white - 4
    assert game.board.aggregate()[CellKind.WALL] == 36


def test_main_declined():
    """Anything but the affirmative answer exits with status 0."""
    out = io.StringIO()
    assert main([], input_fn=scripted(["n"]), out=out) == 0
    assert "Exiting the game." in out.getvalue()
    assert "Black's turn" not in out.getvalue()


def test_main_interrupted():
    """Ctrl+C during the game is reported and returns 130."""
    def interrupt(prompt):
        if prompt.startswith("Start"):
            return "y"
        raise KeyboardInterrupt

    out = io.StringIO()
    assert main([], input_fn=interrupt, out=out) == 130
    assert "Interrupted." in out.getvalue()


def test_main_input_closed():
    """End of input during the game returns 1."""
    def closed(prompt):
        if prompt.startswith("Start"):
            return "y"
        raise EOFError

    assert main([], input_fn=closed, out=io.StringIO()) == 1


if __name__ == "__main__":
    sys.exit(pytest.main([__file__]))

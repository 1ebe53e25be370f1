"""
Osero game module.
Runs the console turn loop on top of the board engine.
"""
import logging
import sys
from enum import Enum
from typing import Callable, List, NamedTuple, Optional, TextIO

from .board import Board, InvalidMove, Position, Side
from .config import Config, get_default_config

logger = logging.getLogger(__name__)

RULE = "----------------------"


class MalformedPosition(ValueError):
    """Raised when typed text is not a `row,column` pair."""

    def __init__(self, text: str):
        self.text = text
        super().__init__("The coordinate is invalid.")


def parse_position(text: str) -> Position:
    """
    Parse `row,column` into a Position.

    Both parts must be unsigned decimal integers; surrounding whitespace is
    ignored. The numbers are used as grid indices as typed.

    Raises:
        MalformedPosition: if the text is not exactly two such integers
    """
    parts = [part.strip() for part in text.split(',')]
    if len(parts) != 2:
        raise MalformedPosition(text)
    for part in parts:
        if not (part.isascii() and part.isdigit()):
            raise MalformedPosition(text)
    return Position(int(parts[0]), int(parts[1]))


class TurnOutcome(Enum):
    PLACED = "placed"
    SKIPPED = "skipped"
    FINISHED = "finished"


class MoveRecord(NamedTuple):
    turn: int
    side: Side
    position: Position
    flipped: int


class OseroGame:
    """
    Two-player console game that drives a Board.

    Black moves on odd turns, White on even ones. A side with no legal move is
    skipped; the game ends once neither side can move.
    """

    def __init__(self, board: Optional[Board] = None, config: Optional[Config] = None,
                 input_fn: Callable[[str], str] = input, out: Optional[TextIO] = None):
        """
        Initialize a new game.

        Args:
            board: Starting position (default: the standard opening)
            config: Configuration object (default: get_default_config())
            input_fn: Reads one line after showing a prompt
            out: Stream the game is printed to (default: sys.stdout)
        """
        self.board = board or Board()
        self.config = config or get_default_config()
        self.input_fn = input_fn
        self.out = out or sys.stdout
        self.turn = 1
        self.move_history: List[MoveRecord] = []

    @property
    def current_side(self) -> Side:
        return Side.BLACK if self.turn % 2 == 1 else Side.WHITE

    def _print(self, text: str = "") -> None:
        print(text, file=self.out)

    def _print_counts(self) -> None:
        black, white = self.board.score()
        self._print(f"Black: {black} White: {white}")

    def is_over(self) -> bool:
        """Check if neither side has a legal move."""
        return not self.board.can_play(Side.BLACK) and not self.board.can_play(Side.WHITE)

    def winner(self) -> Optional[Side]:
        """
        Get the side with more stones.

        Returns:
            Side.BLACK, Side.WHITE, or None for a draw
        """
        black, white = self.board.score()
        if black > white:
            return Side.BLACK
        if white > black:
            return Side.WHITE
        return None

    def read_position(self) -> Position:
        """Prompt until a well-formed coordinate is typed."""
        while True:
            text = self.input_fn("Enter a coordinate for your stone, e.g. 1,2 -> ").rstrip()
            try:
                return parse_position(text)
            except MalformedPosition as e:
                self._print(str(e))

    def play_turn(self) -> TurnOutcome:
        """
        Play one turn for the current side.

        Returns:
            FINISHED if nobody can move, SKIPPED if the current side could not
            move, PLACED once a stone has been placed
        """
        if self.is_over():
            return TurnOutcome.FINISHED

        side = self.current_side
        self._print(RULE)
        self._print(f"{side.display_name}'s turn")
        self._print_counts()
        self._print()
        self._print(self.board.render())

        moves = self.board.legal_moves(side)
        if not moves:
            self._print("No legal moves, skipping this turn.")
            logger.info("Turn %d: %s has no legal move", self.turn, side.display_name)
            self.turn += 1
            return TurnOutcome.SKIPPED

        if self.config.game.show_legal_moves:
            self._print("Legal moves")
            for position in moves:
                self._print(str(position))

        while True:
            position = self.read_position()
            try:
                flipped = self.board.place(position, side)
            except InvalidMove as e:
                self._print(str(e))
                continue
            break

        self.move_history.append(MoveRecord(self.turn, side, position, len(flipped)))
        self.turn += 1
        return TurnOutcome.PLACED

    def print_result(self) -> None:
        """Print the final board, counts and the winner."""
        self._print(RULE)
        self._print("-       Result       -")
        self._print(RULE)
        self._print(self.board.render())
        self._print_counts()
        winner = self.winner()
        if winner is None:
            self._print("It's a draw.")
        else:
            self._print(f"{winner.display_name} wins.")

    def run(self) -> Optional[Side]:
        """
        Play until neither side can move, then print the result.

        Returns:
            The winning side, or None for a draw
        """
        while self.play_turn() is not TurnOutcome.FINISHED:
            pass

        black, white = self.board.score()
        logger.info("Game over after %d turns: black=%d white=%d", self.turn - 1, black, white)
        self.print_result()
        return self.winner()

from typing import List, Dict, Optional, Tuple
from copy import deepcopy
from game_logic import (
    BLACK,
    WHITE,
    BOARD_SIZE,
    initial_board,
    opponent,
    get_all_possible_moves,
    has_any_move,
    apply_placement,
    count_discs,
)

class GameState:
    """
    A class representing the state of an Othello game.
    This class is designed to be used by the search agents and the game runner.
    """

    BOARD_SIZE = BOARD_SIZE
    CELL_SYMBOLS = {BLACK: "B", WHITE: "W", None: "_"}

    def __init__(self):
        self.board = initial_board()

        # Game state
        self.turn = BLACK  # "BLACK" or "WHITE", the side to move
        self.turn_number = 0  # Incremented by every applied move, passes included
        self.game_ended = False

    @classmethod
    def from_rows(cls, rows: List[str], turn: str = BLACK, turn_number: int = 0) -> 'GameState':
        """
        Build a state from text rows, top to bottom.
        B = Black, W = White, _ or . = Empty
        """
        if len(rows) != cls.BOARD_SIZE or any(len(row) != cls.BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {cls.BOARD_SIZE}x{cls.BOARD_SIZE}")
        if turn not in (BLACK, WHITE):
            raise ValueError(f"Unknown player: {turn}")

        board = [[None for _ in range(cls.BOARD_SIZE)] for _ in range(cls.BOARD_SIZE)]
        for y, row in enumerate(rows):
            for x, cell in enumerate(row):
                if cell == "B":
                    board[y][x] = BLACK
                elif cell == "W":
                    board[y][x] = WHITE
                elif cell not in ("_", "."):
                    raise ValueError(f"Unknown cell symbol {cell!r} at ({x}, {y})")

        state = cls()
        state.board = board
        state.turn = turn
        state.turn_number = turn_number
        state._update_game_status()
        return state

    def to_rows(self) -> List[str]:
        """Convert the board to text rows using B, W and _."""
        return ["".join(self.CELL_SYMBOLS[cell] for cell in row) for row in self.board]

    def clone(self) -> 'GameState':
        """Create a deep copy of the current game state."""
        new_state = GameState()
        new_state.board = deepcopy(self.board)
        new_state.turn = self.turn
        new_state.turn_number = self.turn_number
        new_state.game_ended = self.game_ended
        return new_state

    def get_valid_moves(self) -> List[Dict]:
        """
        Get all valid moves for the current player.
        A player without a placement must pass while the game is still running.
        """
        if self.is_terminal():
            return []
        moves = get_all_possible_moves(self.board, self.turn)
        if not moves:
            return [{"type": "pass"}]
        return moves

    def get_successors(self) -> List['GameState']:
        """Generate one new state per valid move. The current state is left untouched."""
        successors = []
        for move in self.get_valid_moves():
            successor = self.clone()
            successor.apply_move(move)
            successors.append(successor)
        return successors

    def apply_move(self, move: Dict) -> None:
        """Apply a move to the current game state."""
        if self.is_terminal():
            raise ValueError("Game is already over")

        if move.get("type") not in ("placement", "pass"):
            raise ValueError(f"Unknown move type: {move.get('type')}")

        if move["type"] == "pass":
            if has_any_move(self.board, self.turn):
                raise ValueError("Cannot pass while a placement is available")
        else:
            if "x" not in move or "y" not in move:
                raise ValueError("Placement move missing coordinates")
            # apply_placement rejects out of bounds, occupied and non-flipping cells
            apply_placement(self.board, move["x"], move["y"], self.turn)

        # Switch turns
        self.turn = opponent(self.turn)
        self.turn_number += 1

        # Check for game end
        self._update_game_status()

    def _update_game_status(self) -> None:
        """The game ends when neither player can place a disc."""
        self.game_ended = not (has_any_move(self.board, self.turn) or
                               has_any_move(self.board, opponent(self.turn)))

    def is_terminal(self) -> bool:
        """Check if the game has ended."""
        return self.game_ended

    def disc_counts(self) -> Tuple[int, int]:
        """Return (black, white) disc counts."""
        return count_discs(self.board)

    def get_winner(self) -> Optional[str]:
        """Get the winner of the game if it has ended."""
        if not self.game_ended:
            return None
        black, white = self.disc_counts()
        if black > white:
            return BLACK
        if white > black:
            return WHITE
        return "DRAW"

    def __eq__(self, other) -> bool:
        if not isinstance(other, GameState):
            return NotImplemented
        return (self.board == other.board and
                self.turn == other.turn and
                self.turn_number == other.turn_number and
                self.game_ended == other.game_ended)

    def __repr__(self) -> str:
        return f"GameState(turn={self.turn}, turn_number={self.turn_number}, game_ended={self.game_ended})"

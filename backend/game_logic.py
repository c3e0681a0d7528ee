BOARD_SIZE = 8

BLACK = "BLACK"
WHITE = "WHITE"

DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1)
]


def is_in_bounds(x, y):
    """Check if coordinates are within the 8x8 board bounds."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


def opponent(player):
    """Return the other side."""
    return WHITE if player == BLACK else BLACK


def initial_board():
    """Create the standard starting position with four discs in the center."""
    board = [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]
    mid = BOARD_SIZE // 2
    board[mid - 1][mid - 1] = WHITE
    board[mid][mid] = WHITE
    board[mid - 1][mid] = BLACK
    board[mid][mid - 1] = BLACK
    return board


def get_flips(board, x, y, player):
    """
    Get the discs that would be flipped if player placed a disc at (x, y).
    An empty list means the placement is illegal.
    """
    if not is_in_bounds(x, y) or board[y][x] is not None:
        return []

    other = opponent(player)
    flips = []

    for dx, dy in DIRECTIONS:
        line = []
        cur_x, cur_y = x + dx, y + dy

        # Walk over a run of opponent discs
        while is_in_bounds(cur_x, cur_y) and board[cur_y][cur_x] == other:
            line.append({"x": cur_x, "y": cur_y})
            cur_x += dx
            cur_y += dy

        # The run only flips if it is closed by one of our own discs
        if line and is_in_bounds(cur_x, cur_y) and board[cur_y][cur_x] == player:
            flips.extend(line)

    return flips


def get_all_possible_moves(board, player):
    """Get every legal placement for the given player, scanning rows top to bottom."""
    moves = []
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if board[y][x] is not None:
                continue
            flips = get_flips(board, x, y, player)
            if flips:
                moves.append({"type": "placement", "x": x, "y": y, "flips": flips})
    return moves


def has_any_move(board, player):
    """Check whether the player has at least one legal placement."""
    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            if board[y][x] is None and get_flips(board, x, y, player):
                return True
    return False


def count_discs(board):
    """Return (black, white) disc counts."""
    black = 0
    white = 0
    for row in board:
        for cell in row:
            if cell == BLACK:
                black += 1
            elif cell == WHITE:
                white += 1
    return black, white


def apply_placement(board, x, y, player):
    """
    Place a disc for player at (x, y) and flip the captured discs in place.
    Returns the list of flipped cells.
    """
    flips = get_flips(board, x, y, player)
    if not flips:
        raise ValueError(f"Illegal placement for {player} at ({x}, {y})")

    board[y][x] = player
    for cell in flips:
        board[cell["y"]][cell["x"]] = player
    return flips


def derive_move(source_board, target_board, player):
    """
    Work out which move turns source_board into target_board.

    Exactly one newly occupied cell means a placement; identical boards mean
    the player passed. Anything else cannot be explained by a single move.
    """
    placed = []
    flipped = []

    for y in range(BOARD_SIZE):
        for x in range(BOARD_SIZE):
            before = source_board[y][x]
            after = target_board[y][x]
            if before == after:
                continue
            if before is None:
                placed.append((x, y))
            elif after == player:
                flipped.append({"x": x, "y": y})
            else:
                raise ValueError(f"Cell ({x}, {y}) changed from {before} to {after}")

    if not placed and not flipped:
        return {"type": "pass"}

    if len(placed) != 1 or target_board[placed[0][1]][placed[0][0]] != player:
        raise ValueError("Boards do not differ by a single placement")

    x, y = placed[0]
    return {"type": "placement", "x": x, "y": y, "flips": flipped}


def format_move(move):
    """Format a move in algebraic notation, e.g. 'd3' or 'pass'."""
    if move["type"] == "pass":
        return "pass"
    return f"{chr(ord('a') + move['x'])}{move['y'] + 1}"

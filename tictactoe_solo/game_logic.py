from enum import Enum
from typing import NamedTuple, Optional, Tuple

BOARD_CELLS = 9


class Mark(Enum):
    """
    symbol occupying a cell
    """
    X = "X"
    O = "O"

    def opposite(self):
        return Mark.O if self is Mark.X else Mark.X


class Line(NamedTuple):
    """
    winning triple, id is used by the ui to pick the stroke
    """
    id: str
    cells: Tuple[int, int, int]


# order decides which line is reported when several are complete
LINES = (
    Line("row-0", (0, 1, 2)),
    Line("row-1", (3, 4, 5)),
    Line("row-2", (6, 7, 8)),
    Line("col-0", (0, 3, 6)),
    Line("col-1", (1, 4, 7)),
    Line("col-2", (2, 5, 8)),
    Line("diag-0", (0, 4, 8)),
    Line("diag-1", (2, 4, 6)),
)


class Status(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class Outcome(NamedTuple):
    """
    classification of a board: status plus winner/line when won
    """
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Line] = None

    @property
    def is_terminal(self):
        return self.status is not Status.IN_PROGRESS


IN_PROGRESS = Outcome(Status.IN_PROGRESS)
DRAW = Outcome(Status.DRAW)

Board = Tuple[Optional[Mark], ...]


def empty_board() -> Board:
    return (None,) * BOARD_CELLS


def check_board(board):
    """
    reject anything that is not nine cells of Mark/None
    """
    if len(board) != BOARD_CELLS:
        raise ValueError(f"board must have {BOARD_CELLS} cells, got {len(board)}")
    for i, cell in enumerate(board):
        if cell is not None and not isinstance(cell, Mark):
            raise ValueError(f"cell {i} holds {cell!r}, expected Mark or None")
    return tuple(board)


def place(board: Board, index: int, mark: Mark) -> Board:
    """
    new board with mark at index; the input board is left alone
    """
    if not 0 <= index < BOARD_CELLS:
        raise ValueError(f"cell index {index} out of range 0-{BOARD_CELLS - 1}")
    if board[index] is not None:
        raise ValueError(f"cell {index} already holds {board[index].value}")
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def empty_cells(board: Board):
    """
    indices of open cells, ascending
    """
    return [i for i, cell in enumerate(board) if cell is None]


def is_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def evaluate(board: Board) -> Outcome:
    """
    scan lines in fixed order, first complete one wins;
    otherwise draw on a full board, else still in progress
    """
    board = check_board(board)
    for line in LINES:
        a, b, c = line.cells
        if board[a] is not None and board[a] == board[b] == board[c]:
            return Outcome(Status.WON, board[a], line)
    # won was ruled out above, so a full board here is a draw
    if is_full(board):
        return DRAW
    return IN_PROGRESS


def board_from_string(text: str) -> Board:
    """
    'XO.X.....' -> board; '.', ' ' and '-' mean empty
    """
    cells = []
    for ch in text.replace("\n", "").replace("|", ""):
        if ch in ".- ":
            cells.append(None)
        elif ch.upper() in ("X", "O"):
            cells.append(Mark(ch.upper()))
        else:
            raise ValueError(f"unexpected board character {ch!r}")
    return check_board(cells)


def board_to_string(board: Board) -> str:
    return "".join(cell.value if cell else "." for cell in board)

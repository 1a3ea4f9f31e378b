import logging
import random

from .game_logic import Mark, Status, empty_cells, evaluate, place

logger = logging.getLogger(__name__)

CENTER = 4
CORNERS = (0, 2, 6, 8)
SIDES = (1, 3, 5, 7)


class NoMoveAvailable(RuntimeError):
    """
    opponent asked to move on a finished or full board
    """


def _first_winning_cell(board, mark):
    # ascending scan, first hit wins
    for i in empty_cells(board):
        outcome = evaluate(place(board, i, mark))
        if outcome.status is Status.WON and outcome.winner is mark:
            return i
    return None


def choose_move(board, mark=Mark.O, rng=None):
    """
    pick a cell for `mark` using a fixed priority:
    win now, block, center, random corner, random side, lowest open cell.

    rng is anything with a `choice` method (random.Random for repeatable
    games); defaults to the random module.
    """
    if evaluate(board).is_terminal:
        raise NoMoveAvailable("game is already over")
    open_cells = empty_cells(board)
    if not open_cells:
        raise NoMoveAvailable("no empty cell left")
    rng = rng or random

    move = _first_winning_cell(board, mark)
    if move is not None:
        logger.debug("opponent %s wins at %d", mark.value, move)
        return move

    move = _first_winning_cell(board, mark.opposite())
    if move is not None:
        logger.debug("opponent %s blocks at %d", mark.value, move)
        return move

    if board[CENTER] is None:
        logger.debug("opponent %s takes center", mark.value)
        return CENTER

    for rule, group in (("corner", CORNERS), ("side", SIDES)):
        free = [i for i in group if board[i] is None]
        if free:
            move = rng.choice(free)
            logger.debug("opponent %s takes %s %d", mark.value, rule, move)
            return move

    # center, corners and sides cover every cell
    return open_cells[0]

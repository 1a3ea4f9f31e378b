import logging
import random
from enum import Enum
from typing import Callable, List, NamedTuple, Optional

from .game_logic import (
    BOARD_CELLS, IN_PROGRESS, Board, Mark, Outcome, Status,
    board_to_string, empty_board, evaluate, place,
)
from .opponent import choose_move

logger = logging.getLogger(__name__)

DEFAULT_OPPONENT_DELAY_MS = 800


class Phase(Enum):
    HUMAN_TURN = "human_turn"
    OPPONENT_TURN = "opponent_turn"
    TERMINAL = "terminal"


class StatusSummary(NamedTuple):
    outcome: Outcome
    is_opponent_deciding: bool
    phase: Phase


class SessionEvent(NamedTuple):
    """
    what listeners get after every state transition
    """
    phase: Phase
    board: Board
    outcome: Outcome
    deciding: bool
    winning_line: Optional[str]


class GameSession:
    """
    owns the board and turn order for one human (X) vs scripted opponent (O).

    The opponent's reply is scheduled through `scheduler.call_later`, so the
    session never blocks the caller. Only one opponent move can be pending;
    reset() cancels it and a cancelled or stale timer never touches the board.

    `strategy` picks the opponent cell from a board and defaults to the
    priority heuristic in opponent.py, fed with `rng`.
    """

    human = Mark.X
    opponent = Mark.O

    def __init__(self, scheduler, opponent_delay_ms=DEFAULT_OPPONENT_DELAY_MS,
                 strategy: Optional[Callable[[Board], int]] = None, rng=None):
        self._scheduler = scheduler
        self.opponent_delay_ms = opponent_delay_ms
        self._rng = rng or random.Random()
        self._strategy = strategy or (lambda board: choose_move(board, self.opponent, self._rng))
        self._listeners: List[Callable[[SessionEvent], None]] = []
        self._pending = None       # timer handle of the scheduled opponent move
        self._generation = 0       # bumps on every schedule/reset, stale timers compare against it
        self._board = empty_board()
        self._phase = Phase.HUMAN_TURN
        self._outcome = IN_PROGRESS
        self._deciding = False

    # -- read side ---------------------------------------------------------

    def get_board(self) -> Board:
        return self._board

    @property
    def phase(self):
        return self._phase

    @property
    def outcome(self):
        return self._outcome

    @property
    def has_pending_move(self):
        return self._pending is not None and self._pending.active

    def get_status_summary(self) -> StatusSummary:
        return StatusSummary(self._outcome, self._deciding, self._phase)

    def add_listener(self, callback):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    # -- moves -------------------------------------------------------------

    def apply_human_move(self, index) -> bool:
        """
        place X at index; returns False (and changes nothing) for
        wrong turn, occupied/out-of-range cell or finished game
        """
        if self._phase is not Phase.HUMAN_TURN:
            logger.debug("ignored click on %s during %s", index, self._phase.value)
            return False
        if not isinstance(index, int) or not 0 <= index < BOARD_CELLS:
            logger.debug("ignored click on invalid cell %r", index)
            return False
        if self._board[index] is not None:
            logger.debug("ignored click on occupied cell %d", index)
            return False

        self._board = place(self._board, index, self.human)
        logger.debug("human plays %d -> %s", index, board_to_string(self._board))
        if not self._settle():
            self._phase = Phase.OPPONENT_TURN
            self._deciding = True
            self._schedule_opponent()
        self._notify()
        return True

    def _schedule_opponent(self):
        self._generation += 1
        generation = self._generation
        self._pending = self._scheduler.call_later(
            self.opponent_delay_ms, lambda: self._play_opponent(generation))

    def _play_opponent(self, generation):
        # reset (or a newer schedule) got here first
        if generation != self._generation or self._phase is not Phase.OPPONENT_TURN:
            logger.debug("dropping stale opponent timer")
            return
        self._pending = None
        move = self._strategy(self._board)
        self._board = place(self._board, move, self.opponent)
        logger.debug("opponent plays %d -> %s", move, board_to_string(self._board))
        self._deciding = False
        if not self._settle():
            self._phase = Phase.HUMAN_TURN
        self._notify()

    def _settle(self):
        """
        evaluate the board, switch to TERMINAL when the game is over
        """
        self._outcome = evaluate(self._board)
        if not self._outcome.is_terminal:
            return False
        self._phase = Phase.TERMINAL
        self._deciding = False
        if self._outcome.status is Status.WON:
            logger.info("game over: %s wins on %s", self._outcome.winner.value, self._outcome.line.id)
        else:
            logger.info("game over: draw")
        return True

    def reset(self):
        """
        cancel any pending opponent move and start a fresh game
        """
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._generation += 1
        self._board = empty_board()
        self._phase = Phase.HUMAN_TURN
        self._outcome = IN_PROGRESS
        self._deciding = False
        logger.debug("session reset")
        self._notify()

    def _notify(self):
        line = self._outcome.line.id if self._outcome.line else None
        event = SessionEvent(self._phase, self._board, self._outcome, self._deciding, line)
        for callback in list(self._listeners):
            callback(event)


def status_message(summary: StatusSummary) -> str:
    """
    one-line status for the window header
    """
    outcome = summary.outcome
    if outcome.status is Status.WON:
        return "You Win! 🎉" if outcome.winner is GameSession.human else "AI Wins!"
    if outcome.status is Status.DRAW:
        return "It's a Draw!"
    if summary.is_opponent_deciding:
        return "AI is thinking..."
    return f"Your Turn ({GameSession.human.value})"

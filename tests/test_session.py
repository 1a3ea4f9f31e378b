import random

import pytest

from tictactoe_solo.game_logic import IN_PROGRESS, Mark, Status, board_to_string, empty_board
from tictactoe_solo.session import (
    DEFAULT_OPPONENT_DELAY_MS, GameSession, Phase, StatusSummary, status_message,
)

from conftest import FirstChoice


def scripted(*moves):
    remaining = list(moves)
    return lambda board: remaining.pop(0)


def test_initial_state(session, scheduler):
    assert session.get_board() == empty_board()
    assert session.phase is Phase.HUMAN_TURN
    summary = session.get_status_summary()
    assert summary.outcome.status is Status.IN_PROGRESS
    assert summary.is_opponent_deciding is False
    assert scheduler.handles == []


def test_human_move_schedules_opponent(session, scheduler):
    assert session.apply_human_move(0) is True
    assert session.get_board()[0] is Mark.X
    assert session.phase is Phase.OPPONENT_TURN
    assert session.get_status_summary().is_opponent_deciding is True
    assert session.has_pending_move
    [handle] = scheduler.pending
    assert handle.delay_ms == DEFAULT_OPPONENT_DELAY_MS


def test_turn_alternation(session, scheduler):
    session.apply_human_move(0)
    assert scheduler.run_pending() == 1
    board = session.get_board()
    assert sum(cell is not None for cell in board) == 2
    assert board[4] is Mark.O
    assert session.phase is Phase.HUMAN_TURN
    assert session.get_status_summary().is_opponent_deciding is False
    assert not session.has_pending_move


def test_input_during_opponent_turn_is_ignored(session, scheduler):
    session.apply_human_move(0)
    assert session.apply_human_move(8) is False
    assert session.get_board()[8] is None
    assert len(scheduler.handles) == 1


def test_occupied_cell_is_noop(session, scheduler):
    session.apply_human_move(0)
    scheduler.run_pending()
    before = session.get_board()
    assert session.apply_human_move(0) is False
    assert session.apply_human_move(0) is False
    assert session.apply_human_move(4) is False
    assert session.get_board() == before
    assert session.phase is Phase.HUMAN_TURN
    assert scheduler.pending == []


@pytest.mark.parametrize("index", [-1, 9, 42, None, "3"])
def test_invalid_index_is_noop(session, scheduler, index):
    assert session.apply_human_move(index) is False
    assert session.get_board() == empty_board()
    assert scheduler.handles == []


def test_human_completes_row_zero(scheduler):
    session = GameSession(scheduler, strategy=scripted(3, 4))
    for index in (0, 1):
        session.apply_human_move(index)
        scheduler.run_pending()
    assert session.apply_human_move(2) is True
    outcome = session.outcome
    assert outcome.status is Status.WON
    assert outcome.winner is Mark.X
    assert outcome.line.id == "row-0"
    assert session.phase is Phase.TERMINAL
    assert scheduler.pending == []
    assert session.apply_human_move(5) is False


def test_heuristic_blocks_row_zero(session, scheduler):
    session.apply_human_move(0)
    scheduler.run_pending()
    session.apply_human_move(1)
    scheduler.run_pending()
    assert board_to_string(session.get_board()) == "XXO.O...."
    assert session.apply_human_move(2) is False


def test_opponent_win_is_terminal(scheduler):
    session = GameSession(scheduler, rng=FirstChoice())
    # X: 0, 1, 8 ; O answers 4, 2, 6 (diag-1)
    session.apply_human_move(0)
    scheduler.run_pending()
    session.apply_human_move(1)
    scheduler.run_pending()
    session.apply_human_move(8)
    scheduler.run_pending()
    outcome = session.outcome
    assert outcome.status is Status.WON
    assert outcome.winner is Mark.O
    assert outcome.line.id == "diag-1"
    assert session.phase is Phase.TERMINAL
    assert status_message(session.get_status_summary()) == "AI Wins!"


def test_draw_game(scheduler):
    session = GameSession(scheduler, strategy=scripted(1, 2, 3, 8))
    # X: 0 4 5 6 7 -> XOOOXXXXO, no line
    for index in (0, 4, 5, 6):
        session.apply_human_move(index)
        scheduler.run_pending()
    session.apply_human_move(7)
    assert board_to_string(session.get_board()) == "XOOOXXXXO"
    assert session.outcome.status is Status.DRAW
    assert session.phase is Phase.TERMINAL
    assert scheduler.pending == []


def test_reset_cancels_pending_move(session, scheduler):
    session.apply_human_move(0)
    [handle] = scheduler.pending
    session.reset()
    assert handle.cancelled
    assert session.get_board() == empty_board()
    assert session.phase is Phase.HUMAN_TURN
    assert not session.get_status_summary().is_opponent_deciding
    # a timer that slips through after reset must not move
    handle.callback()
    assert session.get_board() == empty_board()


def test_stale_timer_after_new_move_is_ignored(session, scheduler):
    session.apply_human_move(0)
    stale = scheduler.pending[0]
    session.reset()
    session.apply_human_move(8)
    stale.callback()
    assert board_to_string(session.get_board()) == "........X"
    assert session.phase is Phase.OPPONENT_TURN
    scheduler.run_pending()
    assert board_to_string(session.get_board()) == "....O...X"


def test_reset_after_terminal(scheduler):
    session = GameSession(scheduler, strategy=scripted(3, 4))
    for index in (0, 1):
        session.apply_human_move(index)
        scheduler.run_pending()
    session.apply_human_move(2)
    session.reset()
    assert session.get_board() == empty_board()
    assert session.phase is Phase.HUMAN_TURN
    assert session.outcome.status is Status.IN_PROGRESS
    assert scheduler.run_pending() == 0
    assert session.get_board() == empty_board()


def test_events_on_every_transition(session, scheduler, events):
    session.apply_human_move(0)
    scheduler.run_pending()
    session.apply_human_move(0)  # rejected, no event
    session.reset()
    assert [e.phase for e in events] == [Phase.OPPONENT_TURN, Phase.HUMAN_TURN, Phase.HUMAN_TURN]
    assert [e.deciding for e in events] == [True, False, False]
    assert events[0].board[0] is Mark.X
    assert events[1].board[4] is Mark.O
    assert events[2].board == empty_board()
    assert all(e.winning_line is None for e in events)


def test_event_carries_winning_line(scheduler):
    session = GameSession(scheduler, strategy=scripted(3, 4))
    seen = []
    session.add_listener(seen.append)
    for index in (0, 1):
        session.apply_human_move(index)
        scheduler.run_pending()
    session.apply_human_move(2)
    last = seen[-1]
    assert last.phase is Phase.TERMINAL
    assert last.outcome.winner is Mark.X
    assert last.winning_line == "row-0"


def test_remove_listener(session, scheduler):
    seen = []
    session.add_listener(seen.append)
    session.remove_listener(seen.append)
    session.remove_listener(seen.append)
    session.apply_human_move(0)
    assert seen == []


def test_custom_delay(scheduler):
    session = GameSession(scheduler, opponent_delay_ms=0)
    session.apply_human_move(4)
    assert scheduler.pending[0].delay_ms == 0


def test_seeded_games_repeat(scheduler):
    def play(seed):
        s = GameSession(scheduler, rng=random.Random(seed))
        s.apply_human_move(4)
        scheduler.run_pending()
        return s.get_board()
    assert play(7) == play(7)


@pytest.mark.parametrize("summary,text", [
    (StatusSummary(IN_PROGRESS, False, Phase.HUMAN_TURN), "Your Turn (X)"),
    (StatusSummary(IN_PROGRESS, True, Phase.OPPONENT_TURN), "AI is thinking..."),
])
def test_status_message_in_progress(summary, text):
    assert status_message(summary) == text


def test_status_message_terminal(scheduler):
    session = GameSession(scheduler, strategy=scripted(3, 4))
    for index in (0, 1):
        session.apply_human_move(index)
        scheduler.run_pending()
    session.apply_human_move(2)
    assert status_message(session.get_status_summary()) == "You Win! 🎉"

    draw = GameSession(scheduler, strategy=scripted(1, 2, 3, 8))
    for index in (0, 4, 5, 6):
        draw.apply_human_move(index)
        scheduler.run_pending()
    draw.apply_human_move(7)
    assert status_message(draw.get_status_summary()) == "It's a Draw!"

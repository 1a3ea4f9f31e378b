import logging
import random

from ..config import GameConfig
from ..game_logic import Status
from ..session import GameSession, Phase, status_message
from ..timers import QtScheduler
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QMessageBox, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot

logger = logging.getLogger(__name__)


class TicTacToeWindow(QMainWindow):
    """
    main window: board, status line, reset button and game-over dialog
    """
    def __init__(self, config=None):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.config = config or GameConfig()
        rng = random.Random(self.config.seed)
        self.session = GameSession(QtScheduler(self), self.config.opponent_delay_ms, rng=rng)
        self.board_widget = BoardWidget(parent=self)
        self.game_over_box = None

        self._setup_ui()
        self.session.add_listener(self._on_session_event)
        self._update_message(status_message(self.session.get_status_summary()), is_turn=True)

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #1A2E28; }
            QPushButton {
                background-color: #34D399; color: white; font-weight: bold;
                border: none; border-radius: 14px; padding: 6px 24px;
            }
            QPushButton:hover { background-color: #FBBF24; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        self.title_label = QLabel("Tic-Tac-Toe")
        f = QFont(); f.setPointSize(22); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.title_label.setStyleSheet("color: #6EE7B7;")
        self.main_layout.addWidget(self.title_label)
        self.main_layout.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)

        self._create_bottom_controls()     # status + reset
        self.main_layout.addWidget(self.controls_bottom_widget)
        self.board_widget.set_accept_clicks(True)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.reset_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_bottom_controls(self):
        # status label + reset button
        self.controls_bottom_widget = QWidget()
        hl = QHBoxLayout(self.controls_bottom_widget)
        self.controls_bottom_widget.setStyleSheet("background: transparent;")
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(14); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.reset_button = QPushButton("Reset Game"); self.reset_button.clicked.connect(self.reset_game)
        hl.addWidget(self.message_label); hl.addStretch(1); hl.addWidget(self.reset_button)

    @Slot(str)
    def _update_message(self, text, is_error=False,
                         is_success=False, is_turn=False):
        # set message text + style
        style = "color: #E5E7EB;"
        if is_error:   style = "color: #ff8a8a; font-weight: bold;"
        elif is_success: style = "color: #6EE7B7; font-weight: bold;"
        elif is_turn:    style = "color: #FBBF24; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    @Slot(int)
    def _on_cell_clicked(self, index):
        # session ignores clicks that are not allowed right now
        self.session.apply_human_move(index)

    def _on_session_event(self, event):
        # repaint + status after every transition
        self.board_widget.show_board(event.board, event.winning_line)
        self.board_widget.set_accept_clicks(event.phase is Phase.HUMAN_TURN)
        summary = self.session.get_status_summary()
        text = status_message(summary)
        if event.phase is Phase.TERMINAL:
            human_won = event.outcome.status is Status.WON and event.outcome.winner is GameSession.human
            self._update_message(text, is_success=human_won or event.outcome.status is Status.DRAW,
                                 is_error=event.outcome.status is Status.WON and not human_won)
            self._show_game_over(text, event.outcome.status is Status.WON)
        else:
            self._update_message(text, is_turn=event.phase is Phase.HUMAN_TURN)

    def _show_game_over(self, title, won):
        # modal-ish result box with a play again button
        box = QMessageBox(self)
        box.setWindowTitle("Game Over")
        box.setText(title)
        box.setInformativeText("Congratulations!" if won else "Good game!")
        play_again = box.addButton("Play Again", QMessageBox.AcceptRole)
        play_again.clicked.connect(self.reset_game)
        box.setWindowModality(Qt.WindowModal)
        self.game_over_box = box
        box.open()

    @Slot()
    def reset_game(self):
        # fresh game, pending opponent move is dropped
        if self.game_over_box is not None:
            box, self.game_over_box = self.game_over_box, None
            box.close()
        logger.info("new game requested")
        self.session.reset()

    def closeEvent(self, event):
        # no opponent move after the window is gone
        self.session.reset()
        event.accept()

from ..game_logic import GameState
from ..ui.board_widget import BoardWidget

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QMenuBar, QMenu, QLineEdit,
    QGroupBox, QScrollArea, QSizePolicy
)
from PySide6.QtGui import QAction, QFont
from PySide6.QtCore import Qt, Slot


class TicTacToeWindow(QMainWindow):
    """
    main window: board on the left, size/sort/move list on the right
    every input goes through game_state.dispatch, then the view is redrawn
    """
    def __init__(self, game_state=None):
        """
        init state, ui widgets, signals
        """
        super().__init__()
        self.game_state = game_state if game_state is not None else GameState()
        self.board_widget = BoardWidget(self.game_state, parent=self)
        self._setup_ui()
        self.refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle("Tic-Tac-Toe")
        self.setStyleSheet("""
            QMainWindow { background-color: #222; }
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QHBoxLayout(self.central_widget)

        self._create_menu_bar()            # top menu
        board_column = QVBoxLayout()
        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(12); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)
        board_column.addWidget(self.message_label)
        board_column.addWidget(self.board_widget, 1)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.main_layout.addLayout(board_column, 3)

        self._create_info_panel()          # size + sort + history
        self.main_layout.addWidget(self.info_group, 1)

    def _create_menu_bar(self):
        '''game menu actions'''
        menu_bar = QMenuBar()
        game_menu = QMenu("Game", self)
        new_action = QAction("New Game", self)
        new_action.triggered.connect(self.new_game)
        quit_action = QAction("Quit", self)
        quit_action.triggered.connect(self.close)
        game_menu.addAction(new_action)
        game_menu.addSeparator(); game_menu.addAction(quit_action)
        menu_bar.addMenu(game_menu)
        self.setMenuBar(menu_bar)

    def _create_info_panel(self):
        '''board size input, sort toggle, move list'''
        self.info_group = QGroupBox("Game Info")
        layout = QVBoxLayout()
        size_layout = QHBoxLayout(); size_layout.addWidget(QLabel("Board Size (min 3):"))
        self.size_input = QLineEdit(str(self.game_state.board_size))
        self.size_input.setMaximumWidth(50)
        self.size_input.textEdited.connect(self._on_size_edited)
        size_layout.addWidget(self.size_input); size_layout.addStretch()
        layout.addLayout(size_layout)
        self.sort_button = QPushButton("")
        self.sort_button.clicked.connect(self._on_sort_clicked)
        layout.addWidget(self.sort_button)
        # scrollable move list, rebuilt on every refresh
        self.moves_widget = QWidget()
        self.moves_layout = QVBoxLayout(self.moves_widget)
        self.moves_layout.setAlignment(Qt.AlignTop)
        scroll = QScrollArea(); scroll.setWidgetResizable(True)
        scroll.setWidget(self.moves_widget)
        scroll.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Expanding)
        layout.addWidget(scroll, 1)
        self.info_group.setLayout(layout)

    def _update_message(self, text, is_success=False, is_turn=False):
        # set message text + style
        style = "color: #eee;"
        if is_success: style = "color: lime; font-weight: bold;"
        elif is_turn:  style = "color: #8acaff; font-weight: bold;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _rebuild_move_list(self, entries):
        # drop old rows
        while self.moves_layout.count():
            item = self.moves_layout.takeAt(0)
            if item.widget(): item.widget().deleteLater()
        for entry in entries:
            if entry.current:
                row = QLabel(entry.description)
            else:
                row = QPushButton(entry.description)
                # bind the move number, not the loop variable
                row.clicked.connect(
                    lambda _checked=False, m=entry.move: self._dispatch("history-jump-click", m)
                )
            self.moves_layout.addWidget(row)

    def refresh(self):
        """
        redraw everything from a fresh snapshot
        """
        snap = self.game_state.snapshot()
        self._update_message(snap.status, is_success=snap.game_over, is_turn=not snap.game_over)
        self.sort_button.setText(self.game_state.sort_label)
        self._rebuild_move_list(snap.move_list)
        self.board_widget.update()

    def _dispatch(self, event, *args):
        # single path from widgets into game state
        if self.game_state.dispatch(event, *args):
            self.refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        self._dispatch("cell-click", index)

    @Slot(str)
    def _on_size_edited(self, text):
        self._dispatch("size-input-change", text)

    @Slot()
    def _on_sort_clicked(self):
        self._dispatch("sort-toggle-click")

    @Slot()
    def new_game(self):
        # fresh board, same size
        self.size_input.setText(str(self.game_state.board_size))
        self._dispatch("new-game")

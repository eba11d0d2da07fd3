from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QDialog,
    QLineEdit,
    QListWidget,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from chatai.application.chat_session import ChatSession, CompletionItem
from chatai.application.port.settings_store import SettingsStore
from chatai.config import ConnectionConfig
from chatai.domain.vo.chat_turn import ChatTurn
from chatai.presentation.completion_worker import CompletionWorker
from chatai.presentation.settings_dialog import SettingsDialog


def format_turn(turn: ChatTurn) -> str:
    return f"{turn.role}: {turn.content}"


class MainWindow(QMainWindow):
    def __init__(
        self,
        session: ChatSession,
        worker: CompletionWorker,
        settings_store: SettingsStore,
        connection: ConnectionConfig,
    ):
        super().__init__()
        self.session = session
        self.worker = worker
        self.settings_store = settings_store
        self.connection = connection

        self.setWindowTitle("Chat AI")
        self.resize(480, 640)

        self.settings_button = QPushButton("Settings")
        self.settings_button.clicked.connect(self.on_open_settings)

        self.transcript_view = QListWidget()
        self.transcript_view.setWordWrap(True)

        self.input_edit = QLineEdit()
        self.input_edit.setPlaceholderText("Enter your message")
        self.input_edit.returnPressed.connect(self.on_send)

        self.send_button = QPushButton("Send")
        self.send_button.clicked.connect(self.on_send)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.addWidget(self.settings_button)
        layout.addWidget(self.transcript_view, stretch=1)
        layout.addWidget(self.input_edit)
        layout.addWidget(self.send_button)
        self.setCentralWidget(central)

        for turn in self.session.transcript:
            self.append_turn(turn)
        self._unsubscribe = self.session.transcript.subscribe(self.append_turn)

        self.worker.completed.connect(self.on_completed)
        self.worker.log.connect(self.on_log)

        self._update_status()

    def append_turn(self, turn: ChatTurn) -> None:
        self.transcript_view.addItem(format_turn(turn))
        self.transcript_view.scrollToBottom()

    def on_send(self) -> None:
        text = self.input_edit.text()
        if not text.strip():
            return

        self.session.send(text, self.connection)
        self.input_edit.clear()
        self._update_status()

    def on_completed(self, item: CompletionItem) -> None:
        self.session.apply_completion(item)
        self._update_status()

    def on_open_settings(self) -> None:
        dialog = SettingsDialog(self.connection, parent=self)
        if dialog.exec() != QDialog.DialogCode.Accepted:
            return

        self.connection = dialog.connection()
        self.settings_store.save(self.connection)
        self.statusBar().showMessage("Settings saved", 3000)

    def on_log(self, line: str) -> None:
        self.statusBar().showMessage(line)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._unsubscribe()
        super().closeEvent(event)

    def _update_status(self) -> None:
        pending = self.session.pending_requests
        if pending:
            self.statusBar().showMessage(f"Waiting for reply ({pending})...")
        else:
            self.statusBar().showMessage("Ready")

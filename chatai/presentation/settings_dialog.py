from PySide6.QtWidgets import (
    QDialog,
    QFormLayout,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from chatai.config import ConnectionConfig


class SettingsDialog(QDialog):
    def __init__(self, config: ConnectionConfig, parent=None):
        super().__init__(parent)
        self._config = config

        self.setWindowTitle("Settings")

        self.base_url_edit = QLineEdit(config.base_url)
        self.base_url_edit.setPlaceholderText("http://localhost:1234")
        self.api_key_edit = QLineEdit(config.api_key)
        self.api_key_edit.setEchoMode(QLineEdit.EchoMode.PasswordEchoOnEdit)

        form = QFormLayout()
        form.addRow("Base URL", self.base_url_edit)
        form.addRow("API Key", self.api_key_edit)

        self.save_button = QPushButton("Save Settings")
        self.save_button.clicked.connect(self.on_save)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(self.save_button)

    def connection(self) -> ConnectionConfig:
        return self._config.with_credentials(
            self.base_url_edit.text(),
            self.api_key_edit.text(),
        )

    def on_save(self) -> None:
        if not self.connection().has_valid_base_url:
            QMessageBox.warning(
                self,
                "Settings",
                "Base URL must start with http:// or https://",
            )
            return
        self.accept()

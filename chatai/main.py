from __future__ import annotations

import sys
from dataclasses import replace
from pathlib import Path

from PySide6.QtWidgets import QApplication

from chatai.config import AppConfig
from chatai.di_container import build_container
from chatai.presentation.completion_worker import CompletionWorker
from chatai.presentation.main_window import MainWindow
from chatai.utils.args import parse_args
from chatai.utils.env import load_dotenv


def load_config(argv: list[str]) -> AppConfig:
    args = parse_args(argv)
    load_dotenv(args.env_file)

    config = AppConfig.from_env()
    if args.settings_file:
        config = replace(config, settings_file=Path(args.settings_file))
    if args.model:
        config = replace(config, model=args.model)
    return config


def main(argv: list[str] | None = None) -> int:
    try:
        config = load_config(sys.argv[1:] if argv is None else argv)
    except ValueError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 2

    app = QApplication(sys.argv[:1])

    container = build_container(config)
    worker = CompletionWorker(container.session)
    window = MainWindow(
        session=container.session,
        worker=worker,
        settings_store=container.settings_store,
        connection=container.load_connection(),
    )

    worker.start()
    window.show()
    container.logger.log(f"Ready. Model: {config.model}")

    try:
        return app.exec()
    finally:
        worker.stop()
        container.close()
        if config.save_log:
            container.logger.save()


if __name__ == "__main__":
    raise SystemExit(main())

from __future__ import annotations

import argparse


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Desktop chat client for OpenAI-compatible endpoints"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env). Use empty to disable.",
    )
    parser.add_argument(
        "--settings-file",
        default=None,
        help="INI file for base URL / API key (otherwise the native store is used).",
    )
    parser.add_argument(
        "--model",
        default=None,
        help="Model name sent with every request (default: CHATAI_MODEL or local-model).",
    )
    return parser.parse_args(argv)

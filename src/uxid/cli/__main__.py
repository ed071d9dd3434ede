"""CLI entry point.

Usage:
    python -m uxid.cli generate --prefix usr
    python -m uxid.cli decode usr_01HF3NZ4Q8K2X7M5TP9R0WBVE6
    uxid generate --size small --count 5
"""

from uxid.cli.app import app
from uxid.logging import setup_logging
from uxid.settings import get_settings

# Compact CLI format: level + message, no timestamps
CLI_LOG_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"


def main() -> None:
    """CLI entry point with logging configuration."""
    setup_logging(get_settings().log_level, CLI_LOG_FORMAT)
    app()


if __name__ == "__main__":
    main()

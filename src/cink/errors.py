"""Error types with formatted location context."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised for an invalid setting in a config file or on the command line."""

    def __init__(self, message: str, path: Path | None = None, key: str | None = None) -> None:
        self.message = message
        self.path = path
        self.key = key
        super().__init__(self.format())

    def format(self) -> str:
        if self.path is None and self.key is None:
            return f"error: {self.message}"

        where = str(self.path) if self.path is not None else "<command line>"
        if self.key:
            where += f": {self.key}"
        return f"error: {self.message}\n  --> {where}"

"""Exception types raised by the data layer and configuration loader"""

from pathlib import Path


class ConfigError(ValueError):
    """Invalid or missing process configuration (e.g. no data path)."""


class DataLoadError(RuntimeError):
    """A file or directory under the data root could not be loaded."""

    def __init__(self, message: str, path: Path):
        super().__init__(f"{message}: {path}")
        self.path = path

from pathlib import Path


class HeatLoadError(Exception):
    pass


class FileWriteError(HeatLoadError):
    """Raised when a report cannot be written to `path`."""

    def __init__(self, path: Path | str) -> None:
        self.path = path
        super().__init__(f"Could not write file: {path}")

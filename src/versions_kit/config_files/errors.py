from pathlib import Path


class ConfigFileIOError(OSError):
    """Reading or writing a config file failed.

    Raised from the underlying OSError or UnicodeDecodeError. Parsing itself
    never raises: once the text is in memory every input is accepted.
    """

    def __init__(self, action: str, path: Path) -> None:
        super().__init__(f"Failed to {action} config file: {path}")
        self.action = action
        self.path = path

"""Service-layer exceptions."""


class SaveLoadError(Exception):
    """Raised when the save slot cannot be written, read, or trusted."""


class SaveVersionError(SaveLoadError):
    """The save slot was written by an incompatible save format."""

    def __init__(self, found: object, expected: int) -> None:
        super().__init__(f"Unsupported save version {found!r} (expected {expected}).")
        self.found = found
        self.expected = expected

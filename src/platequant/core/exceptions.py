"""Exception classes for the PlateQuant core module."""


class PlateQuantError(Exception):
    """Base exception for all PlateQuant errors."""


class GridReadError(PlateQuantError):
    """Raised when a tabular file cannot be read into a grid of cells."""

    def __init__(self, path: str | None = None, reason: str | None = None) -> None:
        msg = f"Could not read table: {path}" if path else "Could not read table"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason


class ImageReadError(PlateQuantError):
    """Raised when an image file cannot be decoded into pixels."""

    def __init__(self, path: str | None = None, reason: str | None = None) -> None:
        msg = f"Could not decode image: {path}" if path else "Could not decode image"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)
        self.path = path
        self.reason = reason


class UnsupportedFormatError(PlateQuantError):
    """Raised when a file extension is not handled by any reader."""

    def __init__(self, path: str | None = None) -> None:
        msg = f"Unsupported file format: {path}" if path else "Unsupported file format"
        super().__init__(msg)
        self.path = path

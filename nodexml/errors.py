"""Errors raised while building XML documents."""


class MissingNameError(ValueError):
    """An element node has no name."""

    def __init__(self, message: str = "XML node missing name") -> None:
        super().__init__(message)


__all__ = ["MissingNameError"]

"""Errors raised by the page objects."""


class PageObjectError(Exception):
    """Base exception for page object failures."""

    pass


class PageNotLoadedError(PageObjectError):
    """A page or component failed its readiness check.

    ``element`` names the first checklist entry that could not be found, when
    the failure came from a checklist probe.
    """

    def __init__(self, message: str, element: str | None = None) -> None:
        self.message = message
        self.element = element
        if element:
            message = f"{message} (expected: {element})"
        super().__init__(message)

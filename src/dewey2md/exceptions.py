"""Custom exceptions for dewey2md."""


class Dewey2mdError(Exception):
    """Base exception for dewey2md operations."""


class FetchError(Dewey2mdError):
    """Error during page fetching."""


class SourceNotAvailableError(FetchError):
    """The requested page does not exist on the library server."""


class ParseError(Dewey2mdError):
    """Error during markup parsing."""


class ContentRootNotFoundError(ParseError):
    """Section page has no recognizable content region."""


class TypesetError(Dewey2mdError):
    """Error while running the external typesetting tool."""

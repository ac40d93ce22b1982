"""Custom exceptions for the curl-decoder library."""


class CurlDecoderError(Exception):
    """Base exception for all curl-decoder errors."""
    pass


class ParseFailure(CurlDecoderError):
    """Raised when a parser cannot match at the current position.

    Carries the input the parser was handed so an enclosing alternation can
    try the next candidate from the same position.
    """

    def __init__(self, message: str, remaining: str = ""):
        super().__init__(message)
        self.remaining = remaining


class MalformedQuotedDataError(ParseFailure):
    """Raised when a quote is opened but never closed."""
    pass


class UrlParseError(ParseFailure):
    """Raised when a URL string cannot be decomposed."""
    pass


class NotACurlCommandError(CurlDecoderError):
    """Raised when the input does not start with the `curl` token."""
    pass


class MissingUrlError(CurlDecoderError):
    """Raised when no target URL follows the `curl` token."""
    pass


class UnparsedInputError(CurlDecoderError):
    """Raised in strict mode when options stop before the end of input."""

    def __init__(self, message: str, remainder: str = "", entries=None):
        super().__init__(message)
        self.remainder = remainder
        self.entries = list(entries or [])


class ConfigurationError(CurlDecoderError):
    """Raised when configuration is invalid or incomplete."""
    pass

"""
Exceptions raised by the parsing layer.
"""


class InvalidURI(ValueError):
    """
    Raised when a string cannot be parsed as a URI.

    Attributes:
        uri: The offending input (or the component that failed)
        reason: Human-readable description of the failure
    """

    def __init__(self, uri: str, reason: str):
        super().__init__(f"Invalid URI {uri!r}: {reason}")
        self.uri = uri
        self.reason = reason

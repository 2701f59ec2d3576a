"""Load-test exception classes.

The generator and the validators never raise. These exceptions are reserved
for helpers that are asked to interpret data they did not produce, such as
decoding a payload blob that came back from a server or a capture file.
"""


class LoadTestError(Exception):
    """Base exception for the load-test toolkit.

    Attributes:
        message: Error message
    """

    def __init__(self, message: str = "Load-test helper error") -> None:
        self.message = message
        super().__init__(self.message)


class PayloadDecodeError(LoadTestError):
    """A payload blob is not base64-encoded JSON."""

    def __init__(self, message: str = "Payload blob could not be decoded") -> None:
        super().__init__(message=message)

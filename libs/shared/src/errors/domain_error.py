"""Custom Error Base Class"""


class DomainError(Exception):
    """Domain error base class

    Base class for all screening errors. `code` defaults to the class name
    so callers can group failures without string matching.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__

"""
models/errors.py
----------------
Error kinds raised by the data-access layer.
Each carries an HTTP-equivalent `status` for the presentation layer to translate.
Store failures (psycopg2.Error) are never wrapped in these.
"""


class LunchlyError(Exception):
    """Base class for all errors raised by the repositories."""

    status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFound(LunchlyError):
    """A lookup by id matched no row."""

    status = 404


class InvalidArgument(LunchlyError):
    """The caller passed input the operation refuses."""

    status = 400

    @property
    def reason(self) -> str:
        return self.message


class InvalidState(LunchlyError):
    """The entity is not in a state that allows the operation (e.g. not saved yet)."""

    status = 409

"""Everything that can go wrong while putting a recipe together.

Each error carries an `ErrorKind` so callers can branch on the kind rather than
on the wording of the message.
"""

from enum import Enum


class ErrorKind(Enum):
    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    PARSE = "parse"
    NOT_FOUND = "not_found"
    VALIDATION = "validation"


class RecipeError(Exception):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigurationError(RecipeError):
    kind = ErrorKind.CONFIGURATION


class UpstreamError(RecipeError):
    kind = ErrorKind.UPSTREAM

    def __init__(self, service: str, status_code: int, body: str) -> None:
        super().__init__(f"{service} error {status_code}: {body}")
        self.service = service
        self.status_code = status_code
        self.body = body


class ParseError(RecipeError):
    kind = ErrorKind.PARSE


class NotFoundError(RecipeError):
    kind = ErrorKind.NOT_FOUND


class ValidationError(RecipeError):
    kind = ErrorKind.VALIDATION

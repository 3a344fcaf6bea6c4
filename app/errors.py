from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    TOO_MANY_REQUESTS = "too_many_requests"
    INTERNAL = "internal"


# kind -> (http status, default message)
_KIND_INFO = {
    ErrorKind.BAD_REQUEST: (400, "Bad request"),
    ErrorKind.UNAUTHORIZED: (401, "Unauthorized"),
    ErrorKind.FORBIDDEN: (403, "Forbidden"),
    ErrorKind.NOT_FOUND: (404, "Not found"),
    ErrorKind.CONFLICT: (409, "Conflict"),
    ErrorKind.TOO_MANY_REQUESTS: (429, "Too many requests"),
    ErrorKind.INTERNAL: (500, "Internal server error"),
}


class AppError(Exception):
    """
    The one error type raised by services, repositories and route
    dependencies. Mapped to a response envelope in app.main.
    """

    def __init__(self, kind: ErrorKind, message: str = None):
        status_code, default_message = _KIND_INFO[kind]
        self.kind = kind
        self.status_code = status_code
        self.message = message or default_message
        super().__init__(self.message)

    def __repr__(self):
        return f"AppError({self.kind.value}, {self.status_code}, {self.message!r})"

    @classmethod
    def bad_request(cls, message: str = None):
        return cls(ErrorKind.BAD_REQUEST, message)

    @classmethod
    def unauthorized(cls, message: str = None):
        return cls(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def forbidden(cls, message: str = None):
        return cls(ErrorKind.FORBIDDEN, message)

    @classmethod
    def not_found(cls, message: str = None):
        return cls(ErrorKind.NOT_FOUND, message)

    @classmethod
    def conflict(cls, message: str = None):
        return cls(ErrorKind.CONFLICT, message)

    @classmethod
    def too_many_requests(cls, message: str = None):
        return cls(ErrorKind.TOO_MANY_REQUESTS, message)

    @classmethod
    def internal(cls, message: str = None):
        return cls(ErrorKind.INTERNAL, message)

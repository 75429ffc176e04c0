"""Domain errors raised by the service layer.

The API layer maps each error to an HTTP status; the domain never imports
FastAPI.
"""


class TestSystemError(Exception):
    """Base class for failures the caller can act on."""

    __test__ = False

    status_code: int = 500

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class BadRequestError(TestSystemError):
    """Caller violated the create/update contract."""

    status_code = 400


class NotFoundError(TestSystemError):
    """Record is missing or owned by someone else; callers cannot tell the two apart."""

    status_code = 404


__all__ = ["BadRequestError", "NotFoundError", "TestSystemError"]

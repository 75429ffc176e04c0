"""Tests API Router - thin HTTP layer over TestAccessService.

Every route requires an admin or teacher caller and passes that caller's
id to the service explicitly. Domain errors become HTTP errors here.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ...domain.domain_value import Principal
from ...domain.errors import TestSystemError
from ...domain.quiz import Test
from ...service import TestAccessService
from ..contracts import ErrorResponse
from ..deps import get_test_service, require_test_manager

router = APIRouter(prefix="/tests", tags=["tests"])

Caller = Annotated[Principal, Depends(require_test_manager)]
Service = Annotated[TestAccessService, Depends(get_test_service)]


def _to_http(exc: TestSystemError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.detail)


@router.get("", response_model=list[Test])
async def get_tests(caller: Caller, service: Service) -> list[Test]:
    """List the caller's tests."""
    return await service.list_tests(caller.user_id)


@router.get(
    "/{test_id}",
    response_model=Test,
    responses={404: {"model": ErrorResponse}},
)
async def get_test(test_id: str, caller: Caller, service: Service) -> Test:
    """Get one of the caller's tests."""
    try:
        return await service.get_test(caller.user_id, test_id)
    except TestSystemError as exc:
        raise _to_http(exc) from exc


@router.post(
    "",
    response_model=Test,
    responses={400: {"model": ErrorResponse}},
)
async def save_test(payload: Test, caller: Caller, service: Service) -> Test:
    """
    Create a test owned by the caller.

    The body must not carry an id; author, questions and sessions are set
    by the server.
    """
    try:
        return await service.create_test(caller.user_id, payload)
    except TestSystemError as exc:
        raise _to_http(exc) from exc


@router.put(
    "/{test_id}",
    response_model=Test,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_test(test_id: str, payload: Test, caller: Caller, service: Service) -> Test:
    """Change name, duration and question count of an existing test."""
    try:
        return await service.update_test(caller.user_id, test_id, payload)
    except TestSystemError as exc:
        raise _to_http(exc) from exc


@router.delete("/{test_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_test(test_id: str, caller: Caller, service: Service) -> None:
    """Delete one of the caller's tests; deleting a missing test succeeds."""
    await service.delete_test(caller.user_id, test_id)

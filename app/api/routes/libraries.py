"""Library, version and tutorial endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse

from app.api.dependencies import get_request_handler
from app.models.schemas import ErrorResponse
from app.services.request_handler import LibraryRequestHandler

router = APIRouter(prefix="/libraries", tags=["Libraries"])

FieldsQuery = Annotated[
    Optional[str],
    Query(
        description="Comma-separated list of fields to return, or '*' for all fields",
    ),
]

NOT_FOUND_RESPONSES = {404: {"model": ErrorResponse, "description": "Not found"}}


async def _respond(
    handler: LibraryRequestHandler, fields: Optional[str], *segments: str
) -> JSONResponse:
    # Store adapters may block on disk or database I/O
    result = await run_in_threadpool(handler.handle, segments, fields)
    return JSONResponse(
        status_code=result.status_code,
        content=result.body,
        headers=result.headers,
    )


@router.get(
    "/{library}",
    summary="Get a library",
    description="Library metadata including its assets and tutorials.",
    responses=NOT_FOUND_RESPONSES,
)
async def get_library(
    library: str,
    fields: FieldsQuery = None,
    handler: LibraryRequestHandler = Depends(get_request_handler),
):
    return await _respond(handler, fields, library)


@router.get(
    "/{library}/tutorials",
    summary="List tutorials of a library",
    responses=NOT_FOUND_RESPONSES,
)
async def list_tutorials(
    library: str,
    fields: FieldsQuery = None,
    handler: LibraryRequestHandler = Depends(get_request_handler),
):
    return await _respond(handler, fields, library, "tutorials")


@router.get(
    "/{library}/tutorials/{tutorial}",
    summary="Get a tutorial of a library",
    responses=NOT_FOUND_RESPONSES,
)
async def get_tutorial(
    library: str,
    tutorial: str,
    fields: FieldsQuery = None,
    handler: LibraryRequestHandler = Depends(get_request_handler),
):
    return await _respond(handler, fields, library, "tutorials", tutorial)


@router.get(
    "/{library}/{version}",
    summary="Get a published version of a library",
    description="Files, raw files and SRI digests of one version.",
    responses=NOT_FOUND_RESPONSES,
)
async def get_version(
    library: str,
    version: str,
    fields: FieldsQuery = None,
    handler: LibraryRequestHandler = Depends(get_request_handler),
):
    return await _respond(handler, fields, library, version)

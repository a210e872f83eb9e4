"""
Resource CRUD endpoints.

One collection route and one record route; the HTTP method decides the
operation. The router is mounted at the root and again under the API
prefix.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from atlas.db.adapter import TableBackend
from atlas.db.client import get_authenticated_client, get_client
from atlas.db.supabase_backend import SupabaseBackend
from atlas.errors import GatewayError
from atlas.gateway.capabilities import CapabilityMap
from atlas.gateway.commands import build_command
from atlas.gateway.executor import execute_command
from atlas.gateway.request import parse_body
from atlas.web.envelope import error_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resources"])

# HEAD is routed so it reaches the gateway's own 405
GATEWAY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"]


def get_backend(request: Request) -> TableBackend:
    """
    Backend for this request.

    A backend fixed at app creation (in-memory, tests) wins. Otherwise a
    Supabase backend is built, querying as the caller when a bearer
    token is present.
    """
    backend = getattr(request.app.state, "backend", None)
    if backend is not None:
        return backend

    authorization = request.headers.get("authorization") or ""
    if authorization.startswith("Bearer "):
        return SupabaseBackend(get_authenticated_client(authorization[7:]))
    return SupabaseBackend(get_client())


async def handle_resource_request(
    request: Request,
    resource: str,
    record_id: str | None = None,
) -> JSONResponse:
    """Translate one request into one command and one envelope."""
    capabilities: CapabilityMap = request.app.state.capabilities

    try:
        body = parse_body(request.method, request.headers.get("content-type"), await request.body())
        command = build_command(
            request.method,
            resource,
            record_id,
            query_params=request.query_params.multi_items(),
            body=body,
        )
        capabilities.check(command)
        data = execute_command(command, get_backend(request))

    except GatewayError as e:
        logger.warning(f"{request.method} {request.url.path} failed ({e.status_code}): {e.message}")
        return error_response(e.status_code, e.message)

    except Exception as e:
        logger.exception(f"Unhandled error in {request.method} {request.url.path}")
        return error_response(500, "Internal Server Error", details=str(e) or type(e).__name__)

    return success_response(data)


@router.api_route("/{resource}", methods=GATEWAY_METHODS)
async def resource_collection(request: Request, resource: str) -> JSONResponse:
    """List (GET) or create (POST) records of a resource."""
    return await handle_resource_request(request, resource)


@router.api_route("/{resource}/{record_id}", methods=GATEWAY_METHODS)
async def resource_record(request: Request, resource: str, record_id: str) -> JSONResponse:
    """Point operations on one record by id."""
    return await handle_resource_request(request, resource, record_id)

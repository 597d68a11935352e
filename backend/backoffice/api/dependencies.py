"""API Dependencies — per-request gateway injection and response conversion.

Invariants:
    - One SqlGateway per request, bound to that request's AsyncSession
    - Tests swap the store by overriding get_gateway (or get_db)
    - A Respond without a body becomes a bodiless response (204)
"""

from fastapi import Depends, Response
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.pipeline import Respond
from backoffice.core.repository_protocols import PersistenceGateway
from backoffice.infrastructure.database import get_db
from backoffice.infrastructure.sql_gateway import SqlGateway


async def get_gateway(db: AsyncSession = Depends(get_db)) -> PersistenceGateway:
    return SqlGateway(db)


def to_http_response(result: Respond) -> Response:
    if result.body is None:
        return Response(status_code=result.status_code)
    return JSONResponse(status_code=result.status_code, content=result.body)

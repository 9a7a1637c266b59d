"""
Request handlers shared by the content routers.

Each router declares its own endpoints, query parameters and policies and
delegates the body of the handler here.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from src.api.error import unwrap
from src.api.responses import envelope, page_envelope
from src.app.policy import Identity
from src.app.repositories.content_repository import ContentQuery
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import (
    ContentResource,
    CreateContentUseCase,
    DeleteContentUseCase,
    GetContentUseCase,
    ListContentUseCase,
    UpdateContentUseCase,
)
from src.app.use_cases.schema import CamelModel


def query_of(search: Optional[str] = None, tag: Optional[str] = None, **equals: Any) -> ContentQuery:
    """ContentQuery from request filters, skipping the ones not sent."""
    return ContentQuery(
        equals={column: value for column, value in equals.items() if value is not None},
        tag=tag or None,
        search=search or None,
    )


async def list_items(
    uow: UnitOfWork,
    resource: ContentResource,
    query: ContentQuery,
    identity: Optional[Identity] = None,
    page: int = 1,
    limit: Optional[int] = None,
    paginate: bool = True,
) -> Dict[str, Any]:
    if paginate:
        limit = limit or resource.default_limit
    else:
        page, limit = 1, None
    result = await ListContentUseCase(uow, resource).execute(
        query, identity=identity, page=page, limit=limit
    )
    return page_envelope(unwrap(result))


async def get_item(
    uow: UnitOfWork,
    resource: ContentResource,
    identity: Optional[Identity] = None,
    item_id: Optional[UUID] = None,
    slug: Optional[str] = None,
) -> Dict[str, Any]:
    result = await GetContentUseCase(uow, resource).execute(
        identity=identity, item_id=item_id, slug=slug
    )
    return envelope(data=unwrap(result))


async def create_item(
    uow: UnitOfWork,
    resource: ContentResource,
    identity: Identity,
    command: CamelModel,
    meta: RequestMeta,
) -> Dict[str, Any]:
    result = await CreateContentUseCase(uow, resource, meta).execute(identity.user_id, command)
    return envelope(data=unwrap(result))


async def update_item(
    uow: UnitOfWork,
    resource: ContentResource,
    identity: Identity,
    item_id: UUID,
    patch: Dict[str, Any],
    meta: RequestMeta,
) -> Dict[str, Any]:
    result = await UpdateContentUseCase(uow, resource, meta).execute(
        identity.user_id, item_id, patch
    )
    return envelope(data=unwrap(result))


async def delete_item(
    uow: UnitOfWork,
    resource: ContentResource,
    identity: Identity,
    item_id: UUID,
    meta: RequestMeta,
    message: str,
) -> Dict[str, Any]:
    result = await DeleteContentUseCase(uow, resource, meta).execute(identity.user_id, item_id)
    unwrap(result)
    return envelope(data={}, message=message)

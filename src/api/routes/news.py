"""
News API Routes

Public reads of published articles, editorial CRUD and publish actions.
"""

import logging
from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Body, Depends, Query, status

from src.api.error import unwrap
from src.api.responses import envelope
from src.api.utils.access import optional_auth, require
from src.api.utils.content import (
    create_item,
    delete_item,
    get_item,
    list_items,
    query_of,
    update_item,
)
from src.app.policy import Identity
from src.app.services.audit_trail import RequestMeta
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.content import (
    NEWS,
    GetContentUseCase,
    RecordViewUseCase,
    SetPublishStateUseCase,
)
from src.app.use_cases.content.commands import NewsCommand
from src.depends import get_request_meta, get_unit_of_work, get_unit_of_work_factory
from src.domain.entities import ContentStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/news", tags=["News"])


async def record_view(uow_factory, news_id: UUID) -> None:
    """Background task: count one view. Never raises."""
    try:
        async with uow_factory() as uow:
            result = await RecordViewUseCase(uow).execute(news_id)
        if result.is_err():
            logger.warning(f"View not recorded for news {news_id}: {result.error.message}")
    except Exception:
        logger.exception(f"View count failed for news {news_id}")


@router.get("", status_code=status.HTTP_200_OK)
async def list_news(
    category: Optional[str] = Query(None),
    news_status: Optional[ContentStatus] = Query(None, alias="status"),
    tag: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    limit: Optional[int] = Query(None, ge=1, le=100),
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List news articles, newest first.

    Anonymous callers only ever get published articles, whatever status
    they ask for.
    """
    query = query_of(search=search, tag=tag, category=category, status=news_status)
    return await list_items(uow, NEWS, query, identity, page, limit)


@router.get("/id/{item_id}", status_code=status.HTTP_200_OK)
async def get_news_by_id(
    item_id: UUID,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    return await get_item(uow, NEWS, identity, item_id=item_id)


@router.get("/{slug}", status_code=status.HTTP_200_OK)
async def get_news_by_slug(
    slug: str,
    background_tasks: BackgroundTasks,
    identity: Optional[Identity] = Depends(optional_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
    uow_factory=Depends(get_unit_of_work_factory),
):
    """
    Read one article by slug.

    An anonymous read of a published article counts one view after the
    response is sent; the count never delays or fails the read. Staff reads
    are not counted.
    """
    result = await GetContentUseCase(uow, NEWS).execute(identity=identity, slug=slug)
    article = unwrap(result)
    if identity is None and article.status == ContentStatus.published:
        background_tasks.add_task(record_view, uow_factory, article.id)
    return envelope(data=article)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_news(
    command: NewsCommand,
    identity: Identity = Depends(require("news:create")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await create_item(uow, NEWS, identity, command, meta)


@router.put("/{item_id}", status_code=status.HTTP_200_OK)
async def update_news(
    item_id: UUID,
    patch: Dict[str, Any] = Body(...),
    identity: Identity = Depends(require("news:update")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await update_item(uow, NEWS, identity, item_id, patch, meta)


@router.delete("/{item_id}", status_code=status.HTTP_200_OK)
async def delete_news(
    item_id: UUID,
    identity: Identity = Depends(require("news:delete")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    return await delete_item(uow, NEWS, identity, item_id, meta, "News article deleted successfully")


@router.post("/{item_id}/publish", status_code=status.HTTP_200_OK)
async def publish_news(
    item_id: UUID,
    identity: Identity = Depends(require("news:publish")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    result = await SetPublishStateUseCase(uow, NEWS, meta).execute(
        identity.user_id, item_id, publish=True
    )
    return envelope(data=unwrap(result), message="News article published")


@router.post("/{item_id}/unpublish", status_code=status.HTTP_200_OK)
async def unpublish_news(
    item_id: UUID,
    identity: Identity = Depends(require("news:publish")),
    uow: UnitOfWork = Depends(get_unit_of_work),
    meta: RequestMeta = Depends(get_request_meta),
):
    result = await SetPublishStateUseCase(uow, NEWS, meta).execute(
        identity.user_id, item_id, publish=False
    )
    return envelope(data=unwrap(result), message="News article unpublished")

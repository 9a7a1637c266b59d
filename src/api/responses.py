"""
Response envelope.

Every endpoint answers ``{success, data?, message?, errors?, pagination?,
count?}`` with camelCase keys.
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel

from src.app.use_cases.content import ContentPage

# Never serialized, whatever the entity
HIDDEN_FIELDS = {"password_hash"}

_MISSING = object()


def to_wire(value: Any) -> Any:
    """JSON-ready form of entities, DTOs and lists of them."""
    if isinstance(value, SQLModel):
        data = value.model_dump(exclude=HIDDEN_FIELDS)
        return {to_camel(key): jsonable_encoder(item) for key, item in data.items()}
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [to_wire(item) for item in value]
    return jsonable_encoder(value)


def envelope(data: Any = _MISSING, message: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
    """Successful response body. ``data=None`` is kept; omitted data is left out."""
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not _MISSING:
        body["data"] = to_wire(data)
    for key, value in extra.items():
        if value is not None:
            body[key] = to_wire(value)
    return body


def page_envelope(page: ContentPage) -> Dict[str, Any]:
    """List body with count and, when paginated, the pagination block."""
    pagination = None
    if page.limit is not None:
        pagination = {
            "page": page.page,
            "limit": page.limit,
            "total": page.total,
            "pages": page.pages,
        }
    return envelope(data=page.items, count=len(page.items), pagination=pagination)

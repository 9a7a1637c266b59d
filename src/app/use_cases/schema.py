"""
Shared pydantic base for commands and responses.

Wire format is camelCase; Python code uses snake_case names.
"""

from typing import Any, Dict, List, Type

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from src.domain.result import Error


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


# Leading location markers FastAPI puts in request validation errors
REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def field_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    """Flatten pydantic error dicts into ``[{field, message}]``."""
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        details.append(
            {"field": ".".join(loc) or "unknown", "message": err.get("msg", "Invalid value")}
        )
    return details


def validation_error(exc: ValidationError) -> Error:
    return Error("VALIDATION_ERROR", "Validation failed", details=field_errors(exc.errors()))


def alias_keys(model: Type[BaseModel], patch: Dict[str, Any]) -> Dict[str, Any]:
    """
    Rekey a patch by the model's wire names.

    Clients may send either ``featuredImage`` or ``featured_image``; both
    land on the same key. Unknown keys pass through untouched.
    """
    aliases = {
        name: field.alias for name, field in model.model_fields.items() if field.alias
    }
    return {aliases.get(key, key): value for key, value in patch.items()}

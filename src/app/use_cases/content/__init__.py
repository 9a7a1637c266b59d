from .create_content_use_case import CreateContentUseCase
from .delete_content_use_case import DeleteContentUseCase
from .dtos import ContentPage
from .get_content_use_case import GetContentUseCase
from .list_content_use_case import ListContentUseCase
from .record_hit_use_cases import RecordDownloadUseCase, RecordViewUseCase
from .resources import (
    ADS,
    BOARD_MEMBERS,
    CONTACTS,
    FAQS,
    MEDIA,
    NEWS,
    PAGES,
    PORTALS,
    PUBLICATIONS,
    REGULATIONS,
    ContentResource,
)
from .set_publish_state_use_case import SetPublishStateUseCase
from .update_content_use_case import UpdateContentUseCase

__all__ = [
    "CreateContentUseCase",
    "DeleteContentUseCase",
    "GetContentUseCase",
    "ListContentUseCase",
    "UpdateContentUseCase",
    "SetPublishStateUseCase",
    "RecordViewUseCase",
    "RecordDownloadUseCase",
    "ContentPage",
    "ContentResource",
    "NEWS",
    "PUBLICATIONS",
    "REGULATIONS",
    "MEDIA",
    "PAGES",
    "PORTALS",
    "FAQS",
    "BOARD_MEMBERS",
    "ADS",
    "CONTACTS",
]

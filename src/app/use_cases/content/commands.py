"""
Content Commands

Write schemas for every content resource. The same schema validates a
create payload and the merged record produced by a partial update.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import EmailStr, Field, field_validator

from src.app.use_cases.schema import CamelModel
from src.domain.base import utcnow
from src.domain.entities import (
    AdStatus,
    AdType,
    ContactStatus,
    ContentStatus,
    MediaType,
    PublicationCategory,
    RegulationCategory,
    SectionType,
)
from src.domain.entities.settings import DEFAULT_SITE_NAME


class NewsCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = None
    content: str = Field(..., min_length=1)
    excerpt: str = Field(..., min_length=1, max_length=500)
    featured_image: Optional[str] = None
    category: str = Field(..., min_length=1)
    tags: List[str] = Field(default_factory=list)
    status: ContentStatus = ContentStatus.draft


class PublicationCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1, max_length=1000)
    category: PublicationCategory
    file_url: str = Field(..., min_length=1)
    file_size: int = Field(..., ge=0)
    file_type: str = "application/pdf"
    publish_year: int
    published_at: datetime = Field(default_factory=utcnow)

    @field_validator("publish_year")
    @classmethod
    def check_publish_year(cls, value: int) -> int:
        latest = utcnow().year + 1
        if not 1960 <= value <= latest:
            raise ValueError(f"Publish year must be between 1960 and {latest}")
        return value


class RegulationCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=300)
    description: str = Field(..., min_length=1, max_length=2000)
    category: RegulationCategory
    file_url: str = Field(..., min_length=1)
    file_size: Optional[int] = Field(default=None, ge=0)
    file_type: str = "application/pdf"
    effective_date: Optional[datetime] = None
    status: ContentStatus = ContentStatus.published
    tags: List[str] = Field(default_factory=list)


class MediaCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=500)
    type: MediaType
    url: str = Field(..., min_length=1)
    thumbnail_url: Optional[str] = None
    category: Optional[str] = None
    album: Optional[str] = None
    uploaded_at: datetime = Field(default_factory=utcnow)
    tags: List[str] = Field(default_factory=list)


class PageSection(CamelModel):
    type: SectionType
    heading: Optional[str] = None
    content: Any
    order: int = 0


class PageCommand(CamelModel):
    title: str = Field(..., min_length=1, max_length=200)
    slug: Optional[str] = Field(default=None, pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    content: str = Field(..., min_length=1)
    sections: List[PageSection] = Field(default_factory=list)
    meta_title: Optional[str] = Field(default=None, max_length=60)
    meta_description: Optional[str] = Field(default=None, max_length=160)
    template: str = "default"
    order: int = 0
    is_published: bool = True


class PortalCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    url: str = Field(..., min_length=1)
    icon: Optional[str] = None
    category: str = Field(..., min_length=1)
    is_external: bool = True
    requires_auth: bool = False
    order: int = 0
    is_active: bool = True


class FAQCommand(CamelModel):
    question: str = Field(..., min_length=1, max_length=300)
    answer: str = Field(..., min_length=1, max_length=2000)
    category: str = Field(..., min_length=1)
    order: int = 0
    is_published: bool = True


class BoardMemberCommand(CamelModel):
    name: str = Field(..., min_length=1)
    position: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    bio: Optional[str] = None
    order: int = 0
    is_active: bool = True


class AdCommand(CamelModel):
    title: Optional[str] = Field(default=None, max_length=200)
    type: AdType
    content: str = Field(..., min_length=1)
    link: Optional[str] = None
    col_span: int = Field(default=1, ge=1, le=4)
    row_span: int = Field(default=1, ge=1, le=2)
    status: AdStatus = AdStatus.draft
    order: int = 0


class ContactCommand(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=5000)


class ContactStatusCommand(CamelModel):
    status: ContactStatus


class SocialLink(CamelModel):
    platform: str
    url: str


class SiteLink(CamelModel):
    title: str
    url: str
    order: int = 0


class SettingsCommand(CamelModel):
    site_name: str = Field(default=DEFAULT_SITE_NAME, min_length=1)
    site_description: str = Field(default="", max_length=500)
    contact_email: str = ""
    contact_phone: str = ""
    address: str = ""
    social_media: List[SocialLink] = Field(default_factory=list)
    footer_links: List[SiteLink] = Field(default_factory=list)
    quick_links: List[SiteLink] = Field(default_factory=list)
    logo: Optional[str] = None
    favicon: Optional[str] = None
    office_hours: Optional[str] = None


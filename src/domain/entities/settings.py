"""
Settings Entity

Site-wide configuration stored as a single well-known row.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, Field, SQLModel

from src.domain.base import utcnow

SITE_SETTINGS_KEY = "site"
DEFAULT_SITE_NAME = "Nigerian Upstream Petroleum Regulatory Commission"


class Settings(SQLModel, table=True):
    """
    Settings entity - exactly one row, addressed by key="site".

    Accessed through the settings repository's get_or_create(), never cached
    in process.
    """

    __tablename__ = "settings"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    key: str = Field(default=SITE_SETTINGS_KEY, unique=True, max_length=32)

    site_name: str = Field(default=DEFAULT_SITE_NAME)
    site_description: str = Field(default="", max_length=500)
    contact_email: str = Field(default="")
    contact_phone: str = Field(default="")
    address: str = Field(default="")
    social_media: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    footer_links: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    quick_links: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON))
    logo: Optional[str] = None
    favicon: Optional[str] = None
    office_hours: Optional[str] = None

    last_updated_by: Optional[UUID] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

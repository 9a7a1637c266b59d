"""
CMS Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Administrative role of a CMS user. No role implies another."""

    super_admin = "super-admin"
    admin = "admin"
    editor = "editor"
    content_manager = "content-manager"


class AuditAction(str, Enum):
    """What an audit entry records"""

    create = "create"
    update = "update"
    delete = "delete"
    login = "login"
    logout = "logout"
    publish = "publish"
    unpublish = "unpublish"


class ContentStatus(str, Enum):
    """Lifecycle of news articles and regulations"""

    draft = "draft"
    published = "published"
    archived = "archived"


class PublicationCategory(str, Enum):
    annual_reports = "Annual Reports"
    operational_reports = "Operational Reports"
    production_status = "Production Status"
    gas_reports = "Gas Reports"
    oil_reports = "Oil Reports"
    acreage_reports = "Acreage Reports"
    upstream_gaze = "Upstream Gaze Magazine"


class RegulationCategory(str, Enum):
    pre_pia = "Pre P.I.A"
    pia = "P.I.A"
    gazzetted = "Gazzetted Regulations"
    acts = "Acts"
    guidelines = "Guidelines"


class MediaType(str, Enum):
    photo = "photo"
    video = "video"


class SectionType(str, Enum):
    """Block type of a static page section"""

    text = "text"
    image = "image"
    video = "video"
    list = "list"
    table = "table"


class AdType(str, Enum):
    text = "text"
    image = "image"
    video = "video"
    youtube = "youtube"


class AdStatus(str, Enum):
    draft = "draft"
    published = "published"


class ContactStatus(str, Enum):
    new = "new"
    read = "read"
    replied = "replied"

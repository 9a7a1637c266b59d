"""
CMS Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    AdStatus,
    AdType,
    AuditAction,
    ContactStatus,
    ContentStatus,
    MediaType,
    PublicationCategory,
    RegulationCategory,
    SectionType,
    UserRole,
)

# Export all entities
from .user import User
from .audit_log import AuditLog
from .news import News
from .publication import Publication
from .regulation import Regulation
from .media import Media
from .static_page import StaticPage
from .portal import Portal
from .faq import FAQ
from .board_member import BoardMember
from .ad import Ad
from .settings import Settings
from .contact_submission import ContactSubmission

__all__ = [
    # Enums
    "AdStatus",
    "AdType",
    "AuditAction",
    "ContactStatus",
    "ContentStatus",
    "MediaType",
    "PublicationCategory",
    "RegulationCategory",
    "SectionType",
    "UserRole",
    # Entities
    "User",
    "AuditLog",
    "News",
    "Publication",
    "Regulation",
    "Media",
    "StaticPage",
    "Portal",
    "FAQ",
    "BoardMember",
    "Ad",
    "Settings",
    "ContactSubmission",
]

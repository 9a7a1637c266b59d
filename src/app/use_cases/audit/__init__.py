"""
Audit Use Cases

All audit-related business logic.
"""

from .list_audit_logs_use_case import ListAuditLogsUseCase

__all__ = [
    "ListAuditLogsUseCase",
]

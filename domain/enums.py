"""
Domain enums for MessLedger application.
"""

import enum


class Role(str, enum.Enum):
    """Member roles carried in the session token"""

    ADMIN = "admin"
    MANAGER = "manager"
    MEMBER = "member"


DEFAULT_ROLE = Role.MEMBER.value

"""
Domain mappers package.
Handles transformation between MongoDB documents and JSON responses.
"""

from domain.mappers.document_mapper import DocumentMapper
from domain.mappers.user_mapper import UserMapper

__all__ = ["DocumentMapper", "UserMapper"]

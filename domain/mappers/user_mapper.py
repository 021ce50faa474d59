"""
User domain mappers.
Member documents leave the service without their password hash.
"""

from typing import Any, Dict, Optional

from domain.mappers.document_mapper import DocumentMapper

PRIVATE_FIELDS = ("password",)


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        """
        Convert a stored user document to its public form.

        Args:
            user: raw document from the ``users`` collection

        Returns:
            JSON-ready dict without private fields, or None
        """
        if user is None:
            return None
        public = {k: v for k, v in user.items() if k not in PRIVATE_FIELDS}
        return DocumentMapper.to_response(public)

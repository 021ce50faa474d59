"""
Domain layer - Enums, schemas and document mappers.
"""

from domain import enums, schemas

__all__ = ["enums", "schemas"]

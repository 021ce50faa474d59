"""Utility helpers (dates, identifiers, serialization)"""

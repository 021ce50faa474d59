"""
Core package - Shared utilities used across layers.
"""

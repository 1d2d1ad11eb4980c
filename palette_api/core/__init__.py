"""
Core application utilities.

This package provides:
- Application-level settings (separate from DB settings)
- Logging configuration with request correlation ids
- Operation outcomes and request validation helpers
- FastAPI dependency helpers
"""

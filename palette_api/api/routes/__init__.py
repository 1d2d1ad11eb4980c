"""
API route modules for the palette service.

This package contains subrouters for:
- Projects: list, read, create, rename, delete (with palettes), project palettes
- Palettes: read, create, replace, delete

Routers are included from palette_api.api.main (under the /api/v1 prefix).
"""

"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for projects and palettes. They
run inside the transaction opened by the calling service and never commit.
"""

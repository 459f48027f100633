"""LuminaBooks - Core Application Package

This package contains the core client modules including:
- Book records and form drafts (book.py)
- Server-synchronized collection (store.py)
- Create/edit form state (session.py)
- Search filtering (projection.py)
- Application state owner (controller.py)
"""

"""
Top‑level package for the Issue Tracker API.

Makes ``issue_tracker_api`` importable so that modules within ``app``
can be referenced by fully qualified names such as
``issue_tracker_api.app.main``.  All functionality lives in ``app``.
"""

__all__ = []

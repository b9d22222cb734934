"""
Application package initializer.

The API is split into configuration and storage (``core``), request and
response models (``schemas``), business rules (``services``) and HTTP
routes grouped by version under ``api/<version>/``.
"""

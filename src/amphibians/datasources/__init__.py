"""External data source integrations.

Each subdirectory is one data source::

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions use the shared session from ``services.http`` and translate
``requests`` failures into the types in ``amphibians.errors`` so callers never
depend on the HTTP library directly.
"""

"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, request building
    ├── {feature}.py      # Normalizers + fetch functions (one per endpoint/concept)
    └── fallback.py       # Synthetic records used when the source is unavailable

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``wateroffice/`` for the XML/CSV flavour, ``ebird/`` for JSON.

2. Write normalizers that turn payload text into ``ObservationRecord``::

       def parse_something(text: str) -> list[ObservationRecord]:
           ...  # raise MalformedPayload if the whole payload is unusable,
                # skip single bad records

3. Write a fallback generator taking the same query plus an injected
   ``random.Random``. It must never return an empty list.

4. Wire into a service (see ``services/birds.py``) with
   ``cache.get_or_compute(key, ttl, compute, fallback)``.

5. Add tests in ``tests/test_{name}.py``.
"""

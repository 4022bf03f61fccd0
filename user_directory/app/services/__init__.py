"""
Service layer.

Services hold the operations on the user collection and depend only on
a ``RecordStore``, so the storage backend can be swapped without
touching the API handlers.
"""

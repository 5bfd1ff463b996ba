"""Repository layer for village records.

Protocols in :mod:`village.repositories.protocols` describe the store
interfaces; :mod:`village.repositories.postgres` holds the SQLAlchemy
implementations, which run against PostgreSQL or SQLite.
"""

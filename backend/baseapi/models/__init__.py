"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Only Example is persisted in the database; the status catalog lives in-process

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all/alembic
"""

from baseapi.models.example import ExampleRecord  # noqa: F401

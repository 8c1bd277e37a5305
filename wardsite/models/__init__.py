"""ORM Models — SQLAlchemy declarative models for events and posts.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every row belongs to exactly one real auxiliary (slug string column)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from wardsite.models.event import Event  # noqa: F401
from wardsite.models.post import Post  # noqa: F401

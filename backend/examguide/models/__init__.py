"""ORM Models: SQLAlchemy declarative models for both stores.

Invariants:
    - All models inherit from Base (db/base.py)
    - The two tables share exam_name only as a read-time join key (no foreign key)

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all and alembic
"""

from examguide.models.classification import ExamClassification  # noqa: F401
from examguide.models.unique_exam import UniqueExam  # noqa: F401

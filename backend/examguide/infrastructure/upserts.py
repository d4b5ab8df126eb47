"""Store Primitives: single-statement upsert and insert-if-absent keyed by a unique column.

Invariants:
    - Each primitive issues exactly one INSERT ... ON CONFLICT statement (one round trip)
    - insert_if_absent never modifies an existing row
    - upsert only overwrites the columns named in update_columns
    - Only PostgreSQL and SQLite dialects are supported (both implement ON CONFLICT)

Design Decisions:
    - Atomicity per key comes from the database's conflict handling; no locks here
    - Callers commit; primitives only execute
"""

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from examguide.core.errors import StoreError

_INSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _dialect_insert(session: AsyncSession, model):
    dialect = session.bind.dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise StoreError(f"ON CONFLICT not supported for dialect {dialect!r}", "insert")
    return insert(model)


async def insert_if_absent(
    session: AsyncSession, model, rows: list[dict], key: str,
) -> list:
    """Insert rows whose key is not stored yet. Returns the keys actually inserted."""
    if not rows:
        return []
    key_column = getattr(model, key)
    stmt = (
        _dialect_insert(session, model)
        .values(rows)
        .on_conflict_do_nothing(index_elements=[key_column])
        .returning(key_column)
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def upsert(
    session: AsyncSession,
    model,
    row: dict,
    key: str,
    update_columns: list[str],
    returning: str,
):
    """Create the row or overwrite update_columns on the existing one.

    Returns the value of the `returning` column as stored after the statement,
    which lets callers tell a fresh insert from an update when that column is
    only written on insert.
    """
    stmt = _dialect_insert(session, model).values(**row)
    stmt = stmt.on_conflict_do_update(
        index_elements=[getattr(model, key)],
        set_={col: getattr(stmt.excluded, col) for col in update_columns},
    ).returning(getattr(model, returning))
    result = await session.execute(stmt)
    return result.scalar_one()

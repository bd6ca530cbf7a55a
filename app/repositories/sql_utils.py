# app/repositories/sql_utils.py
from typing import Any

from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, SQLModel

_INSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def insert_if_absent(
    session: Session,
    model: type[SQLModel],
    values: dict[str, Any],
    conflict_columns: list[str],
) -> bool:
    """
    Atomic INSERT ... ON CONFLICT (...) DO NOTHING.

    Commits the transaction. Returns True if a row was inserted,
    False if a row with the same conflict key already existed.
    """
    dialect = session.get_bind().dialect.name
    insert = _INSERT_BY_DIALECT.get(dialect)
    if insert is None:
        raise NotImplementedError(f"insert_if_absent not supported on {dialect}")

    stmt = (
        insert(model.__table__)
        .values(**values)
        .on_conflict_do_nothing(index_elements=conflict_columns)
    )
    result = session.exec(stmt)
    session.commit()
    return result.rowcount > 0

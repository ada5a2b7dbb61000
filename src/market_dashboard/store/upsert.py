"""Native INSERT ... ON CONFLICT DO UPDATE statements per SQL dialect."""
from collections.abc import Iterable
from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlmodel import SQLModel

from market_dashboard.utils import utcnow

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def build_upsert(
    dialect_name: str,
    model: type[SQLModel],
    values: dict[str, Any],
    *,
    conflict_column: str,
    update_keys: Iterable[str],
    timestamp_column: str = "updated_at",
):
    """Build an upsert keyed on a unique column, returning the stored row.

    Args:
        dialect_name: Engine dialect (``engine.dialect.name``).
        model: Table model to insert into.
        values: Full column values for the insert branch.
        conflict_column: Unique column the conflict is resolved on.
        update_keys: Columns overwritten when the row already exists.
        timestamp_column: Column set to the current time on both branches.

    Raises:
        NotImplementedError: The dialect has no native upsert we support.
    """
    try:
        insert = _DIALECT_INSERTS[dialect_name]
    except KeyError:
        raise NotImplementedError(f"No native upsert for dialect '{dialect_name}'") from None

    now = utcnow()
    stmt = insert(model).values(**values, **{timestamp_column: now})
    update = {key: stmt.excluded[key] for key in update_keys if key != conflict_column}
    update[timestamp_column] = now
    stmt = stmt.on_conflict_do_update(index_elements=[conflict_column], set_=update)
    return stmt.returning(model)

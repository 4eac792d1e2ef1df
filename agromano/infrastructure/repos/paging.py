from __future__ import annotations

from typing import Any

from sqlalchemy import ColumnElement, Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession


def text_search(q: str, *columns: Any) -> ColumnElement[bool]:
    """Case-insensitive substring match over any of the given text columns.

    ``%`` and ``_`` in ``q`` match themselves, not any character.
    """
    term = q.strip().lower()
    return or_(*(func.lower(column).contains(term, autoescape=True) for column in columns))


async def fetch_page(
    session: AsyncSession,
    stmt: Select,
    *,
    limit: int | None,
    offset: int,
) -> tuple[list[Any], int]:
    count_query = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = await session.scalar(count_query) or 0
    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    result = await session.execute(stmt)
    return list(result.scalars().all()), total

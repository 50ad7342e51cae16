from typing import Any
from uuid import UUID

from sqlalchemy import Select, and_, or_, select
from sqlalchemy.orm import aliased

from menu_api.schemas.utils.paginator import CursorOutput


class CursorPaginator:
    """
    Keyset pagination over (order_by desc, id desc).

    The cursor row opens the page it names. One extra row is fetched to learn the next cursor,
    and each page is returned oldest-first.
    """

    def __init__(self, repository: Any, query: Select, limit: int, cursor: UUID | None, order_by: str):
        self.repository = repository
        self.query = query
        self.limit = limit
        self.cursor = cursor

        self.model = self.repository.model
        self.field_name = order_by if hasattr(self.model, order_by) else "created_at"
        self.order_field = getattr(self.model, self.field_name)

    async def get_response(self) -> CursorOutput:
        statement = self.query

        if self.cursor is not None:
            boundary = await self._get_boundary()

            if boundary is None:
                return CursorOutput(items=[], next_cursor=None)

            statement = statement.where(boundary)

        items = await self._get_items(statement)

        next_cursor = None
        if len(items) > self.limit:
            next_item = items.pop()
            next_cursor = next_item.id

        items.reverse()
        return CursorOutput(items=items, next_cursor=next_cursor)

    async def _get_boundary(self) -> Any:
        exists = await self.repository.execute(
            statement=select(self.model.id).where(self.model.id == self.cursor),
            action=lambda result: result.scalar_one_or_none(),
        )

        if exists is None:
            return None

        # stored value of the cursor row, never a re-bound datetime
        cursor_row = aliased(self.model)
        position = (
            select(getattr(cursor_row, self.field_name)).where(cursor_row.id == self.cursor).scalar_subquery()
        )
        return or_(
            self.order_field < position,
            and_(self.order_field == position, self.model.id <= self.cursor),
        )

    async def _get_items(self, statement: Select) -> list:
        statement = statement.order_by(self.order_field.desc(), self.model.id.desc()).limit(self.limit + 1)
        return await self.repository.execute(statement=statement, action=lambda result: list(result.scalars().all()))


async def paginate_by_cursor(
    repository: Any,
    query: Select,
    limit: int,
    cursor: UUID | None,
    order_by: str = "created_at",
) -> CursorOutput:
    paginator = CursorPaginator(repository=repository, query=query, limit=limit, cursor=cursor, order_by=order_by)
    return await paginator.get_response()

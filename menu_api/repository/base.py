import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Sequence, Type, TypeVar
from uuid import UUID

from loguru import logger
from pydantic import BaseModel
from sqlalchemy import (
    Column,
    ColumnClause,
    Executable,
    Result,
    Select,
    UnaryExpression,
    asc,
    delete,
    desc,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.exc import CompileError, IntegrityError, NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from menu_api.core import settings
from menu_api.core.exc import (
    DBConnectionException,
    ForeignKeyViolationException,
    ObjectExistsException,
    ObjectNotFoundException,
)
from menu_api.enums import OrderDirection
from menu_api.models.base import Base
from menu_api.schemas.utils.paginator import CursorOutput
from menu_api.utils.paginator import paginate_by_cursor

ModelType = TypeVar("ModelType", bound=Base)


action_map = {
    "gt": "__gt__",
    "lt": "__lt__",
    "ge": "__ge__",
    "le": "__le__",
    "in": "in_",
    "not_in": "notin_",
    "contains": "contains",
    "icontains": "ilike",
    "eq": "__eq__",
    "ne": "__ne__",
}

DUPLICATE_MARKERS = ("duplicate", "UNIQUE constraint failed")
FOREIGN_KEY_MARKERS = ("ForeignKeyViolationError", "FOREIGN KEY constraint failed")


def get_obj_from_integrity_error(e: IntegrityError) -> str:
    # postgres: Key (name)=(Pizza) already exists
    match = re.search(r"Key \((.*?)\)=\((.*?)\) already exists", str(e.orig))
    if match:
        return f"{match.group(1)}={match.group(2)}"

    # sqlite: UNIQUE constraint failed: category.name
    match = re.search(r"UNIQUE constraint failed: \w+\.(\w+)", str(e.orig))
    if match:
        return match.group(1)

    return ""


class AbstractRepository(ABC, Generic[ModelType]):
    @abstractmethod
    async def get_all(self, **filters: Any) -> Sequence[ModelType]:
        raise NotImplementedError

    @abstractmethod
    async def get_one(self, **filters: Any) -> ModelType | None:
        raise NotImplementedError

    @abstractmethod
    async def get_one_or_none(self, **filters: Any) -> ModelType | None:
        raise NotImplementedError

    @abstractmethod
    async def create(self, obj_in: BaseModel | dict[str, Any]) -> ModelType:
        raise NotImplementedError

    @abstractmethod
    async def update(
        self, obj_in: BaseModel | dict[str, Any], *, return_object: bool = False, **filters: Any
    ) -> int | ModelType:
        raise NotImplementedError

    @abstractmethod
    async def delete(self, return_object: bool = False, **filters: Any) -> int | ModelType:
        raise NotImplementedError


class SQLAlchemyRepository(AbstractRepository, Generic[ModelType]):
    model: Type[ModelType]
    default_order_by: str = "created_at"
    duplicate_error_class = ObjectExistsException
    object_not_found_error_class = ObjectNotFoundException
    restrict_error_class = ForeignKeyViolationException

    def __init__(self, session: AsyncSession):
        self.literal_log: bool = settings.is_test_mode
        self.session = session
        self.model_name = self.model.__name__

    def _build_query(self, stmt: Executable | None = None, join_load_list: list = None, **filters: Any) -> Executable:
        statement = select(self.model)

        if stmt is not None:
            statement = stmt

        if join_load_list:
            statement = statement.options(*join_load_list).execution_options(populate_existing=True)

        statement = statement.where(*self.get_where_clauses(filters))

        return statement

    def _compile_statement(self, statement: Executable) -> Executable:
        """
        Compile statement

        Args:
            statement: statement

        Returns:
            Compiled statement
        """

        if self.literal_log:
            try:
                return statement.compile(compile_kwargs={"literal_binds": True})  # type:ignore[attr-defined]
            except CompileError:
                # some dialect types cannot be rendered as literals
                return statement
        return statement

    @staticmethod
    def _dump(obj_in: BaseModel | dict[str, Any], **dump_kwargs: Any) -> dict[str, Any]:
        return obj_in.model_dump(**dump_kwargs) if isinstance(obj_in, BaseModel) else obj_in

    async def execute(
        self, statement: Executable, action: Callable[[Any], Any] | None = None, **context: Any
    ) -> Any:
        """
        Execute statement

        Args:
            statement: statement
            action: action

        Kwargs:
            context: attributes passed to the raised exception, e.g. filters of the statement

        Returns:
            Result of the statement

        """
        try:
            result: Result = await self.session.execute(statement)
            return action(result) if action else result

        except IntegrityError as e:
            if any(marker in str(e) for marker in DUPLICATE_MARKERS):
                raise self.duplicate_error_class(class_name=self.model_name, obj=get_obj_from_integrity_error(e))

            elif any(marker in str(e) for marker in FOREIGN_KEY_MARKERS):
                raise self.restrict_error_class(class_name=self.model_name, obj=get_obj_from_integrity_error(e))

            raise e

        except NoResultFound:
            raise self.object_not_found_error_class(
                class_name=self.model_name,
                statement=self._compile_statement(statement),
                **context,
            )

        except OSError as e:
            raise DBConnectionException(detail=str(e))

    async def get_all(
        self,
        join_load_list: list = None,
        order_by: str = None,
        order_direction: OrderDirection = OrderDirection.DESC,
        **filters: Any,
    ) -> Sequence[ModelType]:
        """
        Get all objects

        Kwargs:
            filters: filters

        Returns:
            Objects
        """

        statement = self._build_query(join_load_list=join_load_list, **filters)
        statement = statement.order_by(*self.get_ordering_clause(order_by, order_direction))

        return await self.execute(statement=statement, action=lambda result: result.scalars().all())

    async def get_one(self, join_load_list: list = None, **filters: Any) -> ModelType:
        """
        Get one object

        Kwargs:
            filters: filters

        Returns:
            Object
        """
        statement = self._build_query(join_load_list=join_load_list, **filters)
        return await self.execute(statement=statement, action=lambda result: result.scalars().one(), **filters)

    async def get_one_or_none(self, join_load_list: list = None, **filters: Any) -> ModelType | None:
        """
        Get one object or None

        Kwargs:
            filters: filters

        Returns:
            Object or None
        """

        statement = self._build_query(join_load_list=join_load_list, **filters)
        return await self.execute(statement=statement, action=lambda result: result.scalars().one_or_none())

    def get_where_clauses(self, filters: dict[str, Any], model: type[ModelType] = None) -> list[ColumnClause]:
        """
        Get where clauses for model

        Args:
            filters: dict with filters
            model: model to use, if None, use self.model

        Raises:
            ValueError: if operator is not supported
            ValueError: if column is not found

        Returns:
            list of where clauses
        """

        model = model or self.model
        clauses: list[ColumnClause] = []

        for key, value in filters.items():
            if "__" not in key:
                key = f"{key}__eq"

            column_name, action_name = key.split("__", 1)

            column: Column | None = getattr(model, column_name, None)
            if column is None:
                raise ValueError(f"Invalid column '{column_name}' for model '{model.__name__}'.")

            action_method: str | None = action_map.get(action_name)
            if action_method is None:
                raise ValueError(
                    f"Unsupported action '{action_name}'. Supported actions: {', '.join(action_map.keys())}."
                )

            clause: ColumnClause = getattr(column, action_method)(value)
            clauses.append(clause)

        return clauses

    def get_ordering_clause(
        self, order_by: str = None, order_direction: OrderDirection = OrderDirection.DESC
    ) -> list[UnaryExpression]:
        """
        Builds a SQLAlchemy ordering clause.

        Args:
            order_by: field name, the model default is used when omitted
            order_direction: ordering direction

        Returns:
            A list containing one SQLAlchemy ordering expression, or an empty list if the field is not found.
        """

        direction = asc if order_direction == OrderDirection.ASC else desc
        field = getattr(self.model, order_by or self.default_order_by, None)
        return [direction(field)] if field is not None else []

    async def create(self, obj_in: BaseModel | dict[str, Any]) -> ModelType:
        """
        Create object

        Args:
            obj_in: object to create

        Returns:
            Created object
        """
        logger.debug(f"Creating {self.model_name}")

        data = self._dump(obj_in, exclude_none=True)
        statement = insert(self.model).values(**data).returning(self.model)
        return await self.execute(statement=statement, action=lambda result: result.scalar_one())

    async def update(
        self, obj_in: BaseModel | dict[str, Any], *, return_object: bool = False, **filters: Any
    ) -> int | ModelType:
        """
        Update object

        Args:
            obj_in: object to update
            return_object: return updated object

        Kwargs:
            filters: filters

        Returns:
            Number of updated objects or object itself
        """
        logger.debug(f"Updating {self.model_name} with {filters=}")

        data = self._dump(obj_in, exclude_unset=True)

        statement = update(self.model).where(*self.get_where_clauses(filters)).values(**data)

        if return_object:
            statement = statement.returning(self.model).execution_options(populate_existing=True)
            return await self.execute(
                statement=statement, action=lambda result: result.scalars().one(), **filters
            )

        return await self.execute(statement=statement, action=lambda result: result.rowcount)

    async def delete(self, return_object: bool = False, **filters: Any) -> int | ModelType:
        """
        Delete object

        Args:
            return_object: return deleted object

        Kwargs:
            filters: filters

        Returns:
            Number of deleted objects or object itself
        """
        logger.debug(f"Deleting {self.model_name} with {filters=}")

        statement = delete(self.model).where(*self.get_where_clauses(filters))

        if return_object:
            statement = statement.returning(self.model)
            return await self.execute(
                statement=statement, action=lambda result: result.scalars().one(), **filters
            )

        return await self.execute(statement=statement, action=lambda result: result.rowcount)

    async def get_count(self, **filters: Any) -> int:
        """
        Get count of objects

        Kwargs:
            filters: Filters

        Returns:
            Count of objects
        """

        statement = select(func.count(self.model.id)).where(*self.get_where_clauses(filters))

        return await self.execute(statement, action=lambda result: result.scalar())

    async def exist(self, **filters: Any) -> bool:
        """
        Check if any object matching the filters exists in the database

        Returns:
            True if the values exist, False otherwise
        """

        return bool(await self.get_count(**filters))


class CursorPaginateRepositoryMixin(Generic[ModelType]):
    model: Type[ModelType]
    session: AsyncSession
    get_where_clauses: Callable
    execute: Callable

    async def cursor_list(
        self,
        *,
        join_load_list: list[Any] | None = None,
        limit: int = 50,
        cursor: UUID | None = None,
        order_by: str = "created_at",
        **filters: Any,
    ) -> CursorOutput:
        statement: Select = select(self.model)

        if join_load_list:
            statement = statement.options(*join_load_list)

        statement = statement.where(*self.get_where_clauses(filters))

        return await paginate_by_cursor(self, statement, limit=limit, cursor=cursor, order_by=order_by)

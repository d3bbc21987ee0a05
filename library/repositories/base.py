# library/repositories/base.py
"""Generic repository contract over a SQLAlchemy session.

Subclasses bind an entity and identifier type through the generic
parameters and inherit every operation:

    class BookRepository(CrudRepository[Book, int]):
        pass

    repo = BookRepository(session)
    book = repo.save(Book(title="Dune", author="Frank Herbert"))
    repo.find_by_id(book.id)

Repositories flush but never commit; the caller owns the transaction
(see ``Database.get_db``).
"""
import logging
from typing import Any, Generic, Iterable, List, Optional, Type, TypeVar, get_args, get_origin

from sqlalchemy import Select, delete, func, inspect, select
from sqlalchemy.orm import Session

from library.exceptions import EntityNotFoundError, InvalidSortPropertyError
from library.models import Base
from .paging import Page, Pageable, Sort

logger = logging.getLogger(__name__)

T = TypeVar('T', bound=Base)
ID = TypeVar('ID')


def _require(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"The given {name} must not be None")


class CrudRepository(Generic[T, ID]):
    """Create, read, update, delete, paging and sorting for one entity type.

    Attributes:
        model: Mapped entity class managed by this repository
        id_type: Python type of the entity's primary key
        session: SQLAlchemy session every operation runs on
    """

    model: Optional[Type[T]] = None
    id_type: Optional[type] = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        for base in cls.__dict__.get('__orig_bases__', ()):
            if get_origin(base) is not CrudRepository:
                continue
            model, id_type = get_args(base)
            if not isinstance(model, TypeVar):
                cls.model = model
            if not isinstance(id_type, TypeVar):
                cls.id_type = id_type

    def __init__(self, session: Session, model: Optional[Type[T]] = None):
        """Initialize the repository with a database session.

        Args:
            session: SQLAlchemy session for database operations
            model: Entity class, only needed when the subclass does not bind one
        """
        self.session = session
        if model is not None:
            self.model = model
        if self.model is None:
            raise TypeError(f"{type(self).__name__} is not bound to an entity type")

        mapper = inspect(self.model)
        if len(mapper.primary_key) != 1:
            raise TypeError(f"{self.model.__name__} must have a single-column primary key")
        self._id_key = mapper.get_property_by_column(mapper.primary_key[0]).key
        self._id_attr = getattr(self.model, self._id_key)
        self._sortable = {prop.key for prop in mapper.column_attrs}

    # Writes

    def save(self, entity: T) -> T:
        """Insert a new entity or merge an existing one.

        An entity whose identifier is None is added; any other entity is
        merged into the session. Returns the managed instance, which may
        differ from the argument after a merge.
        """
        _require(entity, "entity")
        if self._is_new(entity):
            self.session.add(entity)
            saved = entity
        else:
            saved = self.session.merge(entity)
        self.session.flush()
        logger.debug(f"Saved {self.model.__name__} {self._id_of(saved)!r}")
        return saved

    def save_all(self, entities: Iterable[T]) -> List[T]:
        _require(entities, "entities")
        return [self.save(entity) for entity in entities]

    def delete_by_id(self, id_value: ID) -> None:
        """Delete the entity with the given id; a missing id is ignored"""
        _require(id_value, "id")
        entity = self.session.get(self.model, id_value)
        if entity is None:
            logger.debug(f"No {self.model.__name__} with id {id_value!r} to delete")
            return
        self.session.delete(entity)
        self.session.flush()
        logger.debug(f"Deleted {self.model.__name__} {id_value!r}")

    def delete(self, entity: T) -> None:
        """Delete the given entity; an entity that was never saved is ignored"""
        _require(entity, "entity")
        if self._is_new(entity):
            return
        self.delete_by_id(self._id_of(entity))

    def delete_all_by_id(self, ids: Iterable[ID]) -> None:
        _require(ids, "ids")
        for id_value in ids:
            self.delete_by_id(id_value)

    def delete_all(self, entities: Optional[Iterable[T]] = None) -> None:
        """Delete the given entities, or every entity when none are given"""
        if entities is None:
            entities = self.find_all()
        for entity in entities:
            self.delete(entity)

    def delete_all_in_batch(self) -> int:
        """Delete every row with a single statement, returning the row count"""
        result = self.session.execute(delete(self.model))
        logger.debug(f"Batch deleted {result.rowcount} {self.model.__name__} rows")
        return result.rowcount

    def flush(self) -> None:
        self.session.flush()

    # Reads

    def find_by_id(self, id_value: ID) -> Optional[T]:
        """Get an entity by its id, or None if absent"""
        _require(id_value, "id")
        return self.session.get(self.model, id_value)

    def get_by_id(self, id_value: ID) -> T:
        """Get an entity by its id, raising EntityNotFoundError if absent"""
        entity = self.find_by_id(id_value)
        if entity is None:
            raise EntityNotFoundError(self.model, id_value)
        return entity

    def exists_by_id(self, id_value: ID) -> bool:
        _require(id_value, "id")
        query = select(func.count()).select_from(self.model).where(self._id_attr == id_value)
        return (self.session.execute(query).scalar() or 0) > 0

    def find_all(self, sort: Optional[Sort] = None) -> List[T]:
        query = select(self.model)
        if sort is not None:
            query = self._apply_sort(query, sort)
        return list(self.session.scalars(query).all())

    def find_all_by_id(self, ids: Iterable[ID]) -> List[T]:
        """Get the entities for the given ids; ids with no entity are skipped"""
        _require(ids, "ids")
        ids = list(ids)
        if not ids:
            return []
        query = select(self.model).where(self._id_attr.in_(ids))
        return list(self.session.scalars(query).all())

    def find_all_paged(self, pageable: Pageable) -> Page[T]:
        """Get one page of entities, ordered by the pageable's sort then id"""
        _require(pageable, "pageable")
        total = self.count()
        query = self._apply_sort(select(self.model), pageable.sort)
        query = query.order_by(self._id_attr).offset(pageable.offset).limit(pageable.size)
        content = list(self.session.scalars(query).all())
        return Page(content, pageable, total)

    def count(self) -> int:
        query = select(func.count()).select_from(self.model)
        return self.session.execute(query).scalar() or 0

    # Helpers

    def _apply_sort(self, query: Select, sort: Sort) -> Select:
        for order in sort:
            if order.property not in self._sortable:
                raise InvalidSortPropertyError(self.model, order.property)
            column = getattr(self.model, order.property)
            query = query.order_by(column.asc() if order.is_ascending else column.desc())
        return query

    def _id_of(self, entity: T) -> Optional[ID]:
        return getattr(entity, self._id_key)

    def _is_new(self, entity: T) -> bool:
        return self._id_of(entity) is None

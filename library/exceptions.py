# library/exceptions.py
from typing import Any


class RepositoryError(Exception):
    """Base class for errors raised by the repository layer"""


class EntityNotFoundError(RepositoryError):
    """Raised when an entity required by the caller does not exist"""

    def __init__(self, model: type, id_value: Any):
        self.model = model
        self.id = id_value
        super().__init__(f"{model.__name__} with id {id_value!r} not found")


class InvalidSortPropertyError(RepositoryError, ValueError):
    """Raised when sorting on a property that is not a mapped column"""

    def __init__(self, model: type, property_name: str):
        self.model = model
        self.property = property_name
        super().__init__(f"No property {property_name!r} found for type {model.__name__}")

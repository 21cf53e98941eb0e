"""
dao/dao.py
----------
Base class for data access objects.

A DAO is bound to one table or resource and reaches the database only
through the connection handle of the factory that created it. Concrete
DAOs add their own queries on top of `get_db()`.
"""

from typing import Callable, TypeVar

from dao.registry import type_name_of
from exceptions import DaoError
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Dao:
    """Thin data access unit; subclasses are registered with the factory's registry."""

    def __init__(self, factory):
        if factory is None:
            raise DaoError("Factory instance not set")
        self._factory = factory

    def get_factory(self):
        return self._factory

    def get_db(self):
        """Return the shared connection handle (raises FactoryError if none is set)."""
        return self._factory.get_db()

    def create_dao(self, name: str) -> "Dao":
        """Create a sibling DAO through the same factory."""
        return self._factory.create(name)

    def get_dao_name(self) -> str:
        """Returns the DAO name without namespace prefix and postfix."""
        return self._factory.get_short_name(type_name_of(type(self)))

    def transactional(self, work: Callable[[], T]) -> T:
        """
        Execute `work` inside a database transaction.

        Commits when `work` returns. If `work` or the commit raises anything,
        interrupts included, the transaction is rolled back once and the
        exception is re-raised unchanged.

        Args:
            work: Zero-argument callable.

        Returns:
            Whatever `work` returned.
        """
        db = self.get_db()
        db.begin_transaction()

        try:
            result = work()
        except BaseException as e:
            db.rollback()
            logger.error(f"Transaction rolled back: {e!r}")
            raise

        try:
            db.commit()
        except BaseException as e:
            db.rollback()
            logger.error(f"Commit failed, transaction rolled back: {e!r}")
            raise

        return result

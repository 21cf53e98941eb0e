"""
model/model.py
--------------
Base class for business models.

A model talks to the database only through its DAO, which it creates
lazily through the model factory. Sibling models are created through the
same factory so the whole request shares one connection handle.
"""

from typing import Callable, Optional, TypeVar

from dao.registry import type_name_of
from exceptions import ModelError
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class Model:
    """
    Abstract business model.

    Subclasses may declare ``dao_name`` to fix their DAO; otherwise the DAO
    is resolved from the model's own canonical name.
    """

    dao_name: Optional[str] = None

    def __init__(self, factory, dao=None):
        if factory is None:
            raise ModelError("Factory instance not set")
        self._factory = factory
        self._dao_name: Optional[str] = self.dao_name or None
        self._dao = None

        if dao is not None:
            self.set_dao(dao)

    def get_factory(self):
        return self._factory

    # ── NAMES ─────────────────────────────────────────────

    def set_dao_name(self, name: str) -> "Model":
        """
        Set the related DAO name (only possible once).

        Raises:
            ModelError: If the name is empty or a DAO name is already set.
        """
        if not name:
            raise ModelError("DAO name was empty")

        if self._dao_name is not None:
            raise ModelError("DAO name already set")

        self._dao_name = name

        return self

    def get_dao_name(self) -> str:
        return self._dao_name or ""

    def get_model_name(self) -> str:
        """Returns the model name without namespace prefix and postfix."""
        return self._factory.get_short_name(type_name_of(type(self)))

    # ── FACTORY METHODS ───────────────────────────────────

    def create_model(self, name: str = "", dao=None) -> "Model":
        """
        Create a new model through the same factory.

        Args:
            name: Model name (this model's name if empty).
            dao: Optional DAO instance to seed the new model with.
        """
        model_name = name or self.get_model_name()
        return self._factory.create(model_name, dao)

    def create_dao(self, name: str = ""):
        """
        Create a new DAO instance; the result is not cached.

        The name defaults to the configured DAO name, then to the model name.
        """
        dao_name = name or self.get_dao_name() or self.get_model_name()
        return self._factory.create_dao(dao_name)

    # ── DAO REFERENCE ─────────────────────────────────────

    def get_dao(self):
        """Returns the DAO instance, creating it on first access."""
        if self._dao is None:
            self.set_dao(self.create_dao())

        return self._dao

    def set_dao(self, dao) -> "Model":
        self._dao = dao

        return self

    def reset_dao(self) -> None:
        """Replace the DAO reference with a freshly created instance."""
        self._dao = self.create_dao()
        logger.debug(f"DAO reset for model {self.get_model_name()}")

    def transactional(self, work: Callable[[], T]) -> T:
        """
        Execute `work` in a transaction on this model's DAO.

        If `work` or the commit raises, the transaction is rolled back and
        the exception re-raised.
        """
        return self.get_dao().transactional(work)

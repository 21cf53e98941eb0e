"""
dao/factory.py
--------------
Type-name resolution shared by all factories, and the DAO factory that
owns the database connection handle.
"""

from typing import Any, Optional

from dao.registry import Registry, registry as default_registry
from exceptions import FactoryError
from utils.logger import get_logger

logger = get_logger(__name__)


class FactoryBase:
    """
    Resolves short names to registered type names and instantiates them.

    A type name is ``namespace + short name + postfix``. Instances are built
    by calling the registered constructor with the factory itself as first
    argument, so they can resolve their own dependencies.
    """

    default_postfix = ""

    def __init__(self, namespace: str = "", postfix: Optional[str] = None,
                 registry: Optional[Registry] = None):
        self._namespace = namespace
        self._postfix = self.default_postfix if postfix is None else postfix
        self._registry = default_registry if registry is None else registry

    @property
    def namespace(self) -> str:
        return self._namespace

    @property
    def postfix(self) -> str:
        return self._postfix

    @property
    def registry(self) -> Registry:
        return self._registry

    def get_namespace(self) -> str:
        return self._namespace

    def get_postfix(self) -> str:
        return self._postfix

    # ── NAMING ────────────────────────────────────────────

    def get_class_name(self, name: str) -> str:
        """Expand a short name into a fully-qualified type name."""
        return self._namespace + name + self._postfix

    def get_short_name(self, class_name: str) -> str:
        """
        Exact inverse of `get_class_name`.

        Strips ``len(namespace)`` characters from the front and, only when
        the postfix is non-empty, ``len(postfix)`` from the back. The type
        name is not checked against the conventions.
        """
        start = len(self._namespace)
        if self._postfix != "":
            return class_name[start:-len(self._postfix)]
        return class_name[start:]

    # ── CREATION ──────────────────────────────────────────

    def create(self, name: str, *args: Any):
        """
        Return a new instance of the type registered for `name`.

        Args:
            name: Short name without namespace prefix and postfix.
            *args: Extra constructor arguments after the factory.

        Raises:
            FactoryError: If the type is unknown or its constructor fails.
        """
        return self.create_instance(self.get_class_name(name), *args)

    def create_instance(self, class_name: str, *args: Any):
        constructor = self._registry.get(class_name)
        try:
            instance = constructor(self, *args)
        except Exception as e:
            logger.error(f"Failed to create {class_name}: {e}")
            raise FactoryError(f"Could not create {class_name}: {e}") from e
        logger.debug(f"Created {class_name}")
        return instance


class Factory(FactoryBase):
    """DAO factory; owns the database handle every DAO it creates shares."""

    default_postfix = "Dao"

    def __init__(self, db=None, namespace: str = "", postfix: Optional[str] = None,
                 registry: Optional[Registry] = None):
        super().__init__(namespace, postfix, registry)
        self._db = db

    def create(self, name: str):
        """
        Return a new DAO instance.

        Args:
            name: DAO name without namespace prefix and postfix.

        Raises:
            FactoryError: If the DAO type cannot be resolved or created.
        """
        return super().create(name)

    def get_db(self):
        """
        Return the database connection handle.

        Raises:
            FactoryError: If no handle was set.
        """
        if self._db is None:
            raise FactoryError("No database adapter set")
        return self._db

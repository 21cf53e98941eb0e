"""
model/factory.py
----------------
Model factory: resolves model names with its own namespace/postfix
conventions and hands DAO creation over to the DAO factory.
"""

from typing import Optional

from config import DAO_NAMESPACE, DAO_POSTFIX, MODEL_NAMESPACE, MODEL_POSTFIX
from dao.factory import Factory, FactoryBase
from dao.registry import Registry
from exceptions import FactoryError
from utils.logger import get_logger

logger = get_logger(__name__)


class ModelFactory(FactoryBase):
    """Creates models; every model it creates shares this factory."""

    def __init__(self, dao_factory: Optional[Factory], namespace: str = "",
                 postfix: Optional[str] = None, registry: Optional[Registry] = None):
        if registry is None and dao_factory is not None:
            registry = dao_factory.registry
        super().__init__(namespace, postfix, registry)
        self._dao_factory = dao_factory

    def create(self, name: str, dao=None):
        """
        Return a new model instance.

        Args:
            name: Model name without namespace prefix and postfix.
            dao: Optional DAO to seed the model with.

        Raises:
            FactoryError: If the model type cannot be resolved or created.
        """
        return self.create_instance(self.get_class_name(name), dao)

    def create_dao(self, name: str):
        """Return a new DAO instance from the DAO factory."""
        return self.get_dao_factory().create(name)

    def get_dao_factory(self) -> Factory:
        if self._dao_factory is None:
            raise FactoryError("No DAO factory set")
        return self._dao_factory

    def get_db(self):
        return self.get_dao_factory().get_db()


def create_factories(db, registry: Optional[Registry] = None) -> ModelFactory:
    """
    Wire a DAO factory and a model factory from the configured conventions.

    Args:
        db: Connection handle, e.g. ``Db.from_pool()``.
        registry: Constructor registry (defaults to the process-wide one).

    Returns:
        The model factory; its DAO factory is reachable via get_dao_factory().
    """
    dao_factory = Factory(db, namespace=DAO_NAMESPACE, postfix=DAO_POSTFIX, registry=registry)
    model_factory = ModelFactory(
        dao_factory, namespace=MODEL_NAMESPACE, postfix=MODEL_POSTFIX, registry=registry
    )
    logger.info(
        f"Factories ready (dao: {DAO_NAMESPACE!r}+name+{DAO_POSTFIX!r}, "
        f"model: {MODEL_NAMESPACE!r}+name+{MODEL_POSTFIX!r})"
    )
    return model_factory

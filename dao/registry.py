"""
dao/registry.py
---------------
Maps fully-qualified type names to constructors.

Factories never look types up by reflection: every concrete Dao or Model
is registered once, usually at import time with the `register` decorator:

    @register("app.dao.UserDao")
    class UserDao(Dao):
        ...

Registering a class also records the name on it (`type_name`), which is
the identity `Model.get_model_name` derives the canonical name from.
"""

from typing import Callable, Optional

from exceptions import FactoryError
from utils.logger import get_logger

logger = get_logger(__name__)


def type_name_of(cls: type) -> str:
    """
    Return the registered type name of a class.

    Only a name registered on the class itself counts; subclasses do not
    inherit their parent's identity. Unregistered classes fall back to
    ``module.qualname``.
    """
    name = cls.__dict__.get("type_name")
    if name:
        return name
    return f"{cls.__module__}.{cls.__qualname__}"


class Registry:
    """Registered-constructor map shared by the factories that use it."""

    def __init__(self):
        self._constructors: dict[str, Callable] = {}

    def register(self, type_name: str, constructor: Optional[Callable] = None):
        """
        Register `constructor` under `type_name`.

        Works as a plain call or, without `constructor`, as a class decorator.
        The constructor is called with the factory as its first argument.

        Raises:
            FactoryError: If the name is empty or taken by another constructor.
        """
        if constructor is None:
            def decorator(target: Callable) -> Callable:
                self.register(type_name, target)
                return target

            return decorator

        if not type_name:
            raise FactoryError("Type name was empty")

        existing = self._constructors.get(type_name)
        if existing is not None and existing is not constructor:
            raise FactoryError(f"Type name already registered: {type_name}")

        self._constructors[type_name] = constructor
        if isinstance(constructor, type) and "type_name" not in constructor.__dict__:
            constructor.type_name = type_name
        logger.debug(f"Registered {type_name}")
        return constructor

    def unregister(self, type_name: str) -> None:
        self._constructors.pop(type_name, None)

    def get(self, type_name: str) -> Callable:
        """
        Look up the constructor for `type_name`.

        Raises:
            FactoryError: If nothing is registered under that name.
        """
        try:
            return self._constructors[type_name]
        except KeyError:
            raise FactoryError(f"Type not registered: {type_name}") from None

    def names(self) -> list[str]:
        return sorted(self._constructors)

    def __contains__(self, type_name: str) -> bool:
        return type_name in self._constructors

    def __len__(self) -> int:
        return len(self._constructors)


# Process-wide default; factories accept their own registry for isolation.
registry = Registry()
register = registry.register

"""
dao/ - Data Access Layer
========================
DAO base class, the DAO factory that owns the database handle, and the
constructor registry both factories resolve type names against.
"""

from dao.dao import Dao
from dao.factory import Factory, FactoryBase
from dao.registry import Registry, register, registry, type_name_of

__all__ = ["Dao", "Factory", "FactoryBase", "Registry", "register", "registry", "type_name_of"]

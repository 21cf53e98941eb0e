"""
model/ - Business Layer
=======================
Models sit between the callers that validate input and the DAOs that talk
to the storage backend. Their public interface should reflect the use
cases of the business domain.
"""

from model.factory import ModelFactory, create_factories
from model.model import Model

__all__ = ["Model", "ModelFactory", "create_factories"]

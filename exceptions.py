"""
exceptions.py
-------------
Error hierarchy shared by the factory, DAO and model layers.

Errors raised inside a unit of work are never wrapped in these types:
`Dao.transactional` rolls back and re-raises them unchanged.
"""


class ActiveRecordError(Exception):
    """Base class for all errors raised by this package."""


class FactoryError(ActiveRecordError):
    """
    Raised by factories.

    Covers both configuration mistakes (no database connection set) and
    resolution failures (unknown type name, failing constructor). Resolution
    failures are chained to the underlying error via ``__cause__``.
    """


class ModelError(ActiveRecordError):
    """Raised when a model is misconfigured (missing factory, bad DAO name)."""


class DaoError(ActiveRecordError):
    """Raised when a DAO is misconfigured."""

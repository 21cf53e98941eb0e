"""Pytest configuration and fixtures."""

import pytest

from dao.dao import Dao
from dao.factory import Factory
from dao.registry import Registry
from model.factory import ModelFactory
from model.model import Model

DAO_NAMESPACE = "App\\Dao\\"
MODEL_NAMESPACE = "App\\Models\\"


class FakeDb:
    """Connection handle that records transaction calls."""

    def __init__(self, fail_commit: Exception | None = None):
        self.calls: list[str] = []
        self.fail_commit = fail_commit

    def begin_transaction(self):
        self.calls.append("begin")

    def commit(self):
        self.calls.append("commit")
        if self.fail_commit is not None:
            raise self.fail_commit

    def rollback(self):
        self.calls.append("rollback")


class UserDao(Dao):
    pass


class OrderDao(Dao):
    pass


class User(Model):
    pass


class Order(Model):
    dao_name = "Order"


class Invoice(Model):
    """Model without a DAO of the same name."""


@pytest.fixture
def fake_db():
    return FakeDb()


@pytest.fixture
def registry():
    """Isolated registry with the sample DAOs and models."""
    reg = Registry()
    reg.register(DAO_NAMESPACE + "UserDao", UserDao)
    reg.register(DAO_NAMESPACE + "OrderDao", OrderDao)
    reg.register(MODEL_NAMESPACE + "User", User)
    reg.register(MODEL_NAMESPACE + "Order", Order)
    reg.register(MODEL_NAMESPACE + "Invoice", Invoice)
    yield reg
    # Registration stamps type_name on the class; undo it between tests.
    for cls in (UserDao, OrderDao, User, Order, Invoice):
        if "type_name" in cls.__dict__:
            del cls.type_name


@pytest.fixture
def dao_factory(fake_db, registry):
    return Factory(fake_db, namespace=DAO_NAMESPACE, postfix="Dao", registry=registry)


@pytest.fixture
def model_factory(dao_factory, registry):
    return ModelFactory(dao_factory, namespace=MODEL_NAMESPACE, postfix="", registry=registry)

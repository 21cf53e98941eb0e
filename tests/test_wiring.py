"""Tests for building factories from configuration."""

from dao.registry import Registry
from model import factory as model_factory_module
from model.factory import create_factories
from tests.conftest import FakeDb, User, UserDao


def test_create_factories_uses_configured_conventions(monkeypatch):
    monkeypatch.setattr(model_factory_module, "DAO_NAMESPACE", "app.dao.")
    monkeypatch.setattr(model_factory_module, "DAO_POSTFIX", "Dao")
    monkeypatch.setattr(model_factory_module, "MODEL_NAMESPACE", "app.models.")
    monkeypatch.setattr(model_factory_module, "MODEL_POSTFIX", "")
    reg = Registry()
    reg.register("app.dao.UserDao", UserDao)
    reg.register("app.models.User", User)
    db = FakeDb()

    try:
        models = create_factories(db, registry=reg)
        user = models.create("User")

        assert isinstance(user, User)
        assert user.get_model_name() == "User"
        assert isinstance(user.get_dao(), UserDao)
        assert models.get_dao_factory().get_db() is db
        assert models.registry is reg
    finally:
        del UserDao.type_name
        del User.type_name


def test_create_factories_defaults():
    db = FakeDb()

    models = create_factories(db)

    assert models.get_dao_factory().get_postfix() == model_factory_module.DAO_POSTFIX
    assert models.get_namespace() == model_factory_module.MODEL_NAMESPACE

from typing import Any

import pytest

from fieldcheck import (
    AccessorFactory,
    AttributeAccessor,
    AutoAccessor,
    BaseFieldAccessor,
    MappingAccessor,
    RegisteredAccessor,
)


@pytest.fixture(autouse=True)
def _restore_accessor_registry():
    """Drop custom accessor registrations made by a test."""
    saved = dict(AccessorFactory._registry)
    yield
    AccessorFactory._registry.clear()
    AccessorFactory._registry.update(saved)


class UpperAccessor(BaseFieldAccessor):
    @property
    def name(self) -> str:
        return "upper"

    def _resolve(self, target: Any, field: str) -> Any:
        return str(target[field]).upper()


def test_accessor_factory_default_and_error() -> None:
    """AccessorFactory should provide the auto accessor by default and raise on unknown."""
    accessor = AccessorFactory.create()
    assert isinstance(accessor, AutoAccessor)
    with pytest.raises(ValueError, match="Unknown accessor type: unknown-type"):
        AccessorFactory.create("unknown-type")


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("auto", AutoAccessor),
        ("attribute", AttributeAccessor),
        ("mapping", MappingAccessor),
        ("registry", RegisteredAccessor),
    ],
)
def test_accessor_factory_builtins(name: str, expected: type) -> None:
    assert isinstance(AccessorFactory.create(name), expected)


def test_accessor_factory_passes_kwargs() -> None:
    accessor = AccessorFactory.create("registry", registrations={dict: {"size": len}})
    assert accessor.get_value({"a": 1, "b": 2}, "size") == "2"


def test_accessor_factory_register_custom() -> None:
    AccessorFactory.register("upper", UpperAccessor)

    assert "upper" in AccessorFactory.available_types()
    assert AccessorFactory.create("upper").get_value({"name": "ada"}, "name") == "ADA"

    AccessorFactory.unregister("upper")
    assert "upper" not in AccessorFactory.available_types()


def test_accessor_factory_restores_builtin_after_unregister() -> None:
    AccessorFactory.unregister("mapping")
    assert AccessorFactory.available_types() == ["attribute", "auto", "mapping", "registry"]
    assert isinstance(AccessorFactory.create("mapping"), MappingAccessor)


def test_accessor_factory_lookup_returns_class() -> None:
    assert AccessorFactory.lookup() is AutoAccessor
    assert AccessorFactory.lookup("attribute") is AttributeAccessor
    with pytest.raises(ValueError, match="Available types: attribute, auto, mapping, registry"):
        AccessorFactory.lookup("nope")

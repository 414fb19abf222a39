"""
Tests for the command registry.

This module tests:
- Built-in installation
- Registration, replacement and removal
- Schema normalization and descriptor validation
"""

import pytest
from pydantic import ValidationError

from parscore.commands import (
    BUILTIN_COMMANDS,
    CommandRegistry,
    ParamSpec,
    ParamType,
    ResultKind,
)


def always_true(params, context=None):
    return True


class TestBuiltins:
    """Test built-in command installation."""

    def test_builtins_registered_by_default(self, registry):
        for name in ["AND", "OR", "NOT", "equals", "greater_than", "less_than"]:
            assert name in registry
            assert registry.lookup(name).kind == ResultKind.CONDITION

    def test_registration_order(self, registry):
        assert registry.names() == list(BUILTIN_COMMANDS)

    def test_empty_registry(self):
        registry = CommandRegistry(builtins=False)
        assert len(registry) == 0
        assert registry.lookup("AND") is None

    def test_logical_schemas(self, registry):
        (variadic,) = registry.lookup("AND").params
        assert variadic.multiple and variadic.required
        assert len(registry.lookup("NOT").params) == 1
        assert len(registry.lookup("equals").params) == 2


class TestRegistration:
    """Test registering and replacing commands."""

    def test_register_with_dict_schema(self, registry):
        descriptor = registry.register(
            "is_vip",
            always_true,
            [{"type": "any", "required": True}],
        )
        assert registry.lookup("is_vip") is descriptor
        assert descriptor.params == (ParamSpec(type=ParamType.ANY, required=True),)
        assert descriptor.kind == ResultKind.CONDITION

    def test_schema_defaults(self, registry):
        descriptor = registry.register("flag", always_true, [{}])
        (spec,) = descriptor.params
        assert spec.type == ParamType.ANY
        assert spec.required is True
        assert spec.multiple is False

    def test_action_kind_from_string(self, registry):
        descriptor = registry.register("notify", always_true, kind="action")
        assert descriptor.kind == ResultKind.ACTION
        assert descriptor.fallback is None

    def test_condition_fallback(self, registry):
        assert registry.lookup("AND").fallback is False

    def test_reregistration_replaces(self, registry):
        registry.register("AND", always_true)
        assert registry.lookup("AND").handler is always_true
        assert registry.names().count("AND") == 1

    def test_names_are_case_sensitive(self, registry):
        registry.register("and", always_true)
        assert registry.lookup("and").handler is always_true
        assert registry.lookup("AND").handler is not always_true

    def test_decorator(self, registry):
        @registry.command("is_even", schema=[{"type": "any"}])
        def is_even(params, context=None):
            return params[0] % 2 == 0

        assert registry.lookup("is_even").handler is is_even
        assert is_even([4]) is True

    def test_unregister(self, registry):
        removed = registry.unregister("equals")
        assert removed.name == "equals"
        assert "equals" not in registry
        assert registry.unregister("equals") is None

    def test_copy_is_independent(self, registry):
        clone = registry.copy()
        clone.register("extra", always_true)
        registry.unregister("OR")
        assert "extra" not in registry
        assert "OR" in clone


class TestDescriptorValidation:
    """Test rejection of malformed registrations."""

    def test_unknown_param_type(self, registry):
        with pytest.raises(ValidationError):
            registry.register("bad", always_true, [{"type": "number"}])

    def test_handler_must_be_callable(self, registry):
        with pytest.raises(ValidationError):
            registry.register("bad", "not callable", [])

    @pytest.mark.parametrize("name", ["", " padded ", "a[b", "x,y"])
    def test_invalid_names(self, registry, name):
        with pytest.raises(ValidationError):
            registry.register(name, always_true)

    def test_unknown_kind(self, registry):
        with pytest.raises(ValueError):
            registry.register("bad", always_true, kind="query")

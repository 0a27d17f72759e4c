"""Tests for ReflectiveIntrospector — subtype queries and constructor resolution."""

from __future__ import annotations

from instantiator.domain.constructors import (
    AllParametersDefaulted,
    DefaultedParameter,
    ZeroArgument,
)
from instantiator.introspection import (
    ReflectiveIntrospector,
    TypeIntrospector,
    required_parameters,
)
from tests.zoo import (
    CONSTRUCTED,
    Animal,
    Cat,
    Dog,
    Badge,
    Crate,
    Goldfish,
    Greeter,
    Griffin,
    Hamster,
    HasName,
    Host,
    Kitten,
    Named,
    Parrot,
    Pet,
    Puppy,
    Rock,
    Tagged,
)


class TestProtocol:
    def test_reflective_satisfies_protocol(self) -> None:
        assert isinstance(ReflectiveIntrospector(), TypeIntrospector)


class TestIsSubtypeOrEqual:
    def test_equal(self) -> None:
        assert ReflectiveIntrospector().is_subtype_or_equal(Animal, Animal)

    def test_subclass(self) -> None:
        assert ReflectiveIntrospector().is_subtype_or_equal(Kitten, Animal)

    def test_unrelated(self) -> None:
        assert not ReflectiveIntrospector().is_subtype_or_equal(Rock, Animal)

    def test_virtual_subclass_toggle(self) -> None:
        assert ReflectiveIntrospector().is_subtype_or_equal(Hamster, Pet)
        strict = ReflectiveIntrospector(allow_virtual_subclasses=False)
        assert not strict.is_subtype_or_equal(Hamster, Pet)
        assert strict.is_subtype_or_equal(Goldfish, Pet)


    def test_data_member_protocol_falls_back_to_mro(self) -> None:
        introspector = ReflectiveIntrospector()
        assert not introspector.is_subtype_or_equal(Named, HasName)
        assert introspector.is_subtype_or_equal(Badge, HasName)

    def test_non_runtime_protocol_falls_back_to_mro(self) -> None:
        introspector = ReflectiveIntrospector()
        assert not introspector.is_subtype_or_equal(Named, Greeter)
        assert introspector.is_subtype_or_equal(Host, Greeter)


class TestResolveConstructor:
    def test_inherited_no_arg_init(self) -> None:
        assert ReflectiveIntrospector().resolve_constructor(Dog) == ZeroArgument()

    def test_variadic_only(self) -> None:
        assert ReflectiveIntrospector().resolve_constructor(Puppy) == ZeroArgument()

    def test_all_defaulted(self) -> None:
        resolved = ReflectiveIntrospector().resolve_constructor(Cat)
        assert resolved == AllParametersDefaulted(
            parameters=(DefaultedParameter(name="name", default="Unnamed"),)
        )

    def test_mixed_kinds_keep_signature_order(self) -> None:
        resolved = ReflectiveIntrospector().resolve_constructor(Kitten)
        assert isinstance(resolved, AllParametersDefaulted)
        assert resolved.parameters == (
            DefaultedParameter(name="age", default=0, positional_only=True),
            DefaultedParameter(name="name", default="Tiny"),
        )

    def test_factory_backed_fields_resolve_as_defaulted(self) -> None:
        for cls in (Tagged, Crate):
            resolved = ReflectiveIntrospector().resolve_constructor(cls)
            assert isinstance(resolved, AllParametersDefaulted)
            assert resolved.bind() == ((), {})
        tagged = ReflectiveIntrospector().resolve_constructor(Tagged)
        assert isinstance(tagged, AllParametersDefaulted)
        assert tagged.parameter_names == ["tags", "label"]

    def test_required_parameter_is_unusable(self) -> None:
        assert ReflectiveIntrospector().resolve_constructor(Parrot) is None
        assert ReflectiveIntrospector().resolve_constructor(Griffin) is None

    def test_no_signature_falls_back_to_zero_argument(self) -> None:
        assert ReflectiveIntrospector().resolve_constructor(dict) == ZeroArgument()

    def test_resolution_never_constructs(self) -> None:
        introspector = ReflectiveIntrospector()
        for cls in (Dog, Cat, Kitten, Parrot):
            introspector.resolve_constructor(cls)
        assert CONSTRUCTED == []


class TestRequiredParameters:
    def test_lists_only_non_defaulted(self) -> None:
        assert required_parameters(Parrot) == ["vocabulary"]
        assert required_parameters(Griffin) == ["wingspan"]

    def test_empty_when_all_defaulted(self) -> None:
        assert required_parameters(Cat) == []

    def test_empty_without_signature(self) -> None:
        assert required_parameters(dict) == []

"""Tests for the component class registry."""

import pytest

from chartopt_lab.core.errors import AmbiguousSubtypeError, NotFoundError
from chartopt_lab.core.registry import WILDCARD_SUBTYPE, is_extended_class, parse_class_type
from chartopt_lab.model.component import ComponentModel

from helpers import make_component


class TestParseClassType:
    """Test component type identifier parsing."""

    def test_main_and_sub(self) -> None:
        assert parse_class_type("xAxis.category") == ("xAxis", "category")

    def test_main_only_uses_wildcard(self) -> None:
        parsed = parse_class_type("grid")
        assert parsed.main == "grid"
        assert parsed.sub == WILDCARD_SUBTYPE

    @pytest.mark.parametrize("identifier", [None, "", ".", "grid.", ".sub"])
    def test_malformed_input_never_raises(self, identifier) -> None:
        parsed = parse_class_type(identifier)
        assert isinstance(parsed.main, str)
        assert parsed.sub


class TestRegisterAndLookup:
    """Test register / get_class."""

    def test_register_and_get(self, registry) -> None:
        Line = make_component("Line")
        registry.register("series.line", Line)
        assert registry.get_class("series", "line") is Line
        assert registry.get_class("series.line") is Line

    def test_register_as_decorator(self, registry) -> None:
        @registry.register("title")
        class Title(ComponentModel):
            pass

        assert registry.get_class("title") is Title

    def test_last_write_wins(self, registry) -> None:
        First = make_component("First")
        Second = make_component("Second")
        registry.register("legend.plain", First)
        registry.register("legend.plain", Second)
        assert registry.get_class("legend", "plain") is Second
        assert registry.get_classes_by_main_type("legend") == [Second]

    def test_falls_back_to_wildcard_class(self, registry) -> None:
        Generic = make_component("Generic")
        registry.register("axis", Generic)
        assert registry.get_class("axis", "log") is Generic

    def test_exact_subtype_beats_wildcard(self, registry) -> None:
        Generic = make_component("Generic")
        Log = make_component("Log")
        registry.register("axis", Generic)
        registry.register("axis.log", Log)
        assert registry.get_class("axis", "log") is Log

    def test_missing_class_raises_not_found(self, registry) -> None:
        registry.register("series.line", make_component("Line"))
        with pytest.raises(NotFoundError) as excinfo:
            registry.get_class("series", "pie")
        assert excinfo.value.main_type == "series"
        assert excinfo.value.sub_type == "pie"
        with pytest.raises(NotFoundError):
            registry.get_class("radar")

    @pytest.mark.parametrize("identifier", ["", "a.b.c", "bad type", ".sub"])
    def test_invalid_identifier_rejected(self, registry, identifier) -> None:
        with pytest.raises(ValueError):
            registry.register(identifier, make_component("Bad"))

    def test_classes_by_main_type_in_registration_order(self, registry) -> None:
        Line, Bar, Pie = make_component("Line"), make_component("Bar"), make_component("Pie")
        registry.register("series.line", Line)
        registry.register("series.bar", Bar)
        registry.register("series.pie", Pie)
        assert registry.get_classes_by_main_type("series") == [Line, Bar, Pie]
        assert registry.get_classes_by_main_type("nothing") == []

    def test_enumeration_helpers(self, registry) -> None:
        registry.register("grid", make_component("Grid"))
        registry.register("series.line", make_component("Line"))
        assert registry.has_class("series")
        assert registry.has_class("series.anything")
        assert not registry.has_class("polar")
        assert registry.has_subtypes("series")
        assert not registry.has_subtypes("grid")
        assert registry.get_all_main_types() == ["grid", "series"]
        assert registry.get_all_types() == ["grid", "series.line"]

    def test_reset_forgets_everything(self, registry) -> None:
        registry.register("grid", make_component("Grid"))
        registry.register_subtype_defaulter("grid", lambda option: "x")
        registry.reset()
        assert registry.get_all_main_types() == []
        with pytest.raises(NotFoundError):
            registry.get_class("grid")


class TestDetermineSubType:
    """Test subtype resolution for raw options."""

    def test_defaulter_is_used(self, registry) -> None:
        registry.register("xAxis.category", make_component("Category"))
        registry.register("xAxis.value", make_component("Value"))
        registry.register_subtype_defaulter(
            "xAxis", lambda option: "category" if "data" in option else "value"
        )
        assert registry.determine_sub_type("xAxis", {"data": [1]}) == "category"
        assert registry.determine_sub_type("xAxis", {}) == "value"

    def test_second_defaulter_replaces_first(self, registry) -> None:
        registry.register_subtype_defaulter("legend", lambda option: "plain")
        registry.register_subtype_defaulter("legend", lambda option: "scroll")
        assert registry.determine_sub_type("legend", {}) == "scroll"

    def test_explicit_type_field(self, registry) -> None:
        registry.register("series.line", make_component("Line"))
        registry.register("series.bar", make_component("Bar"))
        assert registry.determine_sub_type("series", {"type": "bar"}) == "bar"
        assert registry.determine_sub_type("series", {"type": "series.line"}) == "line"

    def test_ambiguous_without_type(self, registry) -> None:
        registry.register("series.line", make_component("Line"))
        registry.register("series.bar", make_component("Bar"))
        with pytest.raises(AmbiguousSubtypeError) as excinfo:
            registry.determine_sub_type("series", {"data": []})
        assert excinfo.value.main_type == "series"
        assert excinfo.value.candidates == ["line", "bar"]

    def test_single_subtype_is_unambiguous(self, registry) -> None:
        registry.register("series.line", make_component("Line"))
        assert registry.determine_sub_type("series", {}) == "line"

    def test_wildcard_class_is_unambiguous(self, registry) -> None:
        registry.register("axis", make_component("Generic"))
        registry.register("axis.log", make_component("Log"))
        registry.register("axis.time", make_component("Time"))
        assert registry.determine_sub_type("axis", {}) == WILDCARD_SUBTYPE

    def test_unknown_main_type(self, registry) -> None:
        assert registry.determine_sub_type("radar", None) == WILDCARD_SUBTYPE


class TestExtend:
    """Test runtime class extension."""

    def test_extend_registers_when_typed(self, registry) -> None:
        Base = make_component("Base", dependencies=["grid"], default_option={"aaa": 1})
        Derived = registry.extend(Base, {"type": "legend.scroll", "default_option": {"bbb": 2}})

        assert issubclass(Derived, Base)
        assert is_extended_class(Derived)
        assert not is_extended_class(Base)
        assert Derived.__name__ == "LegendScrollModel"
        assert Derived.dependencies == ["grid"]
        assert registry.get_class("legend", "scroll") is Derived

    def test_extend_without_type_does_not_register(self, registry) -> None:
        Derived = registry.extend(make_component("Base"), {"class_name": "Anonymous"})
        assert Derived.__name__ == "Anonymous"
        assert registry.get_all_types() == []

    def test_extend_can_override_methods(self, registry) -> None:
        Base = make_component("Base")
        Derived = registry.extend(Base, {"describe": lambda self: "derived"})
        assert Derived.describe(None) == "derived"

    def test_default_option_chain(self, registry) -> None:
        Base = make_component("Base", default_option={"aaa": 1})
        Derived = registry.extend(Base, {"default_option": {"bbb": 2}})
        Overriding = registry.extend(Derived, {"default_option": {"aaa": 9}})

        assert registry.get_default_option(Derived) == {"aaa": 1, "bbb": 2}
        assert registry.get_default_option(Overriding) == {"aaa": 9, "bbb": 2}

    def test_default_option_nested_fields_merge(self, registry) -> None:
        Base = make_component("Base", default_option={"style": {"color": "red", "width": 1}})
        Derived = registry.extend(Base, {"default_option": {"style": {"width": 3}}})
        assert registry.get_default_option(Derived) == {"style": {"color": "red", "width": 3}}
        # Source dicts are not touched by the merge.
        assert Base.default_option == {"style": {"color": "red", "width": 1}}

    def test_default_option_cached_per_class(self, registry) -> None:
        Derived = registry.extend(make_component("Base", default_option={"a": 1}), {})
        first = registry.get_default_option(Derived)
        assert registry.get_default_option(Derived) is first

        registry.reset()
        assert registry.get_default_option(Derived) is not first

    def test_declared_class_returns_own_default(self, registry) -> None:
        Declared = make_component("Declared", default_option={"only": True})
        assert registry.get_default_option(Declared) is Declared.default_option

"""Tests for registry asset models."""

import pydantic
import pytest

from sectiongen.models import Component, SectionComponent


@pytest.mark.unit
class TestComponent:
    def test_from_payload(self):
        c = Component.model_validate(
            {"name": "Badge", "type": "component", "source": "<span/>", "description": "d"}
        )
        assert c.name == "Badge"
        assert c.source == "<span/>"
        assert c.type == "component"

    def test_description_optional(self):
        assert Component.model_validate({"name": "Badge", "source": ""}).description == ""

    def test_null_source_read_as_empty(self):
        assert Component.model_validate({"name": "Badge", "source": None}).source == ""

    def test_missing_source_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Component.model_validate({"name": "Badge"})

    def test_non_string_source_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Component.model_validate({"name": "Badge", "source": 3})

    def test_unsafe_name_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Component.model_validate({"name": "../Badge", "source": "x"})

    def test_wrong_type_tag_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Component.model_validate({"name": "Badge", "source": "x", "type": "section"})

    def test_frozen(self):
        c = Component(name="Badge", source="x")
        with pytest.raises(pydantic.ValidationError):
            c.source = "y"


@pytest.mark.unit
class TestSectionComponent:
    def test_schema_alias(self):
        s = SectionComponent.model_validate(
            {"name": "Hero", "type": "section", "source": "<div/>", "schema": "export default {}"}
        )
        assert s.schema_source == "export default {}"
        assert s.components is None

    def test_schema_optional(self):
        s = SectionComponent.model_validate({"name": "Hero", "source": "<div/>"})
        assert s.schema_source == ""

    def test_null_schema_and_description_read_as_empty(self):
        s = SectionComponent.model_validate(
            {"name": "Hero", "source": "<div/>", "schema": None, "description": None}
        )
        assert s.schema_source == ""
        assert s.description == ""

    def test_nested_components(self):
        s = SectionComponent.model_validate(
            {
                "name": "ImageText",
                "source": "<div/>",
                "schema": "",
                "components": [{"name": "Badge", "source": "<span/>"}],
            }
        )
        assert [c.name for c in s.components] == ["Badge"]
        assert isinstance(s.components[0], Component)

    def test_components_must_be_list(self):
        with pytest.raises(pydantic.ValidationError):
            SectionComponent.model_validate(
                {"name": "Hero", "source": "", "components": {"name": "Badge"}}
            )

    def test_duplicate_component_names_rejected(self):
        with pytest.raises(pydantic.ValidationError, match="duplicate"):
            SectionComponent.model_validate(
                {
                    "name": "Hero",
                    "source": "",
                    "components": [
                        {"name": "Badge", "source": "a"},
                        {"name": "Badge", "source": "b"},
                    ],
                }
            )

    def test_unknown_fields_ignored(self):
        s = SectionComponent.model_validate({"name": "Hero", "source": "", "extra": 1})
        assert not hasattr(s, "extra")

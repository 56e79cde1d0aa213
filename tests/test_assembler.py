# ==============================================
# Tests for Collection Assembly
# ==============================================

import copy
import json

import pytest

from featurefields.collection import (
    DiscrepancyDetector,
    FieldCollectionAssembler,
    FieldOptions,
    PropertyFields,
    compute_collection,
    from_metadata,
    from_properties,
    identifier_first,
)
from featurefields.config import AppConfig, TemplateConfig
from featurefields.detection import TypeDetector
from featurefields.exceptions import IdentifierFieldMissingError, UnsupportedTypeError
from featurefields.fields import SchemaField


def names(fields):
    return [field["name"] if isinstance(field, dict) else field.name for field in fields]


# ==============================================
# Sample-driven derivation
# ==============================================

class TestFromProperties:
    """Tests for fields inferred from one sample record."""

    def test_one_field_per_key(self, sample_properties):
        result = from_properties(sample_properties)
        assert names(result.fields) == list(sample_properties)
        assert result.oid_field == "OBJECTID"

    def test_types_inferred(self, sample_properties):
        types = {f.name: f.type for f in from_properties(sample_properties)}
        assert types == {
            "name": "esriFieldTypeString",
            "population": "esriFieldTypeInteger",
            "density": "esriFieldTypeDouble",
            "founded": "esriFieldTypeDate",
            "updated": "esriFieldTypeInteger",
        }

    def test_key_used_as_alias(self):
        field = from_properties({"pop": 1}).fields[0]
        assert field.alias == "pop"

    def test_identifier_moved_first(self):
        result = from_properties({"a": 1, "b": "x", "OBJECTID": 7, "c": 2.5})
        assert names(result.fields) == ["OBJECTID", "a", "b", "c"]
        assert result.fields[0].type == "esriFieldTypeOID"

    def test_layer_context_adds_identifier(self):
        result = from_properties({"a": 1, "b": "x"}, "layer")
        assert names(result.fields) == ["OBJECTID", "a", "b"]
        assert all(f.editable is False and f.nullable is False for f in result.fields)

    def test_layer_context_keeps_existing_identifier(self):
        result = from_properties({"a": 1, "OBJECTID": 3}, "layer")
        assert names(result.fields) == ["OBJECTID", "a"]

    def test_generic_context_without_identifier_keeps_order(self):
        """No OBJECTID outside layer context: fields stay in sample order"""
        result = from_properties({"a": 1, "b": "x", "c": 2})
        assert names(result.fields) == ["a", "b", "c"]

    def test_no_properties(self):
        result = from_properties(None, "layer")
        assert isinstance(result, PropertyFields)
        assert result.fields == []
        assert len(result) == 0
        assert not result

    def test_empty_properties_in_layer_context(self):
        assert names(from_properties({}, "layer").fields) == ["OBJECTID"]

    def test_to_dict(self):
        data = from_properties({"a": "x"}).to_dict()
        assert data["oidField"] == "OBJECTID"
        assert data["fields"][0]["length"] == 128


# ==============================================
# Metadata-driven derivation
# ==============================================

class TestFromMetadata:
    """Tests for requested field declarations."""

    def test_identifier_appended(self):
        fields = [{"name": "a", "type": "String"}, {"name": "b", "type": "Integer"}]
        result = from_metadata(fields)
        assert names(result) == ["a", "b", "OBJECTID"]
        assert result[-1] == {"name": "OBJECTID"}

    def test_existing_identifier_not_duplicated(self):
        fields = [{"name": "OBJECTID"}, {"name": "a", "type": "String"}]
        assert names(from_metadata(fields)) == ["OBJECTID", "a"]

    def test_input_not_mutated(self, metadata_fields):
        original = copy.deepcopy(metadata_fields)
        result = from_metadata(metadata_fields, "name")
        result[0]["alias"] = "changed"
        assert metadata_fields == original

    def test_out_fields_filter(self):
        fields = [{"name": n, "type": "String"} for n in ("a", "b", "c")] + [{"name": "OBJECTID"}]
        assert names(from_metadata(fields, "a, b")) == ["a", "b"]

    def test_out_fields_excludes_unlisted_identifier(self):
        """outFields="a" with [a, OBJECTID] -> [a]"""
        fields = [{"name": "a", "type": "String"}, {"name": "OBJECTID"}]
        assert names(from_metadata(fields, "a")) == ["a"]

    def test_out_fields_keeps_listed_injected_identifier(self):
        fields = [{"name": "a", "type": "String"}, {"name": "b", "type": "String"}]
        assert names(from_metadata(fields, "OBJECTID,a")) == ["a", "OBJECTID"]

    def test_out_fields_order_follows_metadata(self):
        fields = [{"name": n, "type": "String"} for n in ("a", "b", "c")]
        assert names(from_metadata(fields, "c ,a")) == ["a", "c"]

    def test_out_fields_surrounding_whitespace(self):
        fields = [{"name": "a", "type": "String"}, {"name": "b", "type": "String"}]
        assert names(from_metadata(fields, " a , b ")) == ["a", "b"]

    def test_wildcard_same_as_none(self, metadata_fields):
        assert from_metadata(metadata_fields, "*") == from_metadata(metadata_fields, None)
        assert from_metadata(metadata_fields, "") == from_metadata(metadata_fields)


# ==============================================
# Identifier ordering
# ==============================================

class TestIdentifierFirst:
    """Tests for the identifier reorder step."""

    def make(self, *field_names):
        return [SchemaField(name=n, type="esriFieldTypeString", alias=n) for n in field_names]

    def test_moves_identifier_keeping_relative_order(self):
        fields = self.make("a", "b", "OBJECTID", "c")
        assert names(identifier_first(fields)) == ["OBJECTID", "a", "b", "c"]

    def test_returns_new_list(self):
        fields = self.make("a", "OBJECTID")
        result = identifier_first(fields)
        assert result is not fields
        assert names(fields) == ["a", "OBJECTID"]

    def test_missing_identifier_is_noop(self):
        fields = self.make("a", "b")
        assert names(identifier_first(fields)) == ["a", "b"]

    def test_missing_required_identifier_raises(self):
        with pytest.raises(IdentifierFieldMissingError):
            identifier_first(self.make("a", "b"), required=True)


# ==============================================
# Top-level computation
# ==============================================

class TestComputeCollection:
    """Tests for compute_collection decision order."""

    def test_statistics_without_metadata(self):
        data = {"statistics": [{"count": 12, "avg_pop": 1500.5}]}
        fields = compute_collection(data)
        assert names(fields) == ["count", "avg_pop"]
        assert [f.type for f in fields] == ["esriFieldTypeInteger", "esriFieldTypeDouble"]

    def test_statistics_in_layer_context(self):
        data = {"statistics": [{"count": 12}]}
        assert names(compute_collection(data, "layer")) == ["OBJECTID", "count"]

    def test_statistics_take_precedence_over_features(self):
        data = {"statistics": [{"count": 1}], "features": [{"properties": {"a": 1}}]}
        assert names(compute_collection(data)) == ["count"]

    def test_empty_statistics(self):
        assert compute_collection({"statistics": []}) == []

    def test_feature_properties(self):
        data = {"features": [{"properties": {"name": "x", "OBJECTID": 1}}]}
        assert names(compute_collection(data)) == ["OBJECTID", "name"]

    def test_feature_attributes(self):
        data = {"features": [{"attributes": {"name": "x", "pop": 3}}]}
        assert names(compute_collection(data)) == ["name", "pop"]

    def test_attribute_sample_option(self):
        options = {"attributeSample": {"a": 1, "b": "two"}}
        assert names(compute_collection({"features": []}, "layer", options)) == ["OBJECTID", "a", "b"]

    def test_options_dataclass(self):
        options = FieldOptions(attribute_sample={"a": 1})
        assert names(compute_collection({}, None, options)) == ["a"]

    def test_nothing_to_inspect(self):
        assert compute_collection({}) == []

    def test_metadata_fields(self, payload, collected_warnings):
        fields = compute_collection(payload, warn=collected_warnings.append)
        assert names(fields) == ["OBJECTID", "name", "population", "density", "founded", "updated"]
        assert fields[1].alias == "City Name"
        assert fields[1].length == 128
        assert fields[4].length == 36

    def test_metadata_identifier_stays_first(self, collected_warnings):
        data = {"metadata": {"fields": [{"name": "a", "type": "String"}, {"name": "OBJECTID"}]}}
        assert names(compute_collection(data, warn=collected_warnings.append)) == ["OBJECTID", "a"]

    def test_metadata_explicit_length(self):
        data = {"metadata": {"fields": [{"name": "code", "type": "String", "length": 5}]}}
        assert compute_collection(data)[1].length == 5

    def test_metadata_layer_context(self, payload, collected_warnings):
        fields = compute_collection(payload, "layer", warn=collected_warnings.append)
        assert all(f.editable is False and f.nullable is False for f in fields)

    def test_metadata_out_fields(self, payload, collected_warnings):
        fields = compute_collection(payload, None, {"outFields": "name, density"}, collected_warnings.append)
        assert names(fields) == ["name", "density"]

    def test_metadata_out_fields_with_identifier(self, payload, collected_warnings):
        fields = compute_collection(payload, None, {"outFields": "density,OBJECTID"}, collected_warnings.append)
        assert names(fields) == ["OBJECTID", "density"]

    def test_empty_metadata_fields(self):
        assert names(compute_collection({"metadata": {"fields": []}})) == ["OBJECTID"]

    def test_metadata_unsupported_type(self):
        data = {"metadata": {"fields": [{"name": "flag", "type": "Boolean"}]}}
        with pytest.raises(UnsupportedTypeError):
            compute_collection(data)

    def test_discrepancies_reported(self, payload, collected_warnings):
        compute_collection(payload, warn=collected_warnings.append)
        assert collected_warnings == [
            "Metadata field OBJECTID (None) not found in feature properties object."
        ]

    def test_type_mismatch_reported(self, collected_warnings):
        data = {
            "metadata": {"fields": [{"name": "OBJECTID"}, {"name": "pop", "type": "String"}]},
            "features": [{"properties": {"OBJECTID": 1, "pop": 3}}],
        }
        fields = compute_collection(data, warn=collected_warnings.append)
        assert collected_warnings == [
            "Metadata field pop (String) has a type mismatch with feature property: pop (Integer)"
        ]
        assert fields[1].type == "esriFieldTypeString"

    def test_discrepancies_use_attribute_sample(self, collected_warnings):
        data = {"metadata": {"fields": [{"name": "OBJECTID"}, {"name": "a", "type": "String"}]}}
        compute_collection(data, None, {"attributeSample": {"OBJECTID": 1}}, collected_warnings.append)
        assert collected_warnings == [
            "Metadata field a (String) not found in feature properties object."
        ]

    def test_no_sample_no_warnings(self, metadata_fields, collected_warnings):
        compute_collection({"metadata": {"fields": metadata_fields}}, warn=collected_warnings.append)
        assert collected_warnings == []

    def test_warnings_disabled_by_config(self, payload, collected_warnings):
        assembler = FieldCollectionAssembler(config=AppConfig(warn_on_discrepancies=False))
        assembler.compute(payload, warn=collected_warnings.append)
        assert collected_warnings == []

    def test_default_sink_prints(self, payload, capsys):
        compute_collection(payload)
        assert "⚠ Metadata field OBJECTID" in capsys.readouterr().out

    def test_payload_not_mutated(self, payload, collected_warnings):
        original = copy.deepcopy(payload)
        compute_collection(payload, "layer", {"outFields": "name"}, collected_warnings.append)
        assert payload == original


# ==============================================
# Collaborators
# ==============================================

class TestAssemblerCollaborators:
    """Tests for injected configuration and collaborators."""

    def test_injected_config_templates_dir(self, tmp_path):
        """Templates come from the injected config, not the global one"""
        (tmp_path / "oid-field.json").write_text(json.dumps({
            "name": "OBJECTID", "type": "esriFieldTypeOID", "alias": "Feature ID"
        }))
        (tmp_path / "field.json").write_text(json.dumps({
            "name": "", "type": "", "alias": "", "sqlType": "sqlTypeVarchar"
        }))
        config = AppConfig(templates=TemplateConfig(templates_dir=str(tmp_path)))
        assembler = FieldCollectionAssembler(config=config)

        fields = assembler.compute({"features": [{"properties": {"name": "x"}}]}, "layer")
        assert fields[0].alias == "Feature ID"
        assert fields[1].sql_type == "sqlTypeVarchar"

    def test_default_config_uses_packaged_templates(self):
        fields = FieldCollectionAssembler().compute({"features": [{"properties": {"a": 1}}]}, "layer")
        assert fields[0].alias == "OBJECTID"
        assert fields[1].sql_type == "sqlTypeOther"

    def test_injected_discrepancy_detector(self, payload, collected_warnings):
        detector = DiscrepancyDetector(TypeDetector())
        assembler = FieldCollectionAssembler(discrepancy_detector=detector)
        assembler.compute(payload, warn=collected_warnings.append)
        assert len(collected_warnings) == 1

    def test_identifier_detected_by_name(self):
        """A sample OBJECTID is recognized without injecting a second one"""
        fields = from_properties({"a": 1, "OBJECTID": 5}, "layer").fields
        assert [f.is_identifier for f in fields] == [True, False]

"""Tests for attribute value decoding and payload encoding."""

import pytest

from jiraassets.exceptions import (
    SchemaResolutionError,
    UnknownStatusError,
    UnsupportedAttributeTypeError,
)
from jiraassets.models.assets import ObjectAttribute
from jiraassets.providers.assets.codec import AttributeCodec


@pytest.fixture
def codec(schema_cache, status_table):
    return AttributeCodec(schema_cache, status_table)


def as_record(payload_attribute, type_code, name="Attr"):
    """Shape a payload attribute the way the API returns it on read."""
    value = payload_attribute.value
    values = {0: {"value": value}, 1: {"searchValue": value}, 7: {"status": {"id": value}}}
    return ObjectAttribute.model_validate(
        {
            "objectTypeAttribute": {"id": payload_attribute.object_type_attribute_id, "name": name, "type": type_code},
            "objectAttributeValues": [values[type_code]],
        }
    )


class TestDecode:
    """Test decoding of remote attribute records."""

    def test_default_type_uses_value(self, codec, make_record):
        record = make_record("Name", 0, value="web-01", displayValue="Web 01")
        assert codec.decode(record) == "web-01"

    def test_reference_type_uses_search_value(self, codec, make_record):
        record = make_record("Network", 1, value="77", searchValue="NET-7", displayValue="DMZ")
        assert codec.decode(record) == "NET-7"

    def test_status_type_resolves_name(self, codec, make_record):
        record = make_record("Status", 7, status={"id": "2", "name": "ignored"})
        assert codec.decode(record) == "Disabled"

    def test_status_type_unknown_id_is_empty(self, codec, make_record):
        record = make_record("Status", 7, status={"id": "42"})
        assert codec.decode(record) == ""

    def test_unsupported_type_raises_with_code(self, codec, make_record):
        """Test user attributes (type 2) are rejected with the numeric code."""
        record = make_record("Owner", 2, value="557058:abc")

        with pytest.raises(UnsupportedAttributeTypeError, match="unsupported attribute type: 2") as exc_info:
            codec.decode(record)

        assert exc_info.value.type_code == 2
        assert exc_info.value.attribute == "attributes.Owner"

    def test_unknown_future_type_code(self, codec, make_record):
        with pytest.raises(UnsupportedAttributeTypeError, match="unsupported attribute type: 42"):
            codec.decode(make_record("Custom", 42, value="x"))

    def test_record_without_values_is_empty(self, codec, make_record):
        assert codec.decode(make_record("Name", 0)) == ""

    def test_only_first_value_is_kept(self, codec):
        record = ObjectAttribute.model_validate(
            {
                "objectTypeAttribute": {"id": "100", "name": "Name", "type": 0},
                "objectAttributeValues": [{"value": "first"}, {"value": "second"}],
            }
        )
        assert codec.decode(record) == "first"


class TestEncode:
    """Test encoding of configured values into payload attributes."""

    def test_status_name_translated_to_id(self, codec):
        """Test {"Status": "Enabled"} on Host becomes attribute 101 with value "1"."""
        attribute = codec.encode("Status", "Enabled", "Host")

        assert attribute.to_payload() == {
            "objectTypeAttributeId": "101",
            "objectAttributeValues": [{"value": "1"}],
        }

    def test_unknown_status_lists_valid_names(self, codec):
        with pytest.raises(UnknownStatusError, match="Enabled,Disabled") as exc_info:
            codec.encode("Status", "Unknown", "Host")

        assert exc_info.value.attribute == "attributes.Status"

    def test_default_value_passes_through(self, codec):
        attribute = codec.encode("Name", "web-01", "Host")

        assert attribute.object_type_attribute_id == "100"
        assert attribute.value == "web-01"

    def test_attribute_of_other_type_not_resolved(self, codec):
        """Test attributes are looked up within the owning object type only."""
        with pytest.raises(SchemaResolutionError, match="'Status' is not defined for object type 'Network'"):
            codec.encode("Status", "Enabled", "Network")

    def test_encode_all_stops_at_first_error(self, codec):
        with pytest.raises(SchemaResolutionError):
            codec.encode_all({"Name": "web-01", "Serial": "123"}, "Host")

        assert len(codec.encode_all({"Name": "web-01", "Network": "NET-7"}, "Host")) == 2


class TestRoundTrip:
    """Test decode(encode(v)) returns v for every supported type."""

    @pytest.mark.parametrize("status", ["Enabled", "Disabled"])
    def test_status_round_trip(self, codec, status):
        assert codec.decode(as_record(codec.encode("Status", status, "Host"), 7)) == status

    @pytest.mark.parametrize(("name", "type_code"), [("Name", 0), ("Network", 1)])
    def test_plain_round_trip(self, codec, name, type_code):
        value = "ümlaut, commas and spaces"
        assert codec.decode(as_record(codec.encode(name, value, "Host"), type_code)) == value

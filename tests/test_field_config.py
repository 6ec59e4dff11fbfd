import pytest

from catalog_sync.core.exceptions import InvalidFieldConfigError
from catalog_sync.domains.catalog.models import (
    FieldConfig,
    FieldConfigBuilder,
    FieldType,
    schema_from_dict,
    schema_to_dict,
)


class TestFieldType:
    def test_wire_values(self):
        assert [field_type.value for field_type in FieldType] == [
            "text_keyword",
            "text",
            "keyword",
            "hierarchy",
            "variants",
            "image_url",
            "url",
            "float",
            "integer",
            "double",
            "name_value_list",
        ]

    def test_unknown_wire_value(self):
        with pytest.raises(ValueError):
            FieldType.from_wire("geo_point")


class TestFieldConfig:
    def test_minimal_to_dict(self):
        assert FieldConfig(type=FieldType.URL).to_dict() == {"type": "url"}

    def test_embeddable_only_when_set(self):
        assert FieldConfigBuilder.hierarchy().to_dict() == {
            "type": "hierarchy",
            "embeddable": False,
        }
        assert "embeddable" not in FieldConfigBuilder.keyword().to_dict()

    def test_nested_to_dict(self):
        config = FieldConfigBuilder.variants(
            {"color": FieldConfigBuilder.keyword(), "size": FieldConfigBuilder.keyword()}
        )
        assert config.to_dict() == {
            "type": "variants",
            "attributes": {"color": {"type": "keyword"}, "size": {"type": "keyword"}},
        }

    def test_from_dict(self):
        config = FieldConfig.from_dict(
            {
                "type": "text_keyword",
                "embeddable": True,
                "subfields": {
                    "autocomplete": {"type": "text"},
                    "analyzer": "lithuanian",
                },
                "properties": {"small": {"type": "url"}},
            }
        )
        assert config.type == FieldType.TEXT_KEYWORD
        assert config.embeddable is True
        assert isinstance(config.subfields["autocomplete"], FieldConfig)
        assert config.subfields["analyzer"] == "lithuanian"
        assert config.properties["small"].type == FieldType.URL

    def test_round_trip(self):
        data = {
            "type": "variants",
            "attributes": {"color": {"type": "keyword", "subfields": {"raw": {"type": "keyword"}}}},
        }
        assert FieldConfig.from_dict(data).to_dict() == data

    def test_missing_type(self):
        with pytest.raises(InvalidFieldConfigError, match="Field type is required"):
            FieldConfig.from_dict({"embeddable": True})

    def test_unknown_type(self):
        with pytest.raises(InvalidFieldConfigError, match="Invalid field type: geo_point"):
            FieldConfig.from_dict({"type": "geo_point"})

    @pytest.mark.parametrize("name", ["", "   "])
    def test_invalid_nested_field_name(self, name):
        with pytest.raises(InvalidFieldConfigError):
            FieldConfigBuilder.variants({name: FieldConfigBuilder.keyword()})

    def test_invalid_nested_name_from_dict(self):
        with pytest.raises(InvalidFieldConfigError):
            FieldConfig.from_dict({"type": "variants", "attributes": {"": {"type": "keyword"}}})


class TestSchemaConversion:
    def test_schema_round_trip(self):
        fields = FieldConfigBuilder.ecommerce_fields(["en-US", "lt-LT"])
        data = schema_to_dict(fields)

        assert data["id"] == {"type": "keyword"}
        assert data["categories_lt-LT"] == {"type": "hierarchy", "embeddable": True}
        assert schema_to_dict(schema_from_dict(data)) == data

    def test_schema_from_dict_rejects_non_mapping(self):
        with pytest.raises(InvalidFieldConfigError):
            schema_from_dict(["id"])


class TestFieldConfigBuilder:
    def test_ecommerce_fields_default_locale(self):
        fields = FieldConfigBuilder.ecommerce_fields(["en-US"])

        assert set(fields) == {
            "id",
            "name",
            "brand",
            "price",
            "formattedPrice",
            "categoryDefault",
            "categories",
            "sku",
            "imageUrl",
            "productUrl",
            "descriptionShort",
            "description",
        }
        assert fields["price"].type == FieldType.DOUBLE
        assert fields["name"].embeddable is True
        assert fields["categoryDefault"].embeddable is None

    def test_ecommerce_fields_other_locales(self):
        fields = FieldConfigBuilder.ecommerce_fields(["en", "lt-LT"])

        assert "name_en" not in fields
        for base in (
            "name",
            "brand",
            "categoryDefault",
            "categories",
            "descriptionShort",
            "description",
            "productUrl",
        ):
            assert f"{base}_lt-LT" in fields
        assert fields["productUrl_lt-LT"].type == FieldType.URL

    def test_add_to_ecommerce_fields(self):
        custom = {
            "price": FieldConfigBuilder.float(),
            "features": FieldConfigBuilder.features({"material": FieldConfigBuilder.keyword()}),
        }
        fields = FieldConfigBuilder.add_to_ecommerce_fields(custom, ["en-US"])

        assert fields["price"].type == FieldType.FLOAT
        assert fields["features"].type == FieldType.NAME_VALUE_LIST
        assert fields["sku"].type == FieldType.KEYWORD

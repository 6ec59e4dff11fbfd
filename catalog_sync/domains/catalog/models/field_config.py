"""
Declarative field schema nodes.

A schema is a ``Dict[str, FieldConfig]`` describing the shape of a canonical
document. Structured fields nest further schemas under ``properties``
(object members) or ``attributes`` (variant / name-value attributes).
``subfields`` carries secondary index configuration and may hold either
nested ``FieldConfig`` nodes or raw values the index interprets itself.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from catalog_sync.core.exceptions import InvalidFieldConfigError
from .field_types import FieldType


class FieldConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: FieldType
    properties: Optional[Dict[str, "FieldConfig"]] = None
    attributes: Optional[Dict[str, "FieldConfig"]] = None
    subfields: Optional[Dict[str, Any]] = None
    embeddable: Optional[bool] = None

    @field_validator("properties", "attributes", "subfields", mode="before")
    @classmethod
    def validate_field_names(cls, value, info):
        if not isinstance(value, Mapping):
            return value
        for name in value:
            if not isinstance(name, str) or not name.strip():
                raise InvalidFieldConfigError(
                    f"Invalid field name in {info.field_name}: '{name}'",
                    field_name=str(name),
                )
        return value

    @classmethod
    def create(cls, type: FieldType, **kwargs) -> "FieldConfig":
        """Build a node, surfacing schema problems as InvalidFieldConfigError"""
        try:
            return cls(type=type, **kwargs)
        except PydanticValidationError as e:
            raise InvalidFieldConfigError(
                f"Invalid field configuration: {e.errors()[0].get('msg')}", cause=e
            ) from e

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FieldConfig":
        """Create a FieldConfig from its JSON object representation"""
        if not isinstance(data, Mapping) or "type" not in data:
            raise InvalidFieldConfigError("Field type is required")

        try:
            field_type = FieldType.from_wire(data["type"])
        except ValueError as e:
            raise InvalidFieldConfigError(
                f"Invalid field type: {data['type']}", cause=e
            ) from e

        properties = None
        if isinstance(data.get("properties"), Mapping):
            properties = {
                key: cls.from_dict(prop) for key, prop in data["properties"].items()
            }

        attributes = None
        if isinstance(data.get("attributes"), Mapping):
            attributes = {
                key: cls.from_dict(attr) for key, attr in data["attributes"].items()
            }

        subfields = None
        if isinstance(data.get("subfields"), Mapping):
            subfields = {}
            for key, subfield in data["subfields"].items():
                if isinstance(subfield, Mapping) and "type" in subfield:
                    subfields[key] = cls.from_dict(subfield)
                else:
                    subfields[key] = subfield

        embeddable = data.get("embeddable")
        return cls.create(
            field_type,
            properties=properties,
            attributes=attributes,
            subfields=subfields,
            embeddable=bool(embeddable) if embeddable is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON object sent to the indexing service"""
        data: Dict[str, Any] = {"type": self.type.value}

        if self.properties is not None:
            data["properties"] = {
                key: config.to_dict() for key, config in self.properties.items()
            }

        if self.attributes is not None:
            data["attributes"] = {
                key: config.to_dict() for key, config in self.attributes.items()
            }

        if self.subfields is not None:
            data["subfields"] = {
                key: value.to_dict() if isinstance(value, FieldConfig) else value
                for key, value in self.subfields.items()
            }

        if self.embeddable is not None:
            data["embeddable"] = self.embeddable

        return data


def schema_to_dict(fields: Mapping[str, FieldConfig]) -> Dict[str, Dict[str, Any]]:
    """Serialize a whole field map"""
    return {name: config.to_dict() for name, config in fields.items()}


def schema_from_dict(data: Mapping[str, Any]) -> Dict[str, FieldConfig]:
    """Parse a whole field map, e.g. one loaded from a JSON settings file"""
    if not isinstance(data, Mapping):
        raise InvalidFieldConfigError("Field schema must be an object")
    fields = {}
    for name, config in data.items():
        if not isinstance(name, str) or not name.strip():
            raise InvalidFieldConfigError(f"Invalid field name: '{name}'")
        fields[name] = FieldConfig.from_dict(config)
    return fields

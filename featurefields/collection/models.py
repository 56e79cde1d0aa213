# ==============================================
# Collection Models (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes for the INPUT options and the OUTPUT of
#   collection assembly. Kept apart from the assembler so the
#   CLI and the tests can build/inspect them directly.
#
# CLASSES:
# --------
# - FieldOptions (dataclass)
#     - attribute_sample: dict | None  → Fallback sample when no feature is present
#     - out_fields: str | None         → Comma-separated allowlist, "*" for all
#     - from_dict(data) (classmethod)  → Accepts snake_case or request-style keys
#
# - PropertyFields (dataclass)
#     The result of sample-driven derivation: the identifier field
#     name paired with the ordered fields. Iterates over its fields.
#
# - DiscrepancyKind(Enum): MISSING, TYPE_MISMATCH
#
# - DiscrepancyWarning (dataclass)
#     One mismatch between a metadata field and the data sample.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ..fields import SchemaField


@dataclass
class FieldOptions:
    """
    Request options recognized by the assembler.
    """
    attribute_sample: Optional[Dict[str, Any]] = None
    out_fields: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "FieldOptions":
        """
        Build options from a plain mapping.

        Args:
            data: Mapping with attribute_sample/out_fields or
                  attributeSample/outFields keys (may be None)

        Returns:
            A FieldOptions instance
        """
        data = data or {}
        return cls(
            attribute_sample=data.get("attribute_sample", data.get("attributeSample")),
            out_fields=data.get("out_fields", data.get("outFields")),
        )


@dataclass
class PropertyFields:
    """
    Fields derived from a sample record, labeled with the identifier
    field name. Empty (and falsy) when there was no sample.
    """
    oid_field: Optional[str] = None
    fields: List[SchemaField] = field(default_factory=list)

    def __iter__(self) -> Iterator[SchemaField]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "oidField": self.oid_field,
            "fields": [f.to_dict() for f in self.fields],
        }


class DiscrepancyKind(Enum):
    MISSING = "missing"
    TYPE_MISMATCH = "type_mismatch"


@dataclass
class DiscrepancyWarning:
    """
    A metadata field that is absent from, or typed differently than,
    the data sample.
    """
    kind: DiscrepancyKind
    field_name: str
    metadata_type: Optional[str] = None
    sample_type: Optional[str] = None

    @property
    def message(self) -> str:
        if self.kind == DiscrepancyKind.MISSING:
            return (
                f"Metadata field {self.field_name} ({self.metadata_type}) "
                f"not found in feature properties object."
            )
        return (
            f"Metadata field {self.field_name} ({self.metadata_type}) has a type mismatch "
            f"with feature property: {self.field_name} ({self.sample_type})"
        )

    def __str__(self) -> str:
        return self.message

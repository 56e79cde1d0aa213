# ==============================================
# SchemaField (Data Class)
# ==============================================
#
# PURPOSE:
#   The OUTPUT of field building: one Esri field descriptor.
#   Templates are turned into SchemaField instances with
#   from_dict(); responses are rendered with to_dict().
#
# CLASS: SchemaField (dataclass)
# ------------------------------
#   Attributes:
#   -----------
#   - name: str                   → Field name ("OBJECTID", "population")
#   - type: str                   → Esri field type ("esriFieldTypeString")
#   - alias: str                  → Display alias
#   - sql_type: str               → "sqlTypeOther", "sqlTypeInteger", ...
#   - domain: Any                 → Always None for computed fields
#   - default_value: Any          → Always None for computed fields
#   - length: int | None          → Set for String/Date fields
#   - editable: bool | None       → Only set in layer context
#   - nullable: bool | None       → Only set in layer context
#
# ==============================================

from dataclasses import dataclass
from typing import Optional, Dict, Any


IDENTIFIER_FIELD = "OBJECTID"


@dataclass
class SchemaField:
    """
    Esri JSON field descriptor.

    Optional attributes left as None are omitted from to_dict(), so a
    generic field never carries editable/nullable and an integer field
    never carries a length.
    """

    # --- Core identity ---
    name: str
    type: str
    alias: str

    # --- Template defaults ---
    sql_type: str = "sqlTypeOther"
    domain: Any = None
    default_value: Any = None

    # --- Computed ---
    length: Optional[int] = None

    # --- Layer context decoration ---
    editable: Optional[bool] = None
    nullable: Optional[bool] = None

    @property
    def is_identifier(self) -> bool:
        return self.name == IDENTIFIER_FIELD

    def to_dict(self) -> Dict[str, Any]:
        """
        Render the Esri JSON representation.

        Returns:
            A JSON-serializable dictionary
        """
        data = {
            "name": self.name,
            "type": self.type,
            "alias": self.alias,
            "sqlType": self.sql_type,
            "domain": self.domain,
            "defaultValue": self.default_value,
        }
        if self.length is not None:
            data["length"] = self.length
        if self.editable is not None:
            data["editable"] = self.editable
        if self.nullable is not None:
            data["nullable"] = self.nullable
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaField":
        """
        Build a SchemaField from an Esri JSON mapping (a template or a
        template merged with computed values).

        Args:
            data: Dictionary using Esri JSON keys (sqlType, defaultValue)

        Returns:
            A new SchemaField instance
        """
        return cls(
            name=data["name"],
            type=data["type"],
            alias=data.get("alias") or data["name"],
            sql_type=data.get("sqlType", "sqlTypeOther"),
            domain=data.get("domain"),
            default_value=data.get("defaultValue"),
            length=data.get("length"),
            editable=data.get("editable"),
            nullable=data.get("nullable"),
        )

# ==============================================
# TOPIC 2: FIELD BUILDING
# ==============================================
#
# Builds one Esri field descriptor at a time by overlaying
# computed values on the on-disk templates.
#
# Modules:
# --------
# - schema_field.py   → SchemaField data class (to_dict / from_dict)
# - template_store.py → Load field.json / oid-field.json as copies
# - field_builder.py  → FieldBuilder + build_field
#
# ==============================================

from .schema_field import SchemaField, IDENTIFIER_FIELD
from .template_store import TemplateStore, get_template_store
from .field_builder import FieldBuilder, LAYER_CONTEXT, build_field

__all__ = [
    "SchemaField",
    "IDENTIFIER_FIELD",
    "TemplateStore",
    "get_template_store",
    "FieldBuilder",
    "LAYER_CONTEXT",
    "build_field",
]

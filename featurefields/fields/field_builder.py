# ==============================================
# FieldBuilder
# ==============================================
#
# PURPOSE:
#   Produce one SchemaField from a name, alias, type label and
#   optional length. This is the only place templates are turned
#   into output objects.
#
# CLASS: FieldBuilder
# -------------------
#   Stateless apart from its collaborators.
#
#   Constructor:
#   ------------
#   - __init__(template_store: TemplateStore | None,
#              defaults: FieldDefaultsConfig | None)
#
#   Methods:
#   --------
#   - build(name, alias, field_type, length, context) -> SchemaField
#       RULE 1: name == "OBJECTID" → identifier template (type/length ignored)
#       RULE 2: otherwise → generic template + name/type/alias, with
#               length = explicit, else 128 for "String", else 36 for "Date"
#               (exact label; "string" or "date" get no default)
#       RULE 3: context == "layer" → editable=False, nullable=False
#
#   - identifier_field(context) -> SchemaField
#       Identifier template, decorated for the context.
#
# ==============================================

from typing import Optional

from ..config import FieldDefaultsConfig, get_config
from ..detection import esri_type_map
from .schema_field import SchemaField, IDENTIFIER_FIELD
from .template_store import TemplateStore, get_template_store


LAYER_CONTEXT = "layer"


class FieldBuilder:
    """
    Builds SchemaField objects by overlaying computed values on templates.
    """

    def __init__(
        self,
        template_store: Optional[TemplateStore] = None,
        defaults: Optional[FieldDefaultsConfig] = None
    ):
        self.template_store = template_store or get_template_store()
        self.defaults = defaults or get_config().defaults

    def build(
        self,
        name: str,
        alias: Optional[str],
        field_type: Optional[str],
        length: Optional[int] = None,
        context: Optional[str] = None
    ) -> SchemaField:
        """
        Build a single field descriptor.

        Args:
            name: Field name
            alias: Display alias, falls back to the name
            field_type: Type label ("String", "Integer", "Double", "Date", ...)
            length: Explicit length, overrides the type defaults
            context: Request context; "layer" adds editable/nullable

        Returns:
            A new SchemaField

        Raises:
            UnsupportedTypeError: If field_type has no Esri mapping
        """
        if name == IDENTIFIER_FIELD:
            return self.identifier_field(context)

        esri_type = esri_type_map(field_type)

        template = self.template_store.field()
        template.update({
            "name": name,
            "type": esri_type,
            "alias": alias or name,
            "length": length or self._default_length(field_type),
        })

        return self._decorate(SchemaField.from_dict(template), context)

    def identifier_field(self, context: Optional[str] = None) -> SchemaField:
        field = SchemaField.from_dict(self.template_store.identifier_field())
        return self._decorate(field, context)

    def _default_length(self, field_type: str) -> Optional[int]:
        # Label match is case-sensitive: "string"/"date" get no default
        if field_type == "String":
            return self.defaults.string_length
        if field_type == "Date":
            return self.defaults.date_length
        return None

    def _decorate(self, field: SchemaField, context: Optional[str]) -> SchemaField:
        if context == LAYER_CONTEXT:
            field.editable = False
            field.nullable = False
        return field


def build_field(
    name: str,
    alias: Optional[str],
    field_type: Optional[str],
    length: Optional[int] = None,
    context: Optional[str] = None
) -> SchemaField:
    return FieldBuilder().build(name, alias, field_type, length, context)

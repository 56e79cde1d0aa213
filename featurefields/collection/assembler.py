# ==============================================
# FieldCollectionAssembler - Orchestrator
# ==============================================
#
# PURPOSE:
#   Compute the ordered Esri field collection for a data payload.
#   Ties the topics together:
#
#   payload ──┬─ metadata.fields? ──► from_metadata ──► DiscrepancyDetector (report only)
#             │                                    └──► FieldBuilder per field
#             └─ otherwise ─────────► from_properties (statistics[0], first
#                                     feature, or options.attribute_sample)
#                                     TypeDetector + FieldBuilder per key
#
#   Every collection that holds an OBJECTID field leads with it.
#
# CLASS: FieldCollectionAssembler
# -------------------------------
#   Constructor:
#   ------------
#   - __init__(field_builder, discrepancy_detector, config)
#       All optional; defaults come from get_config().
#
#   Methods:
#   --------
#   - compute(data, context, options, warn) -> list[SchemaField]
#       Decision order:
#         1. no metadata fields + statistics → from_properties(statistics[0]).fields
#         2. no metadata fields              → from_properties(sample).fields
#         3. metadata fields                 → from_metadata, warn on
#            discrepancies, build each field, identifier first
#
#   - from_properties(properties, context, options) -> PropertyFields
#       One field per sample key. Layer context appends OBJECTID if missing.
#
#   - from_metadata(metadata_fields, out_fields) -> list[dict]
#       Copy metadata, append {"name": "OBJECTID"} if missing, then keep
#       only names listed in out_fields ("*" or empty keeps all).
#
# FUNCTION:
# ---------
#   - identifier_first(fields, required) -> list[SchemaField]
#       New list with OBJECTID moved to the front. Without an OBJECTID
#       field, raises IdentifierFieldMissingError when required, otherwise
#       returns the fields unchanged.
#
# ==============================================

import re
from typing import Any, Callable, Dict, List, Optional, Union

from ..config import AppConfig, get_config
from ..detection import TypeDetector
from ..exceptions import IdentifierFieldMissingError
from ..fields import FieldBuilder, SchemaField, TemplateStore, IDENTIFIER_FIELD, LAYER_CONTEXT
from .discrepancy import DiscrepancyDetector, print_warning
from .models import FieldOptions, PropertyFields


OUT_FIELDS_WILDCARD = "*"
OUT_FIELDS_SEPARATOR = re.compile(r"\s*,\s*")

OptionsLike = Union[FieldOptions, Dict[str, Any], None]


def identifier_first(fields: List[SchemaField], required: bool = False) -> List[SchemaField]:
    index = next(
        (i for i, field in enumerate(fields) if field.is_identifier),
        None
    )

    if index is None:
        if required:
            raise IdentifierFieldMissingError(IDENTIFIER_FIELD)
        return list(fields)

    return [fields[index]] + fields[:index] + fields[index + 1:]


class FieldCollectionAssembler:
    """
    Computes Esri field collections from metadata or from a data sample.
    """

    def __init__(
        self,
        field_builder: Optional[FieldBuilder] = None,
        discrepancy_detector: Optional[DiscrepancyDetector] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Initialize the assembler with its collaborators.

        Args:
            field_builder: Builds one SchemaField; default reads the config's templates
            discrepancy_detector: Compares metadata to the sample
            config: Application configuration. If None, loads from environment.
        """
        self._config = config or get_config()
        self._type_detector = TypeDetector()

        if field_builder is None:
            # An injected config brings its own templates directory
            template_store = TemplateStore(self._config.templates.templates_dir) if config else None
            field_builder = FieldBuilder(template_store, self._config.defaults)
        self._field_builder = field_builder
        self._discrepancy_detector = discrepancy_detector or DiscrepancyDetector(self._type_detector)

    def compute(
        self,
        data: Dict[str, Any],
        context: Optional[str] = None,
        options: OptionsLike = None,
        warn: Optional[Callable[[str], None]] = None
    ) -> List[SchemaField]:
        """
        Generate the field collection for a payload.

        Args:
            data: {metadata?: {fields?}, features?: [...], statistics?: [...]}
            context: Request context ("layer" or anything else)
            options: FieldOptions or a mapping with attributeSample/outFields
            warn: Single-argument sink for discrepancy messages

        Returns:
            Ordered list of SchemaField, OBJECTID first when present
        """
        options = self._coerce_options(options)
        warn = warn or print_warning

        metadata = data.get("metadata") or {}
        metadata_fields = metadata.get("fields")
        properties = self._sample_properties(data, options)

        # Steps 1 and 2: no metadata, inspect the data instead
        if metadata_fields is None and data.get("statistics") is not None:
            statistics = data["statistics"]
            sample = statistics[0] if statistics else None
            return self.from_properties(sample, context, options).fields
        if metadata_fields is None:
            return self.from_properties(properties, context, options).fields

        # Step 3: metadata, narrowed to the requested fields
        requested_fields = self.from_metadata(metadata_fields, options.out_fields)

        if properties is not None and self._config.warn_on_discrepancies:
            for warning in self._discrepancy_detector.detect(requested_fields, properties):
                warn(warning.message)

        response_fields = [
            self._field_builder.build(
                field["name"],
                field.get("alias"),
                field.get("type"),
                field.get("length"),
                context
            )
            for field in requested_fields
        ]

        # outFields may have filtered OBJECTID out; that is not an error here
        return identifier_first(response_fields)

    def from_properties(
        self,
        properties: Optional[Dict[str, Any]],
        context: Optional[str] = None,
        options: OptionsLike = None
    ) -> PropertyFields:
        """
        Build fields from one sample record.

        Args:
            properties: Sample record; None yields an empty result
            context: Request context
            options: Accepted for signature parity with compute()

        Returns:
            PropertyFields(oid_field="OBJECTID", fields=[...])
        """
        if properties is None:
            return PropertyFields()

        fields = [
            self._field_builder.build(key, key, self._type_detector.detect(value), None, context)
            for key, value in properties.items()
        ]

        is_layer = context == LAYER_CONTEXT
        if is_layer and not any(field.is_identifier for field in fields):
            fields.append(self._field_builder.identifier_field(context))

        return PropertyFields(
            oid_field=IDENTIFIER_FIELD,
            fields=identifier_first(fields, required=is_layer)
        )

    def from_metadata(
        self,
        metadata_fields: List[Dict[str, Any]],
        out_fields: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Build the list of requested field declarations.

        Args:
            metadata_fields: Field declarations from metadata (not modified)
            out_fields: Comma-separated field names, "*" for all

        Returns:
            Copies of the requested declarations in metadata order
        """
        response_fields = [dict(field) for field in metadata_fields]

        if not any(field.get("name") == IDENTIFIER_FIELD for field in metadata_fields):
            response_fields.append({"name": IDENTIFIER_FIELD})

        if out_fields and out_fields != OUT_FIELDS_WILDCARD:
            requested = set(OUT_FIELDS_SEPARATOR.split(out_fields.strip()))
            response_fields = [
                field for field in response_fields
                if field.get("name") in requested
            ]

        return response_fields

    def _sample_properties(self, data: Dict[str, Any], options: FieldOptions) -> Optional[Dict[str, Any]]:
        features = data.get("features")
        if not features:
            return options.attribute_sample

        feature = features[0]
        properties = feature.get("properties")
        return properties if properties is not None else feature.get("attributes")

    def _coerce_options(self, options: OptionsLike) -> FieldOptions:
        if isinstance(options, FieldOptions):
            return options
        return FieldOptions.from_dict(options)


def compute_collection(
    data: Dict[str, Any],
    context: Optional[str] = None,
    options: OptionsLike = None,
    warn: Optional[Callable[[str], None]] = None
) -> List[SchemaField]:
    return FieldCollectionAssembler().compute(data, context, options, warn)


def from_properties(
    properties: Optional[Dict[str, Any]],
    context: Optional[str] = None,
    options: OptionsLike = None
) -> PropertyFields:
    return FieldCollectionAssembler().from_properties(properties, context, options)


def from_metadata(
    metadata_fields: List[Dict[str, Any]],
    out_fields: Optional[str] = None
) -> List[Dict[str, Any]]:
    return FieldCollectionAssembler().from_metadata(metadata_fields, out_fields)

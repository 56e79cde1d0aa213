# ==============================================
# TOPIC 3: COLLECTION ASSEMBLY
# ==============================================
#
# Turns a whole payload into an ordered field collection:
# chooses metadata-driven or sample-driven derivation, filters
# by outFields, reports metadata/sample discrepancies and keeps
# OBJECTID first.
#
# Modules:
# --------
# - models.py      → FieldOptions, PropertyFields, DiscrepancyWarning
# - discrepancy.py → Compare metadata fields with a data sample
# - assembler.py   → FieldCollectionAssembler + compute_collection
# - statistics.py  → Field aliases / field descriptors for statistics
#
# ==============================================

from .models import FieldOptions, PropertyFields, DiscrepancyKind, DiscrepancyWarning
from .discrepancy import DiscrepancyDetector, detect_discrepancies, print_warning
from .assembler import (
    FieldCollectionAssembler,
    compute_collection,
    from_metadata,
    from_properties,
    identifier_first,
)
from .statistics import create_field_aliases, create_stat_fields

__all__ = [
    "FieldOptions",
    "PropertyFields",
    "DiscrepancyKind",
    "DiscrepancyWarning",
    "DiscrepancyDetector",
    "detect_discrepancies",
    "print_warning",
    "FieldCollectionAssembler",
    "compute_collection",
    "from_metadata",
    "from_properties",
    "identifier_first",
    "create_field_aliases",
    "create_stat_fields",
]

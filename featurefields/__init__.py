# ==============================================
# Feature Fields
# ==============================================
#
# Package Structure (3 Topics + entry points):
#
# featurefields/
# ├── detection/     # Topic 1: Detect value types, map to Esri types
# ├── fields/        # Topic 2: Build one SchemaField from templates
# ├── collection/    # Topic 3: Assemble ordered field collections
# ├── templates/     # On-disk JSON base objects
# ├── config.py      # Configuration management
# ├── exceptions.py  # Error hierarchy
# └── cli.py         # Command line entry point
#
# ==============================================

from .collection import (
    compute_collection,
    from_metadata,
    from_properties,
    detect_discrepancies,
    create_field_aliases,
    create_stat_fields,
)
from .detection import detect_type, esri_type_map
from .fields import SchemaField, build_field

__version__ = "0.1.0"

__all__ = [
    "compute_collection",
    "from_metadata",
    "from_properties",
    "detect_discrepancies",
    "create_field_aliases",
    "create_stat_fields",
    "detect_type",
    "esri_type_map",
    "SchemaField",
    "build_field",
]

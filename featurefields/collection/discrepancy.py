# ==============================================
# DiscrepancyDetector
# ==============================================
#
# PURPOSE:
#   Compare fields declared in metadata with the properties of a
#   data sample and report where they disagree. Report-only: the
#   field collection is never changed by what is found here.
#
# RULES:
# ------
#   1. Metadata field absent from the sample  → MISSING
#   2. Types differ (identifier exempt)       → TYPE_MISMATCH
#      Tolerated pairs (metadata, sample):
#        ("Date", "Integer")   epoch timestamps
#        ("Double", "Integer") whole-number samples
#
# ==============================================

from typing import Any, Dict, List, Optional

from ..detection import TypeDetector
from ..fields import IDENTIFIER_FIELD
from .models import DiscrepancyKind, DiscrepancyWarning


class DiscrepancyDetector:

    TOLERATED_MISMATCHES = {
        ("Date", "Integer"),
        ("Double", "Integer"),
    }

    def __init__(self, type_detector: Optional[TypeDetector] = None):
        self.type_detector = type_detector or TypeDetector()

    def detect(
        self,
        metadata_fields: List[Dict[str, Any]],
        properties: Dict[str, Any]
    ) -> List[DiscrepancyWarning]:
        """
        Find metadata fields that don't match the data sample.

        Args:
            metadata_fields: Field declarations ({name, type, ...})
            properties: One sample record

        Returns:
            List of DiscrepancyWarning, in metadata order
        """
        sample_types = {
            name: self.type_detector.detect(value)
            for name, value in properties.items()
        }

        warnings = []
        for metadata_field in metadata_fields:
            name = metadata_field.get("name")
            metadata_type = metadata_field.get("type")

            if name not in sample_types:
                warnings.append(DiscrepancyWarning(
                    kind=DiscrepancyKind.MISSING,
                    field_name=name,
                    metadata_type=metadata_type,
                ))
                continue

            sample_type = sample_types[name]
            if name == IDENTIFIER_FIELD or metadata_type == sample_type:
                continue
            if (metadata_type, sample_type) in self.TOLERATED_MISMATCHES:
                continue

            warnings.append(DiscrepancyWarning(
                kind=DiscrepancyKind.TYPE_MISMATCH,
                field_name=name,
                metadata_type=metadata_type,
                sample_type=sample_type,
            ))

        return warnings


def detect_discrepancies(
    metadata_fields: List[Dict[str, Any]],
    properties: Dict[str, Any]
) -> List[DiscrepancyWarning]:
    return DiscrepancyDetector().detect(metadata_fields, properties)


def print_warning(message: str) -> None:
    """Default diagnostic sink."""
    print(f"⚠ {message}")

import math
from datetime import date, datetime
from typing import Any, Optional

from ..exceptions import UnsupportedTypeError


class TypeDetector:
    DEFAULT_TYPE = "String"

    DATETIME_FORMATS = [
        "%Y-%m-%dT%H:%M:%SZ",
        "%Y-%m-%dT%H:%M:%S.%fZ",
        "%Y-%m-%dT%H:%M:%S%z",
        "%Y-%m-%dT%H:%M:%S.%f%z",
        "%Y-%m-%dT%H:%M:%S",
        "%Y-%m-%dT%H:%M:%S.%f",
        "%Y-%m-%dT%H:%M",
        "%Y-%m-%d %H:%M:%S",
        "%Y-%m-%d %H:%M:%S.%f",
        "%Y-%m-%d",
        "%Y-%m",
    ]

    ESRI_TYPES = {
        "string": "esriFieldTypeString",
        "integer": "esriFieldTypeInteger",
        "smallinteger": "esriFieldTypeSmallInteger",
        "double": "esriFieldTypeDouble",
        "single": "esriFieldTypeSingle",
        "date": "esriFieldTypeDate",
        "oid": "esriFieldTypeOID",
        "blob": "esriFieldTypeBlob",
        "geometry": "esriFieldTypeGeometry",
        "globalid": "esriFieldTypeGlobalID",
        "guid": "esriFieldTypeGUID",
        "raster": "esriFieldTypeRaster",
        "xml": "esriFieldTypeXML",
    }

    @classmethod
    def detect(cls, value: Any) -> str:
        if value is None:
            return cls.DEFAULT_TYPE

        # bool is an int subclass; the Esri type system has no boolean field
        if isinstance(value, bool):
            return "String"

        if isinstance(value, int):
            return "Integer"

        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer():
                return "Integer"
            return "Double"

        if isinstance(value, (datetime, date)):
            return "Date"

        if isinstance(value, str):
            if cls._is_datetime(value.strip()):
                return "Date"
            return "String"

        return cls.DEFAULT_TYPE

    @classmethod
    def esri_type(cls, label: Optional[str]) -> str:
        if not isinstance(label, str):
            raise UnsupportedTypeError(label)

        try:
            return cls.ESRI_TYPES[label.lower()]
        except KeyError:
            raise UnsupportedTypeError(label) from None

    @classmethod
    def _is_datetime(cls, value: str) -> bool:
        return cls._parse_datetime(value) is not None

    @classmethod
    def _parse_datetime(cls, value: str) -> Optional[datetime]:
        for fmt in cls.DATETIME_FORMATS:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        return None


def detect_type(value: Any) -> str:
    return TypeDetector.detect(value)


def esri_type_map(label: Optional[str]) -> str:
    return TypeDetector.esri_type(label)

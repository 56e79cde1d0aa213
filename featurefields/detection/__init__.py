# ==============================================
# TOPIC 1: TYPE DETECTION
# ==============================================
#
# Turns a raw sample value into a type label ("String",
# "Integer", "Double", "Date") and a type label into the
# canonical Esri field type ("esriFieldTypeString", ...).
#
# Modules:
# --------
# - type_detector.py → TypeDetector + detect_type / esri_type_map
#
# ==============================================

from .type_detector import TypeDetector, detect_type, esri_type_map

__all__ = ["TypeDetector", "detect_type", "esri_type_map"]

from typing import Any, Dict, List, Optional

from ..config import FieldDefaultsConfig, get_config
from ..detection import detect_type, esri_type_map


def create_field_aliases(stats: List[Dict[str, Any]]) -> Dict[str, str]:
    """
    Alias map for a statistics response: every statistic name maps to itself.

    Args:
        stats: Statistics rows; the first row names the statistics

    Returns:
        {name: name} in first-row order, empty when there are no rows
    """
    if not stats:
        return {}
    return {name: name for name in stats[0]}


def create_stat_fields(
    stats: List[Dict[str, Any]],
    defaults: Optional[FieldDefaultsConfig] = None
) -> List[Dict[str, Any]]:
    """
    Field descriptors for a statistics response.

    The type of each statistic comes from the first row where it is not
    None, so a leading null row (e.g. an empty group) doesn't turn a numeric
    statistic into a string.

    Args:
        stats: Statistics rows
        defaults: Length defaults; string statistics get stat_string_length

    Returns:
        List of {name, type, alias[, length]} dictionaries
    """
    if not stats:
        return []

    defaults = defaults or get_config().defaults

    stat_fields = []
    for name in stats[0]:
        sample = next((row[name] for row in stats if row.get(name) is not None), None)
        stat_field = {
            "name": name,
            "type": esri_type_map(detect_type(sample)),
            "alias": name,
        }
        if stat_field["type"] == "esriFieldTypeString":
            stat_field["length"] = defaults.stat_string_length
        stat_fields.append(stat_field)

    return stat_fields

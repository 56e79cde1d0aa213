# ==============================================
# TemplateStore
# ==============================================
#
# PURPOSE:
#   Load the JSON base objects that computed fields are merged
#   onto. Templates are read once per store and handed out as
#   copies, so callers can never mutate the shared originals.
#
# CLASS: TemplateStore
# --------------------
#   Holds a reference to the templates directory.
#
#   Constructor:
#   ------------
#   - __init__(templates_dir: str | None = None)
#       Defaults to the configured templates directory.
#
#   Methods:
#   --------
#   - get(name: str) -> dict
#       Return a copy of templates_dir/<name>.json.
#
#   - field() -> dict
#       Generic field template (field.json).
#
#   - identifier_field() -> dict
#       OBJECTID field template (oid-field.json).
#
# FILES:
# ------
#   templates/field.json      → Generic field defaults
#   templates/oid-field.json  → Identifier field definition
#
# ==============================================

import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..config import get_config
from ..exceptions import TemplateNotFoundError


class TemplateStore:
    """
    Read-only access to the on-disk field templates.
    """

    FIELD_TEMPLATE = "field"
    IDENTIFIER_TEMPLATE = "oid-field"

    def __init__(self, templates_dir: Optional[str] = None):
        """
        Initialize the template store.

        Args:
            templates_dir: Directory holding <name>.json templates
        """
        self.templates_dir = Path(templates_dir or get_config().templates.templates_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def get(self, name: str) -> Dict[str, Any]:
        """
        Load a template by name.

        Args:
            name: Template file name without the .json suffix

        Returns:
            A deep copy of the template mapping

        Raises:
            TemplateNotFoundError: If the template file does not exist
        """
        if name not in self._cache:
            template_file = self.templates_dir / f"{name}.json"
            if not template_file.exists():
                raise TemplateNotFoundError(f"No template file found at {template_file}")

            with open(template_file, 'r') as f:
                self._cache[name] = json.load(f)

        return copy.deepcopy(self._cache[name])

    def field(self) -> Dict[str, Any]:
        return self.get(self.FIELD_TEMPLATE)

    def identifier_field(self) -> Dict[str, Any]:
        return self.get(self.IDENTIFIER_TEMPLATE)


_default_store: Optional[TemplateStore] = None


def get_template_store() -> TemplateStore:
    """Shared store for the configured templates directory."""
    global _default_store

    if _default_store is None:
        _default_store = TemplateStore()

    return _default_store


def reset_template_store() -> None:
    global _default_store
    _default_store = None

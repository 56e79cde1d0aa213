class FeatureFieldsError(Exception):
    """
    Base exception for all field computation errors
    """
    pass


class UnsupportedTypeError(FeatureFieldsError, ValueError):
    """
    Raised when a type label has no Esri field type mapping
    """

    def __init__(self, label):
        self.label = label
        super().__init__(f"Unsupported field type: {label!r}")


class IdentifierFieldMissingError(FeatureFieldsError, LookupError):
    """
    Raised when a collection must lead with the identifier field but has none
    """

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Identifier field '{identifier}' not found in field collection")


class TemplateNotFoundError(FeatureFieldsError, FileNotFoundError):
    """
    Raised when a field template file does not exist
    """
    pass

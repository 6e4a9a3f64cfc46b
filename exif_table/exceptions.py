"""
Custom exception hierarchy for the EXIF table exporter.
"""


class ExifTableError(Exception):
    """Base exception for all exif_table errors."""
    pass


class ConfigurationError(ExifTableError):
    """Raised when required run configuration (e.g. the image directory) is missing."""
    pass


class MetadataExtractionError(ExifTableError):
    """Raised when exiftool fails or returns output that cannot be parsed."""
    pass

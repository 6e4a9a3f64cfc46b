from dataclasses import dataclass, astuple
from typing import Dict, Tuple

from . import config

@dataclass(frozen=True)
class ExifRecord:
    """
    The seven output columns for one JPEG.
    Field order is the column order; every field defaults to the sentinel.
    """
    create_date: str = config.SENTINEL
    file_name: str = config.SENTINEL
    camera_model: str = config.SENTINEL
    shutter_speed: str = config.SENTINEL
    f_number: str = config.SENTINEL
    iso: str = config.SENTINEL
    lens_model: str = config.SENTINEL

    @classmethod
    def placeholder(cls) -> "ExifRecord":
        """Record used when exiftool gave us nothing usable for a file."""
        return cls()

    def as_row(self) -> Tuple[str, ...]:
        return astuple(self)

    def to_dict(self) -> Dict[str, str]:
        """Label-keyed view, e.g. {'Create Date': '2025/04/16', ...}."""
        return dict(zip(config.COLUMN_LABELS, self.as_row()))

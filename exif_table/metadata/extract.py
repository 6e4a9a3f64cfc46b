import logging
import subprocess
import json
from pathlib import Path
from typing import Optional, List, Dict, Any

from .. import config
from ..exceptions import MetadataExtractionError
from ..models import ExifRecord
from .dates import normalize_capture_date


class ExifToolRunner:
    """
    Wraps the 'exiftool' command line utility.
    Must be installed and on the system PATH (or passed explicitly).
    """

    def __init__(self, executable: str = config.EXIFTOOL_BIN, timeout: Optional[float] = None):
        self.executable = executable
        self.timeout = timeout

    def build_command(self, path: Path, fields: List[str]) -> List[str]:
        # -j = JSON output, one -TAG flag per requested field, file last
        return [self.executable, "-j", *(f"-{field}" for field in fields), str(path)]

    def fetch(self, path: Path, fields: List[str]) -> List[Dict[str, Any]]:
        """
        Runs exiftool once for a single file.

        Returns:
            The decoded JSON array (one object per file).

        Raises:
            MetadataExtractionError: exiftool could not be run, exited non-zero,
            or printed something that is not a JSON array.
        """
        cmd = self.build_command(path, fields)
        try:
            proc = subprocess.run(cmd, capture_output=True, text=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            raise MetadataExtractionError(f"exiftool timed out after {self.timeout}s")
        except OSError as e:
            raise MetadataExtractionError(f"could not run {self.executable}: {e}") from e

        if proc.returncode != 0:
            raise MetadataExtractionError(
                f"exiftool exited with status {proc.returncode}: {proc.stderr.strip()}"
            )

        try:
            data = json.loads(proc.stdout)
        except json.JSONDecodeError as e:
            raise MetadataExtractionError(f"invalid JSON from exiftool: {e}") from e

        if not isinstance(data, list):
            raise MetadataExtractionError(f"expected a JSON array, got {type(data).__name__}")

        return data


class MetadataExtractor:
    """
    Turns exiftool output for one file into an ExifRecord.

    `source` is anything with fetch(path, fields) -> list of dicts that raises
    MetadataExtractionError on failure; defaults to a real ExifToolRunner.
    """

    def __init__(self, source=None):
        self.source = source if source is not None else ExifToolRunner()

    def get_record(self, path: Path) -> ExifRecord:
        try:
            data_list = self.source.fetch(path, config.EXIF_FIELDS)
        except MetadataExtractionError as e:
            logging.error(f"exiftool error for {path}: {e}")
            return ExifRecord.placeholder()

        if not data_list:
            logging.error(f"exiftool returned no data for {path}")
            return ExifRecord.placeholder()

        # Single file per invocation; anything after the first entry is ignored
        tags = data_list[0]
        if not isinstance(tags, dict):
            logging.error(f"Unexpected exiftool entry for {path}: {tags!r}")
            return ExifRecord.placeholder()

        values = {}
        for field, attr in config.FIELD_ATTRS.items():
            values[attr] = self._stringify(tags.get(field))

        # CreateDate goes out as YYYY/MM/DD
        values['create_date'] = normalize_capture_date(tags.get('CreateDate'))

        record = ExifRecord(**values)
        logging.debug(f"EXIF data ({path}): {record.to_dict()}")
        return record

    def _stringify(self, value: Any) -> str:
        """Renders a JSON scalar the way it would print in the table."""
        if value is None:
            return config.SENTINEL
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

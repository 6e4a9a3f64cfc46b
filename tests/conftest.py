import pytest
from pathlib import Path
from exif_table.exceptions import MetadataExtractionError
from exif_table.models import ExifRecord


class FakeExifTool:
    """
    Stand-in for ExifToolRunner keyed by file name.
    Values are either the JSON array to return or an exception to raise.
    """
    def __init__(self, responses=None):
        self.responses = responses or {}
        self.calls = []

    def fetch(self, path, fields):
        self.calls.append((Path(path), list(fields)))
        result = self.responses.get(Path(path).name, [])
        if isinstance(result, Exception):
            raise result
        return result


class FakeScanner:
    """Returns a fixed list of paths instead of walking the disk."""
    def __init__(self, paths):
        self.paths = [Path(p) for p in paths]

    def find_jpeg_files(self, root):
        return list(self.paths)


def exif_entry(name, **overrides):
    """Typical exiftool -j object for one JPEG."""
    entry = {
        "SourceFile": f"./{name}",
        "FileName": name,
        "Model": "Canon EOS R5",
        "ShutterSpeedValue": "1/100",
        "FNumber": 2.8,
        "ISO": 100,
        "LensModel": "RF24-70mm F2.8 L IS USM",
        "CreateDate": "2025:04:16 10:20:30",
    }
    entry.update(overrides)
    return entry


@pytest.fixture
def failing_exiftool():
    return FakeExifTool({"b.jpg": MetadataExtractionError("exiftool exited with status 1: boom")})


@pytest.fixture
def sample_record():
    return ExifRecord(
        create_date="2025/04/16",
        file_name="a.jpg",
        camera_model="Canon EOS",
        shutter_speed="1/100",
        f_number="2.8",
        iso="100",
        lens_model="EF 24-70mm",
    )

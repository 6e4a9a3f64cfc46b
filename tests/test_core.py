import io
import time
import pytest
from pathlib import Path
from exif_table.core import ExifTableApp
from exif_table.metadata.extract import MetadataExtractor
from exif_table.models import ExifRecord
from conftest import FakeExifTool, FakeScanner, exif_entry


def _app(paths, responses):
    fake = FakeExifTool(responses)
    return ExifTableApp(scanner=FakeScanner(paths), extractor=MetadataExtractor(fake)), fake


def test_run_writes_table_in_discovery_order():
    paths = ["/img/c.jpg", "/img/a.jpg"]
    app, fake = _app(paths, {
        "c.jpg": [exif_entry("c.jpg")],
        "a.jpg": [exif_entry("a.jpg", Model="Nikon Z6", CreateDate="2021:07:04 09:00:00")],
    })
    out = io.StringIO()

    records = app.run(Path("/img"), delimiter=",", out=out)

    lines = out.getvalue().split("\n")
    assert lines[0].startswith("Create Date,File Name")
    assert lines[1].startswith("2025/04/16,c.jpg,Canon EOS R5")
    assert lines[2].startswith("2021/07/04,a.jpg,Nikon Z6")
    assert lines[3] == ""  # single trailing newline after the document
    assert [c[0] for c in fake.calls] == [Path(p) for p in paths]
    assert len(records) == 2


def test_one_failing_file_is_sentineled_in_place(failing_exiftool):
    failing_exiftool.responses.update({
        "a.jpg": [exif_entry("a.jpg")],
        "c.jpg": [exif_entry("c.jpg")],
    })
    app = ExifTableApp(
        scanner=FakeScanner(["/img/a.jpg", "/img/b.jpg", "/img/c.jpg"]),
        extractor=MetadataExtractor(failing_exiftool),
    )
    out = io.StringIO()

    records = app.run(Path("/img"), out=out)

    assert records[0].file_name == "a.jpg"
    assert records[1] == ExifRecord.placeholder()
    assert records[2].file_name == "c.jpg"
    assert out.getvalue().split("\n")[2] == "none,none,none,none,none,none,none"


def test_no_files_found_writes_nothing(caplog):
    app, fake = _app([], {})
    out = io.StringIO()

    records = app.run(Path("/empty"), out=out)

    assert records == []
    assert out.getvalue() == ""
    assert fake.calls == []
    assert "No JPG files found" in caplog.text


def test_duplicate_paths_are_fetched_each_time():
    app, fake = _app(["/img/a.jpg", "/img/a.jpg"], {"a.jpg": [exif_entry("a.jpg")]})

    records = app.run(Path("/img"), out=io.StringIO())

    assert len(records) == 2
    assert len(fake.calls) == 2


def test_tsv_delimiter_is_used():
    app, _ = _app(["/img/a.jpg"], {"a.jpg": [exif_entry("a.jpg")]})
    out = io.StringIO()

    app.run(Path("/img"), delimiter="\t", out=out)

    assert out.getvalue().split("\n")[0].split("\t")[0] == "Create Date"


class SlowFirstExtractor:
    """Earlier files finish last, so completion order differs from input order."""
    def get_record(self, path):
        delay = {"a.jpg": 0.05, "b.jpg": 0.02}.get(path.name, 0)
        time.sleep(delay)
        return ExifRecord(file_name=path.name)


@pytest.mark.parametrize("workers", [1, 3, 50])
def test_collect_keeps_input_order(workers):
    files = [Path(f"/img/{n}.jpg") for n in ("a", "b", "c", "d")]
    app = ExifTableApp(scanner=FakeScanner(files), extractor=SlowFirstExtractor())

    records = app.collect(files, max_workers=workers)

    assert [r.file_name for r in records] == ["a.jpg", "b.jpg", "c.jpg", "d.jpg"]

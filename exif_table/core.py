import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, TextIO

from tqdm import tqdm

from .metadata.extract import MetadataExtractor
from .models import ExifRecord
from .reporting import format_table
from .scanning.filesystem import DiskScanner
from . import config

class ExifTableApp:
    def __init__(self,
                 scanner: Optional[DiskScanner] = None,
                 extractor: Optional[MetadataExtractor] = None):
        self.scanner = scanner or DiskScanner()
        self.extractor = extractor or MetadataExtractor()

    def collect(self, files: List[Path], max_workers: int = 1) -> List[ExifRecord]:
        """
        Fetches one ExifRecord per path, in the same order as `files`.

        Args:
            max_workers: >1 runs exiftool in a thread pool. pool.map keeps
                         results in input order, not completion order.
        """
        max_workers = max(1, min(max_workers, config.MAX_WORKERS))

        if max_workers == 1:
            return [self.extractor.get_record(path)
                    for path in tqdm(files, desc="Reading EXIF", disable=None)]

        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(tqdm(pool.map(self.extractor.get_record, files),
                             total=len(files), desc="Reading EXIF", disable=None))

    def run(self,
            image_dir: Path,
            delimiter: str = ",",
            out: Optional[TextIO] = None,
            max_workers: int = 1,
            escape: bool = False) -> List[ExifRecord]:
        """
        Executes the full pipeline:
        1. Discover JPGs under image_dir
        2. Fetch EXIF per file
        3. Write the table to `out` (stdout by default)

        Returns the records written (empty if nothing was found).
        """
        logging.debug(f"Image directory: {image_dir}")

        # --- Step 1: Discovery ---
        jpg_files = self.scanner.find_jpeg_files(image_dir)
        if not jpg_files:
            logging.warning(f"No JPG files found in {image_dir}")
            return []

        logging.debug(f"JPG files: {[str(p) for p in jpg_files]}")

        # --- Step 2: Extraction ---
        records = self.collect(jpg_files, max_workers=max_workers)

        # --- Step 3: Output ---
        document = format_table(records, delimiter, escape=escape)
        if out is None:
            print(document)
        else:
            out.write(document + "\n")

        logging.info(f"Wrote {len(records)} rows.")
        return records

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Mapping, Optional

from . import config
from .core import ExifTableApp
from .exceptions import ConfigurationError
from .metadata.extract import ExifToolRunner, MetadataExtractor
from .reporting import resolve_delimiter

def setup_logging(verbose: bool, log_file: Optional[Path] = None):
    """Diagnostics go to stderr (and optionally a file); stdout carries only the table."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )

def parse_args(argv=None):
    p = argparse.ArgumentParser(description="EXIF Table: list JPEG metadata as CSV/TSV")

    p.add_argument("--dir", type=Path, default=None,
                   help=f"Image directory to scan (default: ${config.DIR_ENV_VAR})")
    p.add_argument("--format", default=config.DEFAULT_FORMAT,
                   help="Output format: csv (default) or tsv")
    p.add_argument("-v", "--verbose", "--debug", dest="debug", action="store_true",
                   help="Enable debug logging")

    p.add_argument("--workers", type=int, default=1,
                   help=f"Parallel exiftool processes (1-{config.MAX_WORKERS}, default: 1)")
    p.add_argument("--escape", action="store_true",
                   help="Quote values containing the delimiter, quotes or newlines")
    p.add_argument("--exiftool", default=None,
                   help=f"exiftool executable (default: ${config.EXIFTOOL_ENV_VAR} or '{config.EXIFTOOL_BIN}')")
    p.add_argument("--timeout", type=float, default=None, help="Per-file exiftool timeout in seconds")
    p.add_argument("--log-file", type=Path, default=None, help="Also write diagnostics to this file")

    return p.parse_args(argv)

def resolve_image_dir(dir_arg: Optional[Path], environ: Optional[Mapping[str, str]] = None) -> Path:
    """--dir wins; otherwise fall back to the environment variable."""
    environ = os.environ if environ is None else environ
    if dir_arg:
        return dir_arg.resolve()

    env_dir = environ.get(config.DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).resolve()

    raise ConfigurationError(
        f"No image directory given. Use --dir or set {config.DIR_ENV_VAR}."
    )

def main(argv=None):
    args = parse_args(argv)

    # 1. Setup
    setup_logging(args.debug, args.log_file)

    try:
        image_dir = resolve_image_dir(args.dir)
    except ConfigurationError as e:
        logging.error(str(e))
        sys.exit(1)

    # 2. Config
    delimiter = resolve_delimiter(args.format)
    executable = args.exiftool or os.environ.get(config.EXIFTOOL_ENV_VAR) or config.EXIFTOOL_BIN
    extractor = MetadataExtractor(ExifToolRunner(executable, timeout=args.timeout))

    # 3. Execution
    app = ExifTableApp(extractor=extractor)

    try:
        app.run(image_dir, delimiter=delimiter, max_workers=args.workers, escape=args.escape)
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        sys.exit(1)

if __name__ == "__main__":
    main()

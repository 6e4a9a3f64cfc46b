import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Set

from .. import config

class DiskScanner:
    def find_jpeg_files(self, root: Path) -> List[Path]:
        """
        Returns every JPEG under root, in traversal order.
        Unreadable directories are skipped, so the result may be partial.
        """
        files = list(self.iter_files(root))
        logging.debug(f"Found {len(files)} JPG files under {root}")
        return files

    def iter_files(self, root: Path, exts: Optional[Set[str]] = None) -> Iterator[Path]:
        """Depth-first walker using os.scandir for speed."""
        exts = exts if exts is not None else config.JPEG_EXTS
        stack = [root]
        while stack:
            current = stack.pop()

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                # PermissionError / FileNotFoundError are both OSError
                logging.warning(f"Cannot read directory {current}: {e}")
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name)

            dirs = []
            files = []
            for e in entries:
                try:
                    if e.is_dir(follow_symlinks=False):
                        dirs.append(Path(e.path))
                    elif e.is_file(follow_symlinks=False):
                        files.append(Path(e.path))
                except OSError as err:
                    logging.warning(f"Cannot stat {e.path}: {err}")

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                if f.suffix in exts:
                    yield f

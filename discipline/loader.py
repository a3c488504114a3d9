# discipline/loader.py

import logging
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional

from .pdf_parser import extract_text

logger = logging.getLogger(__name__)

TEXT_SUFFIXES = {".txt", ".md"}


class DocumentUnavailable(RuntimeError):
    """The handbook could not be found or its text could not be extracted."""


@lru_cache(maxsize=8)
def _read_handbook(path: str, mtime_ns: int) -> str:
    # mtime_ns is part of the cache key so an edited file is read again.
    source = Path(path)
    if source.suffix.lower() in TEXT_SUFFIXES:
        return source.read_text(encoding="utf-8")
    return extract_text(source.read_bytes())


class HandbookLoader:
    def __init__(self, candidates: Iterable[Path]) -> None:
        self.candidates: List[Path] = [Path(c) for c in candidates]

    def resolve_path(self) -> Optional[Path]:
        for candidate in self.candidates:
            if candidate.is_file():
                return candidate
        return None

    def load(self) -> str:
        path = self.resolve_path()
        if path is None:
            raise DocumentUnavailable(
                "Student handbook not found (looked in: "
                + ", ".join(str(c) for c in self.candidates)
                + ")"
            )
        try:
            text = _read_handbook(str(path), path.stat().st_mtime_ns)
        except Exception as e:
            raise DocumentUnavailable(f"Failed to read student handbook at {path}: {e}") from e
        logger.info("Loaded student handbook from %s (%d chars)", path, len(text))
        return text

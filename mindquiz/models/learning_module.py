"""
Learning module shown before a quiz: an ordered sequence of image pages.

Only page sequencing lives here; displaying the images is left to whatever
front end drives the module.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from ..config import config


class LearningModule:
    """
    Pages of learning material, navigated one at a time.

    Pages are the PNG files of a directory sorted by file name. A missing
    directory yields an empty module.
    """

    def __init__(self, pages_dir: Optional[Path | str] = None):
        """
        Initialize learning module.

        Args:
            pages_dir: Directory of page images (default: config.paths.information_dir)
        """
        self.pages_dir = Path(pages_dir) if pages_dir else config.paths.information_dir
        self.pages: List[Path] = self._load_pages()
        self.current_page = 0

    def _load_pages(self) -> List[Path]:
        if not self.pages_dir.is_dir():
            return []
        files = [p for p in self.pages_dir.iterdir() if p.suffix.lower() == ".png"]
        return sorted(files, key=lambda p: p.name)

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def current(self) -> Optional[Path]:
        """Path of the page being shown, None when there are no pages."""
        return self.pages[self.current_page] if self.pages else None

    @property
    def progress(self) -> float:
        """Fraction of the way through the module (0.0 to 1.0)."""
        if self.total_pages <= 1:
            return 0.0
        return self.current_page / (self.total_pages - 1)

    @property
    def can_go_back(self) -> bool:
        return self.current_page > 0

    @property
    def is_last_page(self) -> bool:
        """True on the final page, or when there is nothing to show."""
        return self.current_page >= self.total_pages - 1

    def next_page(self) -> Optional[Path]:
        if self.current_page < self.total_pages - 1:
            self.current_page += 1
        return self.current

    def previous_page(self) -> Optional[Path]:
        if self.current_page > 0:
            self.current_page -= 1
        return self.current

    def reset(self) -> None:
        self.current_page = 0

from .base import HelperSource, load_helpers
from .sheetbest import SheetBestSource

__all__ = ["HelperSource", "SheetBestSource", "load_helpers"]

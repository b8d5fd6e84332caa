"""
Watermark Worker - Async Watermark Compositing
==============================================
QThread worker for adding, removing or extracting a watermark.

Modes:
- add:     lay the watermark onto the base raster at (x, y)
- remove:  take a previously added watermark back off at (x, y)
- extract: recover a watermark rendered over a white background
"""

import logging
from dataclasses import dataclass
from typing import Optional

from PyQt6.QtCore import QThread, pyqtSignal

from pixelwarp.core.raster import Raster
from pixelwarp.core.region import (
    add_watermark, remove_watermark, extract_from_white_background
)

logger = logging.getLogger(__name__)

WATERMARK_MODES = ("add", "remove", "extract")


@dataclass
class WatermarkConfig:
    """Configuration for a watermark operation."""
    base: Raster
    mode: str = "add"
    watermark: Optional[Raster] = None  # Required for add / remove
    x: int = 0
    y: int = 0


@dataclass
class WatermarkResult:
    """Result of a watermark operation."""
    mode: str
    output: Optional[Raster] = None
    success: bool = False
    error_message: str = ""


class WatermarkWorker(QThread):
    """
    Worker thread for watermark compositing.

    Signals:
        result_ready(WatermarkResult): Emitted with the outcome
        error(str): Emitted on errors
    """

    result_ready = pyqtSignal(object)  # WatermarkResult
    error = pyqtSignal(str)  # Error message

    def __init__(self, config: WatermarkConfig, parent=None):
        super().__init__(parent)
        self.config = config

    def _validate(self):
        if self.config.mode not in WATERMARK_MODES:
            raise ValueError(
                f"Invalid watermark mode '{self.config.mode}' "
                f"(expected one of: {', '.join(WATERMARK_MODES)})"
            )
        if self.config.mode != "extract" and self.config.watermark is None:
            raise ValueError("A watermark raster is required to add or remove a watermark")

    def _process(self) -> Raster:
        cfg = self.config
        if cfg.mode == "add":
            return add_watermark(cfg.base, cfg.watermark, cfg.x, cfg.y)
        if cfg.mode == "remove":
            return remove_watermark(cfg.base, cfg.watermark, cfg.x, cfg.y)
        return extract_from_white_background(cfg.base)

    def run(self):
        """Main worker execution."""
        result = WatermarkResult(mode=self.config.mode)

        try:
            self._validate()
            result.output = self._process()
            result.success = True

        except ValueError as e:
            result.success = False
            result.error_message = str(e)
            self.error.emit(str(e))

        except Exception as e:
            result.success = False
            result.error_message = f"Watermark operation failed: {str(e)}"
            logger.exception("Watermark %s failed", self.config.mode)
            self.error.emit(result.error_message)

        self.result_ready.emit(result)

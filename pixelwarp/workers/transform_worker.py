"""
Transform Worker - Async Filter Execution
=========================================
QThread worker running one named filter on one raster.

Workflow:
1. Validate the filter name
2. Emit started_transform with the filter name
3. Run the filter from the registry
4. Emit result_ready with a TransformResult (success or failure)
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from PyQt6.QtCore import QThread, pyqtSignal

from pixelwarp.core.filters import FILTERS, apply_filter
from pixelwarp.core.raster import Raster

logger = logging.getLogger(__name__)


@dataclass
class TransformConfig:
    """Configuration for a single filter run."""
    source: Raster
    filter_name: str
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TransformResult:
    """Result of a filter run."""
    filter_name: str
    output: Optional[Raster] = None
    success: bool = False
    cancelled: bool = False
    error_message: str = ""


class TransformWorker(QThread):
    """
    Worker thread applying a filter off the calling thread.

    Signals:
        started_transform(str): Emitted when the filter starts (filter name)
        result_ready(TransformResult): Emitted with the outcome
        error(str): Emitted on errors
    """

    # Signals
    started_transform = pyqtSignal(str)  # filter name
    result_ready = pyqtSignal(object)  # TransformResult
    error = pyqtSignal(str)  # Error message

    def __init__(self, config: TransformConfig, parent=None):
        """
        Initialize the transform worker.

        Args:
            config: TransformConfig describing the job.
            parent: Optional parent QObject.
        """
        super().__init__(parent)
        self.config = config
        self._is_cancelled = False

    def cancel(self):
        """
        Request cancellation.

        Filters are not interruptible; a cancelled job discards its
        output instead of reporting it.
        """
        self._is_cancelled = True

    def run(self):
        """
        Main worker execution.

        Applies the filter and emits the result.
        """
        name = self.config.filter_name
        result = TransformResult(filter_name=name)

        try:
            if name not in FILTERS:
                raise ValueError(f"Unknown filter: {name}")

            if self._is_cancelled:
                result.cancelled = True
                return

            self.started_transform.emit(name)

            output = apply_filter(name, self.config.source, **self.config.params)

            if self._is_cancelled:
                result.cancelled = True
                return

            result.output = output
            result.success = True

        except (ValueError, TypeError) as e:
            result.success = False
            result.error_message = str(e)
            logger.warning("Filter %s rejected its parameters: %s", name, e)
            self.error.emit(str(e))

        except Exception as e:
            result.success = False
            result.error_message = f"Transform failed: {str(e)}"
            logger.exception("Filter %s failed", name)
            self.error.emit(result.error_message)

        finally:
            self.result_ready.emit(result)

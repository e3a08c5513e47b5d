"""
Stage-oriented debug logging for the pyimdct transforms.
Each entry records where it was emitted from, a summary of the buffer at that
stage and any extra context, so intermediate results of the IMDCT pipeline can
be compared line by line against another implementation.
"""

import time
import inspect
import os
import numpy as np
from typing import List, Union, Optional, Any


class TransformDebugLogger:
    """
    Debug logger for IMDCT processing stages.
    Writes one line per stage with source location, value summary and metadata.
    """

    def __init__(self, log_file: Optional[str] = None, enabled: bool = False):
        self.log_file = log_file
        self.enabled = enabled and log_file is not None
        if self.enabled:
            # Truncate and write header
            with open(log_file, 'w') as f:
                f.write(f"# pyimdct Debug Log - {time.strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("# Format: [TIMESTAMP][PYIMDCT][FILE:LINE][FUNC][N{size}] STAGE: data_type=values |META: ... |SRC: ...\n")
                f.write("#\n")

    def log_stage(self, stage: str, data_type: str, values: Union[List, np.ndarray, float, int],
                  size: int = 0, **context) -> None:
        """
        Log a processing stage with metadata.

        Args:
            stage: Processing stage name (e.g. 'IMDCT_PRE_ROTATION', 'IMDCT_OUTPUT')
            data_type: Kind of data being logged (e.g. 'samples', 'coeffs')
            values: The data at this stage
            size: Transform size the stage belongs to
            **context: Additional key=value context (engine, scale, ...)
        """
        if not self.enabled:
            return

        # Report the first frame outside this module (skips log_debug)
        caller = inspect.currentframe().f_back
        while caller.f_back is not None and caller.f_code.co_filename == __file__:
            caller = caller.f_back
        filename = os.path.basename(caller.f_code.co_filename)
        line_no = caller.f_lineno
        func_name = caller.f_code.co_name

        is_scalar = isinstance(values, (int, float))
        values_array = np.atleast_1d(np.asarray(values, dtype=np.float64))
        count = values_array.size

        if count > 0:
            min_val = float(np.min(values_array))
            max_val = float(np.max(values_array))
            sum_val = float(np.sum(values_array))
            mean_val = float(np.mean(values_array))
            nonzero_count = int(np.count_nonzero(values_array))
        else:
            min_val = max_val = sum_val = mean_val = 0.0
            nonzero_count = 0

        if is_scalar:
            values_str = f"{values:.6f}"
        elif count <= 10:
            values_str = f"[{','.join(f'{v:.6f}' for v in values_array)}]"
        else:
            # First and last 5 values only
            head = ','.join(f'{v:.6f}' for v in values_array[:5])
            tail = ','.join(f'{v:.6f}' for v in values_array[-5:])
            values_str = f"[{head}...{tail}]"

        context_str = " ".join(f"{key}={value}" for key, value in context.items())
        timestamp = time.strftime('%Y-%m-%dT%H:%M:%S.') + f"{int(time.time() * 1000000) % 1000000:06d}"

        log_entry = (
            f"[{timestamp}][PYIMDCT][{filename}:{line_no}][{func_name}]"
            f"[N{size}] {stage}: "
            f"{data_type}={values_str} "
            f"|META: size={count} range=[{min_val:.6f},{max_val:.6f}] "
            f"sum={sum_val:.6f} mean={mean_val:.6f} nonzero={nonzero_count} "
            f"|SRC: {context_str}\n"
        )

        with open(self.log_file, 'a') as f:
            f.write(log_entry)

    def enable(self):
        """Enable logging. Has no effect until a log file is set."""
        self.enabled = self.log_file is not None

    def disable(self):
        """Disable logging."""
        self.enabled = False


# Global logger instance, disabled until enable_debug_logging() is called
debug_logger = TransformDebugLogger()


def log_debug(stage: str, data_type: str, values: Any, **kwargs) -> None:
    """
    Convenience function for logging with the global logger instance.

    Usage:
        log_debug("IMDCT_OUTPUT", "samples", dst, size=256, scale=0.0625)
    """
    debug_logger.log_stage(stage, data_type, values, **kwargs)


def enable_debug_logging(log_file: str = "pyimdct_debug.log") -> None:
    """
    Enable debug logging to the given file, truncating it.
    """
    global debug_logger
    debug_logger = TransformDebugLogger(log_file, enabled=True)


def disable_debug_logging() -> None:
    """
    Disable debug logging.
    """
    debug_logger.disable()

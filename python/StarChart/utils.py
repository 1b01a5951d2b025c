import time
import logging
from pathlib import Path

starchart_dir = Path(__file__).resolve().parent
python_dir = starchart_dir.parent
default_logconf = python_dir / "starchart_logconf.json"


class Timer:
    """
    Time multiple code blocks using a context manager.
    Usage:
        with Timer("grid layer"):
            group = GridLayer().render(context)
    """

    def __init__(self, name, logger_name: str = "StarChart.Timer"):
        self.name = name
        self.start_time = None
        self.elapsed = 0.0
        self.logger = logging.getLogger(logger_name)

    def __enter__(self):
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.elapsed = time.perf_counter() - self.start_time
        self.logger.debug("%s: %.6f seconds", self.name, self.elapsed)

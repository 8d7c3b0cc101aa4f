from __future__ import annotations

import logging
import sys
from dataclasses import dataclass


LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


@dataclass(frozen=True)
class GraphConfig:
    allow_self_loops: bool = False
    allow_duplicate_edges: bool = True


def setup_logging(level: int | str = logging.INFO) -> None:
    """Attach a single stdout handler to the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

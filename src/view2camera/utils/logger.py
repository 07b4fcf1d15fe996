"""
Diagnostic side channel for the view-to-camera stage.

A logger is passed down the traversal. It receives stage markers for every
position and model visited plus snapshots of each transformed model's lists.
It returns nothing and has no influence on the transformed trees.

Output is off unless requested, either per call or through the V2C_DEBUG
environment variable.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, TextIO
import os

DEBUG_ENV_VAR = "V2C_DEBUG"


def is_debug_enabled() -> bool:
    """True when V2C_DEBUG is set to anything but '', '0' or 'false'."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """``print`` that only writes while debugging is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


class PipelineLogger(ABC):
    """Base sink; list snapshots are formatted here and sent to :meth:`message`."""
    
    @abstractmethod
    def message(self, text: str) -> None:
        pass
    
    def vertex_list(self, prefix: str, model) -> None:
        self.message(f"{prefix}: Model: {model.name}")
        for i, v in enumerate(model.vertex_list):
            self.message(f"{prefix}: vIndex = {i:3d}, (x, y, z) = ({v.x: .6f} {v.y: .6f} {v.z: .6f})")
    
    def color_list(self, prefix: str, model) -> None:
        self.message(f"{prefix}: Model: {model.name}")
        for i, c in enumerate(model.color_list):
            self.message(f"{prefix}: cIndex = {i:3d}, {c}")
    
    def primitive_list(self, prefix: str, model) -> None:
        self.message(f"{prefix}: Model: {model.name}")
        if not model.primitive_list:
            self.message(f"{prefix}: []")
        for p in model.primitive_list:
            self.message(f"{prefix}: {p}")


class NullLogger(PipelineLogger):
    """Discards everything."""
    
    def message(self, text: str) -> None:
        pass
    
    def vertex_list(self, prefix: str, model) -> None:
        pass
    
    def color_list(self, prefix: str, model) -> None:
        pass
    
    def primitive_list(self, prefix: str, model) -> None:
        pass


class PrintLogger(PipelineLogger):
    """Prints every line, to stdout unless another stream is given."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
    
    def message(self, text: str) -> None:
        print(text, file=self.stream)


def get_logger(
    logger: Optional[PipelineLogger] = None,
    debug: Optional[bool] = None
) -> PipelineLogger:
    """
    Resolve the logger used by a transform call.
    
    Args:
        logger: Explicit sink; returned unchanged when given
        debug: Force debug output on/off; None defers to the environment
    
    Returns:
        ``logger``, else a PrintLogger when debugging, else a NullLogger
    """
    if logger is not None:
        return logger
    if debug is None:
        debug = is_debug_enabled()
    return PrintLogger() if debug else NullLogger()

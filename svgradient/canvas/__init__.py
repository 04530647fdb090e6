from .canvas import Bounds, Canvas, BlockCanvas, write_pixels, fill
from .array_canvas import ArrayCanvas
from .pil_canvas import PILCanvas

__all__ = [
    "Bounds",
    "Canvas",
    "BlockCanvas",
    "write_pixels",
    "fill",
    "ArrayCanvas",
    "PILCanvas",
]

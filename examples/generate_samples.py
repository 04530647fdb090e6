"""Render the reference gradients to PNG files.

Run directly with:
    python examples/generate_samples.py [output_dir]
"""
import os
import sys

from svgradient import ColorNRGBA, PILCanvas, StopTable, draw_linear, draw_radial

DEFAULT_SIZE = (512, 512)

STOPS = StopTable.from_pairs(
    (0.0, ColorNRGBA((255, 0, 0, 255))),
    (0.5, ColorNRGBA((0, 255, 0, 16))),
    (1.0, ColorNRGBA((0, 0, 255, 255))),
)


def linear_gradient(x0: float, y0: float, x1: float, y1: float, fname: str) -> None:
    canvas = PILCanvas.new(*DEFAULT_SIZE)
    draw_linear(canvas, x0, y0, x1, y1, STOPS)
    canvas.image.save(fname)


def radial_gradient(cx: float, cy: float, r: float, fx: float, fy: float, fname: str) -> None:
    canvas = PILCanvas.new(*DEFAULT_SIZE)
    draw_radial(canvas, cx, cy, r, fx, fy, STOPS)
    canvas.image.save(fname)


def main(out_dir: str = ".") -> None:
    os.makedirs(out_dir, exist_ok=True)
    linear_gradient(0.1, 0.1, 0.9, 0.1, os.path.join(out_dir, "hlinear.png"))
    linear_gradient(0.1, 0.1, 0.1, 0.9, os.path.join(out_dir, "vlinear.png"))
    linear_gradient(0.1, 0.1, 0.9, 0.9, os.path.join(out_dir, "linear.png"))
    radial_gradient(0.5, 0.5, 0.5, 0.5, 0.5, os.path.join(out_dir, "simpleradial.png"))
    radial_gradient(0.5, 0.5, 0.5, 0.7, 0.7, os.path.join(out_dir, "focusradial.png"))


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else ".")

class InvalidBoundsError(ValueError):
    """
    Raised when a linear gradient's start lies after its end on an axis.

    Attributes:
        axis: "x" or "y"
        start: The offending start coordinate (as passed by the caller)
        end: The offending end coordinate (as passed by the caller)
    """

    def __init__(self, axis: str, start: float, end: float) -> None:
        self.axis = axis
        self.start = start
        self.end = end
        super().__init__(f"invalid bounds {axis}0({start:f})>{axis}1({end:f})")


def check_bounds(axis: str, start: float, end: float) -> None:
    if start > end:
        raise InvalidBoundsError(axis, start, end)

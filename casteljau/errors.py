"""
Error kinds raised by the casteljau package.
"""


class InvalidArgument(ValueError):
    """
    Raised when a call's arguments cannot describe a valid reduction:
    an empty control polygon, a blossom parameter count different from
    ``len(points) - 1``, or a subdivision index outside ``[0, len(points))``.

    Detected before any interpolation work starts.
    """

"""Exceptions raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for every error raised by this package."""


class RenderConfigError(PathTracerError, ValueError):
    """Render parameters or image dimensions are unusable."""


class BVHConstructionError(PathTracerError, RuntimeError):
    """The hierarchy cannot be built over the given primitives."""


class SceneError(PathTracerError, KeyError):
    """An unknown scene was requested."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""

"""Vector and quaternion math, bounding boxes, transforms, input state, containers, strings and interned names for a small 3D engine."""

__version__ = "0.1.0"

__all__ = [
    "box",
    "containers",
    "core",
    "input",
    "mathutil",
    "memory",
    "names",
    "quat",
    "strings",
    "transform",
    "vector",
]
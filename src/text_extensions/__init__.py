"""Line-oriented text commands over an abstract editor host."""

__all__ = [
    "actions",
    "buffer",
    "lineset",
    "runtime",
]

__version__ = "0.1.0"

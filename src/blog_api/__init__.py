"""In-memory blog post API served over HTTP."""

__version__ = "0.1.0"

"""Image filters, background image processing, colour generators, table and video list models, and a back-key event filter."""

__version__ = "0.1.0"
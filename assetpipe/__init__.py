"""Front-end asset build pipeline with web-font manifest generation."""

__version__ = "0.1.0"

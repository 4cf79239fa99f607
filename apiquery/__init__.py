"""Read access to code repository info stored in the CodeCC defect database."""

__version__ = "1.0.0"

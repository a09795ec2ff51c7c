"""Core printing package."""
from .classifier import DocumentKind, DocumentTypeSpec, classify
from .errors import WpsPrintError

__all__ = ["DocumentKind", "DocumentTypeSpec", "classify", "WpsPrintError"]

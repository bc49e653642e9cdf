"""Unified error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``provider_catalog.base.errors_parts``.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.catalog_error import CatalogError
from .errors_parts.classification import classify_exception, code_for_status

__all__ = ["ErrorCode", "CatalogError", "classify_exception", "code_for_status"]

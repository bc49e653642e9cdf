"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `provider_catalog.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .catalog_error import CatalogError
from .classification import classify_exception, code_for_status

__all__ = ["ErrorCode", "CatalogError", "classify_exception", "code_for_status"]

from __future__ import annotations

import sqlite3
import types

import httpx
import requests

from provider_catalog.base.errors import (
    CatalogError,
    ErrorCode,
    classify_exception,
    code_for_status,
)


def test_classify_catalog_error_passthrough():
    e = CatalogError(code=ErrorCode.AUTH, message="nope", source="generation")
    assert classify_exception(e) is ErrorCode.AUTH  # nosec B101 - assert is appropriate in unit tests


def test_classify_timeouts_before_transport():
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(requests.Timeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    # ConnectTimeout is both a timeout and a connection error in requests.
    assert classify_exception(requests.ConnectTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101


def test_classify_transport_failures():
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.UNAVAILABLE  # nosec B101
    assert classify_exception(requests.ConnectionError("dns")) is ErrorCode.UNAVAILABLE  # nosec B101


def test_classify_http_status_mapping():
    e1 = types.SimpleNamespace(status_code=404)
    assert classify_exception(e1) is ErrorCode.NOT_FOUND  # nosec B101
    e2 = types.SimpleNamespace(response=types.SimpleNamespace(status_code=429))
    assert classify_exception(e2) is ErrorCode.RATE_LIMIT  # nosec B101


def test_classify_storage_and_unknown():
    assert classify_exception(sqlite3.OperationalError("locked")) is ErrorCode.STORAGE  # nosec B101
    assert classify_exception(ValueError("random")) is ErrorCode.UNKNOWN  # nosec B101


def test_code_for_status_unlisted_values():
    assert code_for_status(401) is ErrorCode.AUTH  # nosec B101
    assert code_for_status(503) is ErrorCode.UNAVAILABLE  # nosec B101
    assert code_for_status(599) is ErrorCode.SERVER_ERROR  # nosec B101
    assert code_for_status(418) is ErrorCode.UNKNOWN  # nosec B101


def test_catalog_error_str_includes_source_and_model():
    e = CatalogError(ErrorCode.VALIDATION, "bad name", source="generation", model_id="gpt-4")
    assert str(e) == "generation:gpt-4 validation: bad name"  # nosec B101
    anonymous = CatalogError(ErrorCode.STORAGE, "disk full", source="cache")
    assert str(anonymous) == "cache:- storage: disk full"  # nosec B101

from __future__ import annotations

import pickle
import types

from backoffice_client.base.errors import ApiError, is_api_error


def test_is_api_error_accepts_instances_and_complete_mappings():
    assert is_api_error(ApiError(message="nope", code="NOT_FOUND", status=404))
    assert is_api_error({"message": "Test error", "code": "TEST_ERROR", "status": 400})
    assert is_api_error(types.SimpleNamespace(message="m", code="c", status=500))


def test_is_api_error_rejects_non_objects():
    assert not is_api_error(None)
    assert not is_api_error("error")
    assert not is_api_error(42)


def test_is_api_error_requires_every_field():
    assert not is_api_error({"code": "TEST", "status": 400})
    assert not is_api_error({"message": "m", "status": 400})
    assert not is_api_error({"message": "m", "code": "TEST"})
    assert not is_api_error(ValueError("plain"))


def test_to_dict_omits_missing_details():
    err = ApiError(message="m", code="CONFLICT", status=409)
    assert err.to_dict() == {"message": "m", "code": "CONFLICT", "status": 409}
    err = ApiError(message="m", code="CONFLICT", status=409, details={"id": 1})
    assert err.to_dict()["details"] == {"id": 1}


def test_api_error_behaves_like_an_exception():
    err = ApiError(message="Vehicle not found", code="NOT_FOUND", status=404, details={"id": 3})
    assert err.args == ("Vehicle not found",)
    assert err in {err}
    assert err != ApiError(message="Vehicle not found", code="NOT_FOUND", status=404, details={"id": 3})

    restored = pickle.loads(pickle.dumps(err))
    assert isinstance(restored, ApiError)
    assert restored.to_dict() == err.to_dict()

"""Tests for tn_common.errors and tn_common.response."""

from src.tn_common.errors import AppError, ClockRegressionError, InvalidConfigurationError
from src.tn_common.response import error_response, success_response


class TestAppError:
    def test_base_error(self) -> None:
        err = AppError(code=6000, message="Generation failed")
        assert err.code == 6000
        assert err.message == "Generation failed"
        assert err.http_status == 500

    def test_is_exception(self) -> None:
        err = AppError(code=6000, message="test")
        assert isinstance(err, Exception)


class TestSpecificErrors:
    def test_invalid_configuration(self) -> None:
        err = InvalidConfigurationError("datacenter_id", 40, "between 0 and 31")
        assert err.code == 6001
        assert err.http_status == 500
        assert "datacenter_id" in err.message
        assert "40" in err.message
        assert "0 and 31" in err.message
        assert isinstance(err, AppError)

    def test_clock_regression(self) -> None:
        err = ClockRegressionError(current_ms=1000, last_ms=1250)
        assert err.code == 6002
        assert err.http_status == 503
        assert err.current_ms == 1000
        assert err.last_ms == 1250
        assert "250ms" in err.message
        assert isinstance(err, AppError)


class TestApiResponse:
    def test_success(self) -> None:
        resp = success_response({"tracking_numbers": ["US-NYC-000001-AAAAA"]}, request_id="req_1")
        assert resp.code == 0
        assert resp.message == "success"
        assert resp.data == {"tracking_numbers": ["US-NYC-000001-AAAAA"]}
        assert resp.request_id == "req_1"

    def test_error(self) -> None:
        resp = error_response(6002, "Clock moved backwards")
        assert resp.code == 6002
        assert resp.data is None
        assert resp.request_id == "req_unknown"

    def test_serialization(self) -> None:
        d = success_response({"a": 1}).model_dump()
        assert set(d) == {"code", "message", "data", "timestamp", "request_id"}

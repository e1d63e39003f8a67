"""
Unit tests for the request logging middleware.

This test suite covers:
- Timing header injection
- Request reporting to Logfire
- Slow request detection
- Error propagation
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from vendorlink.server.middleware import RequestLoggingMiddleware

MODULE = "vendorlink.server.middleware.request_logging"


def _mock_request(path: str = "/api/products") -> Request:
    request = AsyncMock(spec=Request)
    request.method = "GET"
    request.url.path = path
    request.state = MagicMock()
    return request


class TestRequestLoggingMiddleware:
    @pytest.mark.asyncio
    async def test_successful_request_is_timed_and_reported(self):
        """Test that the duration header is set and the request reported."""

        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log:
            response = await middleware.dispatch(_mock_request(), call_next)

        assert response.status_code == 200
        assert float(response.headers["X-Process-Time"]) >= 0
        assert mock_log.call_args.kwargs["path"] == "/api/products"
        assert mock_log.call_args.kwargs["status_code"] == 200

    @pytest.mark.asyncio
    async def test_slow_request_warns(self):
        """Test that requests slower than the threshold log a warning."""

        async def call_next(request):
            return Response(status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with (
            patch(f"{MODULE}.log_api_request"),
            patch(f"{MODULE}.logger") as mock_logger,
            patch(f"{MODULE}.SLOW_REQUEST_MS", -1),
        ):
            await middleware.dispatch(_mock_request(), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]

    @pytest.mark.asyncio
    async def test_exception_is_reported_and_reraised(self):
        """Test that failures are logged as 500 and propagate to the exception handlers."""

        async def call_next(request):
            raise RuntimeError("boom")

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch(f"{MODULE}.log_api_request") as mock_log, patch(f"{MODULE}.logger") as mock_logger:
            with pytest.raises(RuntimeError, match="boom"):
                await middleware.dispatch(_mock_request(), call_next)

        assert mock_log.call_args.kwargs["status_code"] == 500
        mock_logger.error.assert_called_once()

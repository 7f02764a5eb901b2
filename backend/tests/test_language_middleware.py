"""Tests for the language selector middleware.

Verifies that LanguageSelectorMiddleware resolves the language for every
request and advertises it in the response headers.
"""

from fastapi.testclient import TestClient

from main import app


client = TestClient(app, follow_redirects=False)


class TestLanguageHeaders:
    """Test language headers are present in responses."""

    def test_content_language_from_header(self) -> None:
        """Content-Language carries the resolved language."""
        response = client.get("/api/health", headers={"Accept-Language": "fr-FR"})
        assert response.headers.get("Content-Language") == "fr"

    def test_content_language_default(self) -> None:
        """Without preferences the default language is advertised."""
        response = client.get("/api/health")
        assert response.headers.get("Content-Language") == "en"

    def test_vary_header(self) -> None:
        """Caches must key on the preference sources."""
        response = client.get("/api/health")
        vary = response.headers.get("Vary", "")
        assert "Accept-Language" in vary
        assert "Cookie" in vary

    def test_headers_on_error_response(self) -> None:
        """Language headers are present even on 404 responses."""
        response = client.get(
            "/api/nonexistent-endpoint-12345", headers={"Accept-Language": "fr"}
        )
        assert response.status_code == 404
        assert response.headers.get("Content-Language") == "fr"

    def test_headers_on_redirect(self) -> None:
        """The root redirect advertises the language it redirects to."""
        response = client.get("/", params={"lang": "fr"})
        assert response.headers.get("Content-Language") == "fr"
        assert response.headers.get("location") == "/fr/"


class TestRequestState:
    """Test the resolution is exposed to routes via request.state."""

    def test_state_reaches_route(self) -> None:
        """Routes read the language resolved by the middleware."""
        response = client.get("/api/language", params={"lang": "en;q=0.1,fr"})
        assert response.json()["language"] == "fr"
        assert response.json()["source"] == "query"

    def test_correlation_id_preserved(self) -> None:
        """Language selection does not interfere with correlation IDs."""
        response = client.get(
            "/api/language", headers={"X-Correlation-ID": "abcd1234"}
        )
        assert response.headers.get("X-Correlation-ID") == "abcd1234"

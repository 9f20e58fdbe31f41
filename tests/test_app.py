# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from fastapi.testclient import TestClient

from gateway.api import create_app
from gateway.config import Settings


class TestLivenessAndEnvelope(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.client = TestClient(create_app(Settings()))

    @classmethod
    def tearDownClass(cls) -> None:
        cls.client.close()

    def test_root_reports_running(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"status": "ok", "message": "Backend is running"})

    def test_health_alias(self) -> None:
        resp = self.client.get("/api/health")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["status"], "ok")

    def test_unknown_route_uses_envelope(self) -> None:
        resp = self.client.get("/api/unknown")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json(), {"error": "Not Found"})

    def test_wrong_method_uses_envelope(self) -> None:
        resp = self.client.get("/api/ai")
        self.assertEqual(resp.status_code, 405)
        self.assertIn("error", resp.json())

    def test_malformed_json_is_client_fault(self) -> None:
        resp = self.client.post(
            "/api/ai",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json()["error"], "Invalid request body")


class TestCorsProfiles(unittest.TestCase):
    def test_strict_profile_allows_listed_origin(self) -> None:
        client = TestClient(create_app(Settings(cors_origins=("http://localhost:5500",))))
        resp = client.options(
            "/api/ai",
            headers={
                "Origin": "http://localhost:5500",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.headers.get("access-control-allow-origin"), "http://localhost:5500")
        client.close()

    def test_strict_profile_ignores_other_origins(self) -> None:
        client = TestClient(create_app(Settings(cors_origins=("http://localhost:5500",))))
        resp = client.get("/", headers={"Origin": "https://evil.example"})
        self.assertEqual(resp.status_code, 200)
        self.assertNotIn("access-control-allow-origin", resp.headers)

        resp = client.options(
            "/api/ai",
            headers={"Origin": "https://evil.example", "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(resp.status_code, 400)
        client.close()

    def test_strict_profile_rejects_unlisted_method(self) -> None:
        client = TestClient(create_app(Settings(cors_origins=("http://localhost:5500",))))
        resp = client.options(
            "/api/ai",
            headers={"Origin": "http://localhost:5500", "Access-Control-Request-Method": "DELETE"},
        )
        self.assertEqual(resp.status_code, 400)
        client.close()

    def test_open_profile_allows_any_origin(self) -> None:
        client = TestClient(create_app(Settings(cors_origins=("*",))))
        resp = client.get("/", headers={"Origin": "https://anywhere.example"})
        self.assertEqual(resp.headers.get("access-control-allow-origin"), "*")
        client.close()


if __name__ == "__main__":
    unittest.main()

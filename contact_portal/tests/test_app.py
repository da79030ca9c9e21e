import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient

from contact_portal.core.config import settings
from contact_portal.core.database import session_manager
from contact_portal.main import app


class AppTests(unittest.TestCase):
    def test_test_route(self):
        with TestClient(app) as client:
            response = client.get("/test")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.text, "Server is running and routes are set up!")
        self.assertTrue(response.headers["content-type"].startswith("text/plain"))

    def test_cors_allows_any_origin(self):
        with TestClient(app) as client:
            response = client.get("/test", headers={"Origin": "http://example.org"})
        self.assertEqual(response.headers["access-control-allow-origin"], "*")

    @patch.object(settings, "DATABASE_URL", "sqlite+aiosqlite:////nonexistent-dir/portal.db")
    def test_unreachable_database_fails_per_request(self):
        with TestClient(app) as client:
            self.assertFalse(session_manager.connected)

            self.assertEqual(client.get("/test").status_code, 200)

            response = client.get("/api/contacts")
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.json()["error"], "Failed to fetch contacts")
            self.assertTrue(response.json()["details"])

            response = client.post(
                "/signup",
                json={"username": "ada", "email": "ada@example.com", "password": "pw"},
            )
            self.assertEqual(response.status_code, 500)
            self.assertEqual(response.json()["message"], "Error creating user")


if __name__ == "__main__":
    unittest.main()

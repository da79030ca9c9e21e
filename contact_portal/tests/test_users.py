import unittest
import uuid

from fastapi.testclient import TestClient

from contact_portal.core.security import verify_password
from contact_portal.main import app


class UserApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

        response = self.client.post(
            "/signup",
            json={"username": "ada", "email": "ada@example.com", "password": "s3cret"},
        )
        self.assertEqual(response.status_code, 201)
        self.user = self.client.get("/api/users").json()[0]

    def test_get_user_by_id(self):
        response = self.client.get(f"/api/users/{self.user['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["email"], "ada@example.com")
        self.assertEqual(self.client.get("/api/users/count").json(), {"totalUsers": 1})

    def test_update_rehashes_password(self):
        response = self.client.put(
            f"/api/users/{self.user['id']}",
            json={"username": "ada.l", "email": "ada@example.com", "password": "n3w"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["message"], "User updated successfully")
        updated = response.json()["updatedUser"]
        self.assertEqual(updated["username"], "ada.l")
        self.assertNotEqual(updated["password"], self.user["password"])
        self.assertTrue(verify_password("n3w", updated["password"]))

        login = self.client.post("/login", json={"username": "ada.l", "password": "n3w"})
        self.assertEqual(login.status_code, 200)

    def test_update_without_password_stores_empty_password_hash(self):
        response = self.client.put(
            f"/api/users/{self.user['id']}",
            json={"username": "ada", "email": "ada@example.com"},
        )
        self.assertEqual(response.status_code, 200)
        stored = response.json()["updatedUser"]["password"]
        self.assertTrue(verify_password("", stored))
        self.assertFalse(verify_password("s3cret", stored))

    def test_update_password_only_keeps_username_and_email(self):
        response = self.client.put(f"/api/users/{self.user['id']}", json={"password": "new"})
        self.assertEqual(response.status_code, 200)
        updated = response.json()["updatedUser"]
        self.assertEqual(updated["username"], "ada")
        self.assertEqual(updated["email"], "ada@example.com")
        self.assertTrue(verify_password("new", updated["password"]))

    def test_delete_user(self):
        response = self.client.delete(f"/api/users/{self.user['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "User deleted successfully"})
        self.assertEqual(self.client.get("/api/users").json(), [])

    def test_absent_id_is_not_found(self):
        missing = str(uuid.uuid4())
        responses = [
            self.client.get(f"/api/users/{missing}"),
            self.client.put(
                f"/api/users/{missing}",
                json={"username": "x", "email": "x@example.com", "password": "x"},
            ),
            self.client.delete(f"/api/users/{missing}"),
        ]
        for response in responses:
            self.assertEqual(response.status_code, 404)
            self.assertEqual(response.json(), {"message": "User not found"})

    def test_update_to_taken_username_is_server_error(self):
        self.client.post(
            "/signup",
            json={"username": "bob", "email": "bob@example.com", "password": "pw"},
        )
        response = self.client.put(
            f"/api/users/{self.user['id']}",
            json={"username": "bob", "email": "ada@example.com", "password": "pw"},
        )
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "Failed to update user")


if __name__ == "__main__":
    unittest.main()

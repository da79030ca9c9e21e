import unittest

from fastapi.testclient import TestClient

from contact_portal.main import app


class ReportApiTests(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def test_empty_report(self):
        response = self.client.get("/api/reports")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"totalUsers": 0, "totalContacts": 0, "completedContacts": 0, "pendingContacts": 0},
        )

    def test_report_matches_lists(self):
        for name in ("ada", "bob"):
            self.client.post(
                "/signup",
                json={"username": name, "email": f"{name}@example.com", "password": "pw"},
            )
        ids = []
        for i in range(3):
            response = self.client.post(
                "/api/contact",
                json={"name": f"C{i}", "email": "c@example.com", "phone": "1", "message": "hi"},
            )
            ids.append(response.json()["id"])
        self.client.put(f"/api/contacts/{ids[0]}/status", json={"status": "Completed"})

        report = self.client.get("/api/reports").json()
        self.assertEqual(report["totalUsers"], len(self.client.get("/api/users").json()))
        self.assertEqual(report["totalContacts"], len(self.client.get("/api/contacts").json()))
        self.assertEqual(report["completedContacts"], len(self.client.get("/api/contacts/completed").json()))
        self.assertEqual(report["pendingContacts"], len(self.client.get("/api/contacts/pending").json()))
        self.assertEqual(report, {"totalUsers": 2, "totalContacts": 3, "completedContacts": 1, "pendingContacts": 2})


if __name__ == "__main__":
    unittest.main()

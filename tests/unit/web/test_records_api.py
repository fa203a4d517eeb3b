#!/usr/bin/env python3
"""
Unit tests for the skills, projects, mock-tests and certifications endpoints.
"""

import unittest

from tests import ApiClientMixin


class TestRecordEndpoints(ApiClientMixin, unittest.TestCase):

    def setUp(self):
        self.setup_api()
        self.user = self.register()

    def tearDown(self):
        self.teardown_api()

    def test_skill_lifecycle(self):
        created = self.client.post("/api/skills", json={"name": "Python", "level": "Advanced"})
        self.assertEqual(created.status_code, 200)
        skill = created.json()
        self.assertEqual(skill["name"], "Python")
        self.assertEqual(skill["level"], "Advanced")

        listed = self.client.get("/api/skills").json()
        self.assertEqual(listed, [skill])

        deleted = self.client.delete(f"/api/skills/{skill['id']}")
        self.assertEqual(deleted.json(), {"success": True})
        self.assertEqual(self.client.get("/api/skills").json(), [])

    def test_invalid_skill_level_rejected(self):
        response = self.client.post("/api/skills", json={"name": "Python", "level": "Expert"})
        self.assertEqual(response.status_code, 422)

    def test_project_create(self):
        response = self.client.post(
            "/api/projects",
            json={"title": "Placement Portal", "technologies": "FastAPI, React", "status": "In Progress"}
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "In Progress")

    def test_mock_test_create_and_order(self):
        for name, date in (("Aptitude 1", "2026-01-10"), ("Aptitude 2", "2026-02-10")):
            response = self.client.post(
                "/api/mock-tests",
                json={"test_name": name, "score": 42, "max_score": 50, "date": date}
            )
            self.assertEqual(response.status_code, 200)

        tests = self.client.get("/api/mock-tests").json()
        self.assertEqual([t["test_name"] for t in tests], ["Aptitude 2", "Aptitude 1"])
        self.assertEqual(tests[0]["date"], "2026-02-10")
        self.assertEqual(tests[0]["max_score"], 50)

    def test_mock_test_requires_positive_max_score(self):
        response = self.client.post(
            "/api/mock-tests",
            json={"test_name": "Broken", "score": 1, "max_score": 0, "date": "2026-01-10"}
        )
        self.assertEqual(response.status_code, 422)

    def test_mock_test_rejects_bad_date(self):
        response = self.client.post(
            "/api/mock-tests",
            json={"test_name": "T", "score": 1, "max_score": 10, "date": "next tuesday"}
        )
        self.assertEqual(response.status_code, 422)

    def test_certification_get_by_id(self):
        cert = self.client.post(
            "/api/certifications",
            json={"name": "Azure Fundamentals", "platform": "Microsoft", "date": "2026-03-01"}
        ).json()

        response = self.client.get(f"/api/certifications/{cert['id']}")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), cert)

    def test_records_are_private(self):
        skill = self.client.post("/api/skills", json={"name": "Go", "level": "Beginner"}).json()

        other = self.new_client()
        self.register(client=other, name="Ravi", email="ravi@example.com")

        self.assertEqual(other.get("/api/skills").json(), [])

        response = other.get(f"/api/skills/{skill['id']}")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["type"], "RecordNotFoundException")

        # Deleting someone else's record is a no-op
        self.assertEqual(other.delete(f"/api/skills/{skill['id']}").json(), {"success": True})
        self.assertEqual(len(self.client.get("/api/skills").json()), 1)

    def test_delete_missing_record_succeeds(self):
        response = self.client.delete("/api/projects/9999")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"success": True})

    def test_requires_authentication(self):
        anonymous = self.new_client()
        for path in ("/api/skills", "/api/projects", "/api/mock-tests", "/api/certifications"):
            self.assertEqual(anonymous.get(path).status_code, 401, path)


if __name__ == '__main__':
    unittest.main()

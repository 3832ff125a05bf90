import json
import unittest

from fastapi.testclient import TestClient

from factories import FakeClient, full_model_payload
from resume_builder.routers.resume import get_cache, get_generator
from resume_builder.server import app
from resume_builder.services.cache import ResumeCache
from resume_builder.services.config import Settings
from resume_builder.services.generator import ResumeGenerator


class FakeRedis:
    def __init__(self):
        self.store = {}
        self.ttls = {}

    def setex(self, key, ttl, value):
        self.store[key] = value
        self.ttls[key] = ttl

    def get(self, key):
        return self.store.get(key)


def _payload(**candidate):
    body = {
        "job": {
            "jobDescription": "Backend engineer building Python microservices on AWS with Docker.",
            "jobTitle": "Backend Engineer",
            "jobLocation": "Remote",
        },
        "candidate": {"fullName": "Jane Doe", "email": "jane@example.com", "skills": ["Python", "AWS"]},
    }
    body["candidate"].update(candidate)
    return body


class ResumeApiTests(unittest.TestCase):
    def setUp(self):
        self.redis = FakeRedis()
        self.model = FakeClient(json.dumps(full_model_payload()))
        self.cache = ResumeCache(Settings(), client=self.redis)
        app.dependency_overrides[get_generator] = lambda: ResumeGenerator(
            Settings(GEMINI_API_KEY="test-key"), client=self.model)
        app.dependency_overrides[get_cache] = lambda: self.cache
        self.client = TestClient(app)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_root(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertIn("message", response.json())

    def test_generate_returns_resume_score_and_metadata(self):
        response = self.client.post("/api/resume/generate", json=_payload())
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["resume"]["summary"], full_model_payload()["summary"])
        self.assertEqual(body["resume"]["contactInformation"]["email"], "jane@example.com")
        self.assertTrue(0 <= body["fitScore"]["score"] <= 100)
        self.assertIn("matched", body["fitScore"])
        self.assertEqual(body["metadata"]["targetIndustry"], "technology")
        self.assertEqual(body["metadata"]["experienceLevel"], "entry")
        self.assertIsNotNone(body["id"])
        self.assertEqual(self.redis.ttls[f"resume:{body['id']}"], Settings().RESUME_CACHE_TTL_SECONDS)

    def test_cached_resume_can_be_fetched(self):
        created = self.client.post("/api/resume/generate", json=_payload()).json()
        response = self.client.get(f"/api/resume/{created['id']}")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["resume"], created["resume"])
        self.assertEqual(response.json()["id"], created["id"])

    def test_unknown_resume_is_404(self):
        self.assertEqual(self.client.get("/api/resume/does-not-exist").status_code, 404)

    def test_model_garbage_is_not_a_server_error(self):
        self.model.text = "<html>upstream exploded</html>"
        response = self.client.post("/api/resume/generate", json=_payload())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["resume"]["languages"], ["English (Native)"])

    def test_model_failure_is_not_a_server_error(self):
        self.model.fail = True
        response = self.client.post("/api/resume/generate", json=_payload())
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["resume"]["skills"]["technical"], ["Python", "AWS"])

    def test_non_list_profile_collections_fall_back_to_defaults(self):
        self.model.fail = True
        body = _payload(workExperience=5, skills=5, education="MIT")
        response = self.client.post("/api/resume/generate", json=body)
        self.assertEqual(response.status_code, 200)
        resume = response.json()["resume"]
        self.assertEqual(resume["workExperience"][0]["company"], "Independent Projects")
        self.assertEqual(resume["education"][0]["degree"], "Bachelor's Degree")
        self.assertEqual(resume["skills"]["technical"], ["Microsoft Office", "Data Analysis",
                                                         "Project Management Tools"])

    def test_missing_candidate_email_is_client_error(self):
        body = _payload()
        del body["candidate"]["email"]
        response = self.client.post("/api/resume/generate", json=body)
        self.assertEqual(response.status_code, 400)
        self.assertIn("email", response.json()["detail"])

    def test_blank_job_title_is_client_error(self):
        body = _payload()
        body["job"]["jobTitle"] = " "
        self.assertEqual(self.client.post("/api/resume/generate", json=body).status_code, 400)

    def test_missing_api_key_is_server_error(self):
        app.dependency_overrides[get_generator] = lambda: ResumeGenerator(Settings(GEMINI_API_KEY=None))
        response = self.client.post("/api/resume/generate", json=_payload())
        self.assertEqual(response.status_code, 500)
        self.assertIn("GEMINI_API_KEY", response.json()["detail"])

    def test_cache_disabled_returns_null_id(self):
        app.dependency_overrides[get_cache] = lambda: ResumeCache(Settings(REDIS_URL=None))
        response = self.client.post("/api/resume/generate", json=_payload())
        self.assertEqual(response.status_code, 200)
        self.assertIsNone(response.json()["id"])


if __name__ == "__main__":
    unittest.main()

"""
Shared fixtures: an API client with the session check replaced and an
in-memory stand-in for the Supabase manager.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from jobtrack.api.dependencies import get_user_id
from jobtrack.main import app

TEST_USER_ID = "user-123"


class FakeSupabaseManager:
    """Records what the services write instead of talking to Supabase"""

    def __init__(self, jobs=None, integrations=None, external_ids=None):
        self.jobs = list(jobs or [])
        self.integrations = list(integrations or [])
        self.external_ids = set(external_ids or [])
        self.inserted = []
        self.synced = []
        self.fail_inserts_for = set()

    def get_user_jobs(self, user_id):
        return [job for job in self.jobs if job.get("user_id", user_id) == user_id]

    def get_user_integrations(self, user_id):
        return [row for row in self.integrations if row["user_id"] == user_id and row.get("is_active", True)]

    def get_external_ids(self, user_id):
        return set(self.external_ids)

    def insert_job_application(self, job_data):
        if job_data["external_id"] in self.fail_inserts_for:
            raise RuntimeError("insert failed")
        self.inserted.append(job_data)
        return job_data

    def mark_integration_synced(self, integration_id):
        self.synced.append(integration_id)


def make_job(job_id, status, **extra):
    job = {
        "id": job_id,
        "company": f"Company {job_id}",
        "position": "Engineer",
        "location": "Remote",
        "status": status,
        "applied_date": datetime(2024, 5, 1, tzinfo=timezone.utc).isoformat(),
    }
    job.update(extra)
    return job


@pytest.fixture
def client():
    app.dependency_overrides[get_user_id] = lambda: TEST_USER_ID
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client():
    with TestClient(app) as test_client:
        yield test_client

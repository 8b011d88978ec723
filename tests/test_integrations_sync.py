"""Unit tests for the integration sync service, with Supabase and HTTP faked."""

from datetime import datetime, timezone

import requests

from conftest import FakeSupabaseManager, TEST_USER_ID
from jobtrack.schemas.integration import ExternalJobApplication, IntegrationType
from jobtrack.services.integrations import IntegrationSyncService


class FakeResponse:
    def __init__(self, payload=None, status_code=200):
        self._payload = payload or {}
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        return self._payload


class FakeSession:
    """Answers GET requests from a {url-fragment: response} table"""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        for fragment, response in self.routes.items():
            if fragment in url:
                if isinstance(response, Exception):
                    raise response
                return response
        return FakeResponse(status_code=404)


INDEED_PAYLOAD = {
    "jobs": [
        {"id": "a1", "company": "Acme", "title": "Backend Engineer", "location": "London, UK",
         "url": "https://indeed.com/a1", "dateApplied": "2024-05-01T10:00:00Z"},
        {"id": "a2", "company": "Globex", "title": "Data Engineer", "location": "Austin, TX",
         "dateApplied": "2024-05-02T10:00:00Z"},
    ]
}

LINKEDIN_APPLIED = {
    "elements": [
        {"entityUrn": "urn:li:jobApplication:77", "applicationDate": 1714557600000,
         "companyDetails": {"companyName": "Initech"},
         "jobPostingInfo": {"title": "SRE", "formattedLocation": "Seattle, WA", "jobPostingId": "900"}},
    ]
}

LINKEDIN_SAVED = {
    "elements": [
        {"entityUrn": "urn:li:savedJob:5",
         "jobPosting": {"id": "901", "title": "Platform Engineer"}},
    ]
}


def integration_row(row_id, platform, user_id=TEST_USER_ID):
    return {
        "id": row_id,
        "user_id": user_id,
        "type": platform,
        "access_token": f"token-{row_id}",
        "refresh_token": "refresh",
        "is_active": True,
    }


def make_service(db, routes):
    return IntegrationSyncService(db=db, session=FakeSession(routes))


class TestFetchJobs:
    def test_indeed_jobs_are_mapped(self):
        service = make_service(FakeSupabaseManager(), {"indeed": FakeResponse(INDEED_PAYLOAD)})
        jobs = service.fetch_indeed_jobs("tok")

        assert [job.external_id for job in jobs] == ["indeed_a1", "indeed_a2"]
        assert jobs[0].company == "Acme"
        assert jobs[0].position == "Backend Engineer"
        assert jobs[0].status == "applied"
        assert jobs[0].platform == IntegrationType.INDEED
        assert jobs[0].applied_date == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)

        url, headers, timeout = service.session.calls[0]
        assert headers["Authorization"] == "Bearer tok"
        assert timeout == service.timeout

    def test_indeed_error_status_returns_nothing(self):
        service = make_service(FakeSupabaseManager(), {"indeed": FakeResponse(status_code=503)})
        assert service.fetch_indeed_jobs("tok") == []

    def test_indeed_network_error_returns_nothing(self):
        service = make_service(FakeSupabaseManager(), {"indeed": requests.ConnectionError("down")})
        assert service.fetch_indeed_jobs("tok") == []

    def test_linkedin_applied_and_saved(self):
        service = make_service(FakeSupabaseManager(), {
            "jobApplications": FakeResponse(LINKEDIN_APPLIED),
            "savedJobs": FakeResponse(LINKEDIN_SAVED),
        })
        jobs = service.fetch_linkedin_jobs("tok")

        assert [job.external_id for job in jobs] == ["linkedin_applied_77", "linkedin_saved_5"]
        applied, saved = jobs
        assert applied.company == "Initech"
        assert applied.url == "https://www.linkedin.com/jobs/view/900"
        assert applied.applied_date == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
        assert applied.status == "applied"
        assert saved.company == "Unknown Company"
        assert saved.location == ""
        assert saved.status == "saved"

        _, headers, _ = service.session.calls[0]
        assert headers["X-Restli-Protocol-Version"] == "2.0.0"

    def test_linkedin_one_endpoint_failing_keeps_the_other(self):
        service = make_service(FakeSupabaseManager(), {
            "jobApplications": FakeResponse(status_code=401),
            "savedJobs": FakeResponse(LINKEDIN_SAVED),
        })
        jobs = service.fetch_linkedin_jobs("tok")
        assert [job.external_id for job in jobs] == ["linkedin_saved_5"]


class TestImportExternalJobs:
    def _job(self, external_id, status="applied"):
        return ExternalJobApplication(
            external_id=external_id,
            platform=IntegrationType.INDEED,
            company="Acme",
            position="Engineer",
            applied_date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            status=status,
        )

    def test_skips_already_imported(self):
        db = FakeSupabaseManager(external_ids={"indeed_1"})
        service = make_service(db, {})

        imported = service.import_external_jobs(TEST_USER_ID, [self._job("indeed_1"), self._job("indeed_2")])

        assert imported == 1
        assert [row["external_id"] for row in db.inserted] == ["indeed_2"]
        row = db.inserted[0]
        assert row["user_id"] == TEST_USER_ID
        assert row["external_platform"] == "indeed"
        assert row["location"] is None
        assert row["applied_date"] == "2024-05-01T00:00:00+00:00"

    def test_duplicates_within_one_batch_imported_once(self):
        db = FakeSupabaseManager()
        service = make_service(db, {})
        assert service.import_external_jobs(TEST_USER_ID, [self._job("x"), self._job("x")]) == 1

    def test_failed_insert_is_skipped(self):
        db = FakeSupabaseManager()
        db.fail_inserts_for = {"bad"}
        service = make_service(db, {})

        imported = service.import_external_jobs(TEST_USER_ID, [self._job("bad"), self._job("good")])

        assert imported == 1
        assert [row["external_id"] for row in db.inserted] == ["good"]


class TestSyncAllIntegrations:
    def test_no_integrations(self):
        service = make_service(FakeSupabaseManager(), {})
        result = service.sync_all_integrations(TEST_USER_ID)
        assert result.success is False
        assert result.imported == 0
        assert result.message == "No active integrations found"

    def test_syncs_every_integration(self):
        db = FakeSupabaseManager(integrations=[
            integration_row("i1", "indeed"),
            integration_row("i2", "linkedin"),
            integration_row("other", "indeed", user_id="someone-else"),
        ])
        service = make_service(db, {
            "indeed": FakeResponse(INDEED_PAYLOAD),
            "jobApplications": FakeResponse(LINKEDIN_APPLIED),
            "savedJobs": FakeResponse(LINKEDIN_SAVED),
        })

        result = service.sync_all_integrations(TEST_USER_ID)

        assert result.success is True
        assert result.imported == 4
        assert result.message == "Successfully imported 4 jobs from 2 integration(s)"
        assert db.synced == ["i1", "i2"]

    def test_unexpected_error_is_reported(self):
        db = FakeSupabaseManager(integrations=[integration_row("i1", "indeed")])

        def broken(integration_id):
            raise RuntimeError("db down")

        db.mark_integration_synced = broken
        service = make_service(db, {"indeed": FakeResponse({"jobs": []})})

        result = service.sync_all_integrations(TEST_USER_ID)

        assert result.success is False
        assert result.message == "Error syncing integrations"

    def test_unsupported_or_incomplete_rows_are_skipped(self):
        incomplete = integration_row("n1", "linkedin")
        incomplete["access_token"] = None
        db = FakeSupabaseManager(integrations=[
            integration_row("i1", "indeed"),
            integration_row("z1", "ziprecruiter"),
            incomplete,
        ])
        service = make_service(db, {"indeed": FakeResponse(INDEED_PAYLOAD)})

        result = service.sync_all_integrations(TEST_USER_ID)

        assert result.success is True
        assert result.imported == 2
        assert [row["external_id"] for row in db.inserted] == ["indeed_a1", "indeed_a2"]
        assert db.synced == ["i1"]

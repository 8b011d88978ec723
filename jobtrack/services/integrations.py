"""
Sync job applications from external platforms (Indeed, LinkedIn) into the
user's job_applications table.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import requests
from pydantic import ValidationError

from jobtrack.core.config import settings
from jobtrack.db.supabase import SupabaseManager, supabase_manager, utc_now_iso
from jobtrack.schemas.integration import (
    ExternalJobApplication,
    Integration,
    IntegrationType,
    SyncResult,
)
from jobtrack.utils.error import IntegrationError

logger = logging.getLogger(__name__)

LINKEDIN_JOB_VIEW_URL = "https://www.linkedin.com/jobs/view/{}"
UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_POSITION = "Unknown Position"


def _urn_id(urn: str) -> str:
    """Last segment of a LinkedIn URN, e.g. urn:li:jobApplication:42 -> 42"""
    return urn.split(":")[-1]


class IntegrationSyncService:
    """Fetches applications from every active integration and imports new ones"""

    def __init__(self, db: Optional[SupabaseManager] = None, session: Optional[requests.Session] = None):
        self.db = db or supabase_manager
        self.session = session or requests.Session()
        self.timeout = settings.INTEGRATION_TIMEOUT

    def _get_json(self, platform: IntegrationType, url: str, headers: Dict[str, str]) -> Dict[str, Any]:
        response = self.session.get(url, headers=headers, timeout=self.timeout)
        if not response.ok:
            raise IntegrationError(platform.value, f"API error: {response.status_code}")
        return response.json()

    def fetch_indeed_jobs(self, access_token: str) -> List[ExternalJobApplication]:
        """Applied jobs from Indeed; an empty list if the call fails"""
        headers = {
            "Authorization": f"Bearer {access_token}",
            "Accept": "application/json",
        }
        try:
            data = self._get_json(IntegrationType.INDEED, settings.INDEED_APPLIED_JOBS_URL, headers)
            return [
                ExternalJobApplication(
                    external_id=f"indeed_{job['id']}",
                    platform=IntegrationType.INDEED,
                    company=job.get('company') or UNKNOWN_COMPANY,
                    position=job.get('title') or UNKNOWN_POSITION,
                    location=job.get('location'),
                    url=job.get('url'),
                    applied_date=job.get('dateApplied') or datetime.now(timezone.utc),
                    status="applied",
                )
                for job in data.get('jobs', [])
            ]
        except (requests.RequestException, IntegrationError, KeyError, ValueError) as e:
            logger.error("Error syncing Indeed jobs: %s", e)
            return []

    def fetch_linkedin_jobs(self, access_token: str) -> List[ExternalJobApplication]:
        """
        Applied and saved jobs from LinkedIn.

        The two endpoints are fetched independently; a failure in one still
        returns whatever the other produced.
        """
        headers = {
            "Authorization": f"Bearer {access_token}",
            "X-Restli-Protocol-Version": "2.0.0",
            "Accept": "application/json",
        }
        base_url = settings.LINKEDIN_API_BASE_URL.rstrip('/')
        jobs: List[ExternalJobApplication] = []

        try:
            data = self._get_json(
                IntegrationType.LINKEDIN, f"{base_url}/jobApplications?q=jobSeeker", headers
            )
            for application in data.get('elements') or []:
                posting = application.get('jobPostingInfo') or {}
                jobs.append(ExternalJobApplication(
                    external_id=f"linkedin_applied_{_urn_id(application['entityUrn'])}",
                    platform=IntegrationType.LINKEDIN,
                    company=(application.get('companyDetails') or {}).get('companyName') or UNKNOWN_COMPANY,
                    position=posting.get('title') or UNKNOWN_POSITION,
                    location=posting.get('formattedLocation') or "",
                    url=LINKEDIN_JOB_VIEW_URL.format(posting.get('jobPostingId')),
                    applied_date=application.get('applicationDate') or datetime.now(timezone.utc),
                    status="applied",
                ))
        except (requests.RequestException, IntegrationError, KeyError, ValueError) as e:
            logger.error("Error fetching LinkedIn applied jobs: %s", e)

        try:
            data = self._get_json(
                IntegrationType.LINKEDIN, f"{base_url}/savedJobs?q=jobSeeker", headers
            )
            for saved in data.get('elements') or []:
                posting = saved.get('jobPosting') or {}
                jobs.append(ExternalJobApplication(
                    external_id=f"linkedin_saved_{_urn_id(saved['entityUrn'])}",
                    platform=IntegrationType.LINKEDIN,
                    company=(posting.get('companyDetails') or {}).get('companyName') or UNKNOWN_COMPANY,
                    position=posting.get('title') or UNKNOWN_POSITION,
                    location=posting.get('formattedLocation') or "",
                    url=LINKEDIN_JOB_VIEW_URL.format(posting.get('id')),
                    # Saved jobs carry no application date
                    applied_date=datetime.now(timezone.utc),
                    status="saved",
                ))
        except (requests.RequestException, IntegrationError, KeyError, ValueError) as e:
            logger.error("Error fetching LinkedIn saved jobs: %s", e)

        return jobs

    def fetch_jobs(self, integration: Integration) -> List[ExternalJobApplication]:
        if integration.type == IntegrationType.INDEED:
            return self.fetch_indeed_jobs(integration.access_token)
        return self.fetch_linkedin_jobs(integration.access_token)

    def import_external_jobs(self, user_id: str, jobs: List[ExternalJobApplication]) -> int:
        """
        Insert the jobs that are not already stored for the user.

        Returns:
            int: Number of job applications inserted
        """
        imported_count = 0
        try:
            existing_ids = self.db.get_external_ids(user_id)
        except Exception as e:
            logger.error("Error importing external jobs: %s", e)
            return imported_count

        logger.info("Importing up to %d job(s) for user %s", len(jobs), user_id)

        for job in jobs:
            if job.external_id in existing_ids:
                continue
            now = utc_now_iso()
            try:
                self.db.insert_job_application({
                    'user_id': user_id,
                    'company': job.company,
                    'position': job.position,
                    'location': job.location or None,
                    'status': job.status,
                    'applied_date': job.applied_date.isoformat(),
                    'last_updated': now,
                    'external_id': job.external_id,
                    'external_url': job.url or None,
                    'external_platform': job.platform.value,
                    'created_at': now,
                    'updated_at': now,
                })
            except Exception as e:
                logger.error("Error importing job %s: %s", job.external_id, e)
                continue
            existing_ids.add(job.external_id)
            imported_count += 1

        return imported_count

    def sync_all_integrations(self, user_id: str) -> SyncResult:
        """Sync every active integration of a user"""
        try:
            rows = self.db.get_user_integrations(user_id)

            if not rows:
                return SyncResult(success=False, imported=0, message="No active integrations found")

            total_imported = 0
            for row in rows:
                try:
                    integration = Integration(**row)
                except ValidationError as e:
                    # Unsupported platform or incomplete row: nothing to import from it
                    logger.warning("⚠️ Skipping integration %s: %s", row.get('id'), e)
                    continue

                logger.info("🔄 Syncing %s integration %s", integration.type.value, integration.id)
                jobs = self.fetch_jobs(integration)
                total_imported += self.import_external_jobs(user_id, jobs)
                self.db.mark_integration_synced(integration.id)

            return SyncResult(
                success=True,
                imported=total_imported,
                message=f"Successfully imported {total_imported} jobs from {len(rows)} integration(s)",
            )
        except Exception as e:
            logger.error("Error syncing integrations: %s", e)
            return SyncResult(success=False, imported=0, message="Error syncing integrations")


integration_sync_service = IntegrationSyncService()

import logging
from typing import Dict, Any, List, Optional, Set
from datetime import datetime, timezone
from jobtrack.core.config import settings
from jobtrack.utils.error import SessionError
from supabase import create_client, Client

logger = logging.getLogger(__name__)

JOB_APPLICATIONS_TABLE = 'job_applications'
INTEGRATIONS_TABLE = 'user_integrations'


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SupabaseManager:
    """Manages Supabase database operations using native Supabase client"""

    def __init__(self):
        self._client: Optional[Client] = None

    @property
    def client(self) -> Client:
        """Create the Supabase client on first use"""
        if self._client is None:
            logger.info("🚀 Starting Supabase initialization...")
            if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
                raise ValueError("SUPABASE_URL and SUPABASE_KEY must be provided")

            logger.info("📡 Connecting to Supabase")
            self._client = create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
            logger.info("✅ Supabase client initialized")
        return self._client

    def cleanup(self):
        """Cleanup database connections"""
        try:
            logger.info("🧹 Cleaning up Supabase connections...")
            # Supabase client handles connection pooling automatically
            self._client = None
            logger.info("✅ Supabase connections cleaned up")
        except Exception as e:
            logger.error("❌ Error cleaning up Supabase connections: %s", e)

    def get_user_id_from_token(self, token: str) -> Optional[str]:
        """Resolve the session user behind an access token"""
        # Missing Supabase settings raise here, outside the session check
        client = self.client
        try:
            response = client.auth.get_user(token)
        except Exception as e:
            raise SessionError(f"Could not resolve session: {e}") from e
        user = getattr(response, 'user', None)
        if not user:
            return None
        return user.id

    def get_user_jobs(self, user_id: str) -> List[Dict[str, Any]]:
        """Get all job applications of a user"""
        result = (
            self.client.table(JOB_APPLICATIONS_TABLE)
            .select('*')
            .eq('user_id', user_id)
            .order('last_updated', desc=True)
            .execute()
        )
        logger.debug("Fetched %d job applications for user %s", len(result.data or []), user_id)
        return result.data or []

    def get_user_integrations(self, user_id: str) -> List[Dict[str, Any]]:
        """Get active integrations for a user"""
        try:
            result = (
                self.client.table(INTEGRATIONS_TABLE)
                .select('*')
                .eq('user_id', user_id)
                .eq('is_active', True)
                .execute()
            )
            return result.data or []
        except Exception as e:
            logger.error("Error fetching integrations for user %s: %s", user_id, e)
            return []

    def get_external_ids(self, user_id: str) -> Set[str]:
        """External ids of the job applications already imported for a user"""
        result = (
            self.client.table(JOB_APPLICATIONS_TABLE)
            .select('external_id')
            .eq('user_id', user_id)
            .not_.is_('external_id', None)
            .execute()
        )
        return {row['external_id'] for row in (result.data or []) if row.get('external_id')}

    def insert_job_application(self, job_data: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a job application row and return it"""
        result = self.client.table(JOB_APPLICATIONS_TABLE).insert(job_data).execute()
        if not result.data:
            raise ValueError("Insert returned no data")
        return result.data[0]

    def mark_integration_synced(self, integration_id: str):
        """Stamp last_synced_at on an integration"""
        now = utc_now_iso()
        self.client.table(INTEGRATIONS_TABLE).update({
            'last_synced_at': now,
            'updated_at': now,
        }).eq('id', integration_id).execute()


# Global instance
supabase_manager = SupabaseManager()

"""
Supabase client wrapper for server-side operations.
Uses the service role key; this backend has no per-user auth.
"""
from typing import Optional

from supabase import create_client, Client

from ..config import settings
from ..errors import StorageError


class SupabaseClient:
    """Singleton Supabase client wrapper."""

    _instance: Optional['SupabaseClient'] = None
    _client: Optional[Client] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if self._client is None:
            supabase_url = settings.SUPABASE_URL
            supabase_key = settings.SUPABASE_SERVICE_ROLE_KEY

            if not supabase_url:
                raise StorageError("SUPABASE_URL environment variable is required")
            if not supabase_key:
                raise StorageError("SUPABASE_SERVICE_ROLE_KEY environment variable is required")

            try:
                self._client = create_client(supabase_url, supabase_key)
            except Exception as e:
                raise StorageError(f"Failed to create Supabase client: {str(e)}")

    @property
    def client(self) -> Client:
        """Get the Supabase client instance."""
        if self._client is None:
            raise StorageError("Supabase client not initialized. Check environment variables.")
        return self._client


def get_supabase() -> SupabaseClient:
    """Get the Supabase client singleton."""
    return SupabaseClient()


def get_supabase_client() -> Client:
    """
    FastAPI dependency returning the raw Supabase client.
    Usage:
        @router.get("/things")
        async def things(supabase: Client = Depends(get_supabase_client)):
            result = supabase.table("things").select("*").execute()
    """
    return get_supabase().client

from typing import Optional

from supabase import create_client, Client

from app.core.config import get_settings

# Created on first use so importing the app doesn't require credentials
_supabase_client: Optional[Client] = None


def get_supabase_client() -> Client:
    global _supabase_client
    if _supabase_client is None:
        settings = get_settings()
        url: str = settings.supabase_url
        key: str = settings.supabase_service_key

        if not url or not key:
            raise EnvironmentError("Supabase URL and Key must be set in .env file")

        print("📥 Creating Supabase client...")
        _supabase_client = create_client(url, key)
    return _supabase_client

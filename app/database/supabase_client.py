from typing import Optional

from fastapi import Request
from supabase import create_client, Client
from app.config import settings


class SupabaseClient:
    _client: Client = None
    _service_client: Client = None

    @classmethod
    def get_client(cls) -> Client:
        if cls._client is None:
            cls._client = create_client(settings.supabase_url, settings.supabase_key)
        return cls._client

    @classmethod
    def get_service_client(cls) -> Client:
        """Client with service_role key; bypasses RLS. Use for auth admin calls and seeding."""
        if cls._service_client is None and settings.supabase_service_role_key:
            cls._service_client = create_client(
                settings.supabase_url, settings.supabase_service_role_key
            )
        return cls._service_client or cls.get_client()

    @classmethod
    def create_request_client(cls, access_token: Optional[str] = None) -> Client:
        """Fresh anon client for one request, carrying the caller's session token so RLS sees them."""
        client = create_client(settings.supabase_url, settings.supabase_key)
        if access_token:
            # postgrest/storage sub-clients are built lazily from these headers
            client.options.headers["Authorization"] = f"Bearer {access_token}"
        return client

    @classmethod
    def reset_client(cls):
        cls._client = None
        cls._service_client = None


def get_access_token(request: Request) -> Optional[str]:
    """Session token from the session cookie, or from an Authorization: Bearer header."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        return token
    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials:
        return credentials.strip()
    return None


def get_supabase(request: Request) -> Client:
    return SupabaseClient.create_request_client(get_access_token(request))


def get_service_supabase() -> Client:
    return SupabaseClient.get_service_client()

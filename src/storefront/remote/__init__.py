"""Remote database factory.

- FirebaseDatabase when a database URL is configured
- FakeDatabase otherwise (development and tests)
"""

from storefront.config import Settings
from storefront.remote.fake_adapter import FakeDatabase
from storefront.remote.firebase_adapter import FirebaseDatabase
from storefront.remote.port import RemoteDatabase
from storefront.remote.service import RemoteResult, RemoteService


def create_database(settings: Settings) -> RemoteDatabase:
    """Return the remote database adapter selected by settings."""
    if settings.database_url:
        return FirebaseDatabase(
            settings.database_url,
            auth_token=settings.database_auth,
            timeout=settings.http_timeout,
        )
    return FakeDatabase()


__all__ = ["FakeDatabase", "FirebaseDatabase", "RemoteDatabase", "RemoteResult", "RemoteService", "create_database"]

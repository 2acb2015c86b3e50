"""
Hosted Database Wrapper

Thin wrapper around the Supabase client. Each method issues a single query
builder call and returns the resulting rows; any client failure is logged
and re-raised as DatabaseError.

Usage:
    from propfinder.core.database import get_supabase_service

    db = get_supabase_service()
    rows = db.get_properties()
"""

from typing import Any, Dict, List, Optional

from supabase import Client, ClientOptions, create_client

from propfinder.config import get_config
from propfinder.core.constants import TABLE_AGENTS, TABLE_USER_PROFILES
from propfinder.exceptions import (
    ConfigurationError,
    DatabaseConnectionError,
    DatabaseError,
)
from propfinder.logging_config import get_logger

logger = get_logger(__name__)

Row = Dict[str, Any]

PROPERTY_LIST_SELECT = """
    *,
    agents (
        id,
        user_profiles (
            full_name,
            phone,
            email,
            avatar_url
        )
    )
"""

PROPERTY_DETAIL_SELECT = """
    *,
    agents (
        id,
        user_profiles (
            full_name,
            phone,
            email,
            avatar_url
        ),
        rating,
        total_ratings,
        company_name
    ),
    property_images (
        url,
        alt_text,
        display_order
    )
"""

AGENT_PROFILE_SELECT = """
    *,
    user_profiles (
        full_name,
        email,
        phone,
        avatar_url
    )
"""


class SupabaseService:
    """Supabase-backed access to listings, agents and user profiles."""

    def __init__(
        self,
        url: Optional[str] = None,
        service_key: Optional[str] = None,
        client: Optional[Client] = None,
        table: Optional[str] = None,
    ):
        """Create the service.

        Args:
            url: Supabase project URL. Defaults to config.
            service_key: Service role key. Defaults to config.
            client: Pre-built client; skips credential checks when given.
            table: Properties table name. Defaults to config.

        Raises:
            ConfigurationError: If no client is given and credentials are missing.
            DatabaseConnectionError: If the Supabase client cannot be created.
        """
        config = get_config().supabase
        self.table = table or config.table

        if client is not None:
            self._client = client
            return

        url = url or config.url
        service_key = service_key or config.service_role_key
        if not url or not service_key:
            raise ConfigurationError(
                "Supabase URL and Service Role Key must be provided"
            )

        try:
            self._client = create_client(
                url,
                service_key,
                options=ClientOptions(
                    auto_refresh_token=False,
                    persist_session=False,
                ),
            )
        except Exception as e:
            logger.error("Could not create Supabase client: %s", e)
            raise DatabaseConnectionError(f"Failed to create Supabase client: {e}") from e
        logger.info("Supabase client created for %s", url)

    def get_client(self) -> Client:
        return self._client

    def _execute(self, operation: str, query) -> Any:
        try:
            response = query.execute()
        except Exception as e:
            logger.error("Supabase %s failed: %s", operation, e)
            raise DatabaseError(f"{operation} failed: {e}", operation=operation) from e
        logger.debug("Supabase %s succeeded", operation)
        return response

    @staticmethod
    def _first(response) -> Optional[Row]:
        data = response.data if response is not None else None
        if isinstance(data, list):
            return data[0] if data else None
        return data

    # Properties
    def get_properties(self) -> List[Row]:
        """Fetch all active properties with their agent profile."""
        query = (
            self._client.table(self.table)
            .select(PROPERTY_LIST_SELECT)
            .eq("is_active", True)
        )
        response = self._execute("get_properties", query)
        return response.data or []

    def get_property_by_id(self, property_id: str) -> Optional[Row]:
        """Fetch one active property with agent and images, or None."""
        query = (
            self._client.table(self.table)
            .select(PROPERTY_DETAIL_SELECT)
            .eq("id", property_id)
            .eq("is_active", True)
            .maybe_single()
        )
        # maybe_single() yields no response at all when nothing matched
        return self._first(self._execute("get_property_by_id", query))

    def create_property(self, property_data: Row, agent_id: str) -> Optional[Row]:
        query = self._client.table(self.table).insert({
            **property_data,
            "agent_id": agent_id,
        })
        return self._first(self._execute("create_property", query))

    def update_property(self, property_id: str, property_data: Row) -> Optional[Row]:
        query = (
            self._client.table(self.table)
            .update(property_data)
            .eq("id", property_id)
        )
        return self._first(self._execute("update_property", query))

    def delete_property(self, property_id: str) -> Optional[Row]:
        """Soft delete: the row stays but is no longer active."""
        query = (
            self._client.table(self.table)
            .update({"is_active": False})
            .eq("id", property_id)
        )
        return self._first(self._execute("delete_property", query))

    # Agents and users
    def get_agent_profile(self, user_id: str) -> Optional[Row]:
        query = (
            self._client.table(TABLE_AGENTS)
            .select(AGENT_PROFILE_SELECT)
            .eq("id", user_id)
            .maybe_single()
        )
        return self._first(self._execute("get_agent_profile", query))

    def create_user_profile(self, user_profile: Row) -> Optional[Row]:
        query = self._client.table(TABLE_USER_PROFILES).insert(user_profile)
        return self._first(self._execute("create_user_profile", query))

    def create_agent_profile(self, agent_data: Row) -> Optional[Row]:
        query = self._client.table(TABLE_AGENTS).insert(agent_data)
        return self._first(self._execute("create_agent_profile", query))

    def ping(self) -> bool:
        """Run the cheapest possible query to prove the database answers."""
        query = self._client.table(self.table).select("id").limit(1)
        self._execute("ping", query)
        return True


_service: Optional[SupabaseService] = None


def get_supabase_service() -> SupabaseService:
    """Get the process-wide Supabase service, creating it on first use.

    Raises:
        ConfigurationError: If credentials are missing.
    """
    global _service
    if _service is None:
        _service = SupabaseService()
    return _service


def set_supabase_service(service: Optional[SupabaseService]) -> None:
    """Replace the process-wide service, e.g. with one wrapping a prepared client."""
    global _service
    _service = service


def reset_supabase_service() -> None:
    set_supabase_service(None)

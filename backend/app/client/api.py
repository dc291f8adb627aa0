"""
Async HTTP client for the ledger service.

One method per endpoint; every method returns the decoded JSON body or
raises an ``ApiError``.  Requests are never retried.  A 401/403 from any
call clears the stored token before the AuthError propagates.
"""
import asyncio
import logging
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
import httpx
from app.core.config import settings
from app.client.errors import AuthError, UnknownError, raise_for_response
from app.client.token_store import TokenStore

logger = logging.getLogger(__name__)


class LedgerClient:
    """Client for the /api surface of the ledger service."""

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.token_store = token_store
        self._http = httpx.AsyncClient(base_url=base_url, transport=transport)

    @classmethod
    def from_settings(cls) -> "LedgerClient":
        """Build a client from API_BASE_URL and TOKEN_STORE_PATH."""
        return cls(settings.API_BASE_URL, TokenStore(settings.TOKEN_STORE_PATH))

    async def close(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "LedgerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ---------- plumbing ----------

    def _auth_headers(self) -> Dict[str, str]:
        token = self.token_store.get()
        if not token:
            raise AuthError("Not logged in")
        return {"Authorization": f"Bearer {token}"}

    async def _request(
        self,
        method: str,
        path: str,
        fallback: str,
        json: Any = None,
        auth: bool = True,
    ) -> Any:
        headers = self._auth_headers() if auth else {}

        try:
            response = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise UnknownError(fallback) from exc

        try:
            raise_for_response(response, fallback)
        except AuthError:
            if auth:
                self.token_store.clear()
            raise

        if response.status_code == 204:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise UnknownError(fallback, response.status_code) from exc

    # ---------- auth ----------

    async def register(self, name: str, email: str, password: str) -> Dict[str, Any]:
        """Create an account. Returns {id, name, email}."""
        return await self._request(
            "POST", "/api/auth/register", "Registration failed",
            json={"name": name, "email": email, "password": password},
            auth=False,
        )

    async def login(self, email: str, password: str) -> str:
        """Log in and persist the bearer token."""
        data = await self._request(
            "POST", "/api/auth/login", "Login failed",
            json={"email": email, "password": password},
            auth=False,
        )
        token = data.get("token") if isinstance(data, dict) else None
        if not token:
            raise UnknownError("Login failed")
        self.token_store.set(token)
        return token

    def logout(self) -> None:
        self.token_store.clear()

    # ---------- trips ----------

    async def list_trips(self) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/trips", "Could not load trips")

    async def create_trip(
        self,
        name: str,
        destination: str,
        start_date: date,
        end_date: date,
        currency: str,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = {
            "name": name,
            "destination": destination,
            "startDate": start_date.isoformat(),
            "endDate": end_date.isoformat(),
            "currency": currency,
        }
        if description:
            payload["description"] = description
        return await self._request("POST", "/api/trips", "Could not create trip", json=payload)

    async def get_summary(self, trip_id: int) -> Dict[str, Any]:
        return await self._request(
            "GET", f"/api/trips/{trip_id}/summary", "Could not load trip summary"
        )

    async def get_settlement(self, trip_id: int) -> Dict[str, Any]:
        return await self._request(
            "GET", f"/api/trips/{trip_id}/settlement", "Could not load trip settlement"
        )

    async def load_trip_detail(self, trip_id: int) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Fetch summary and settlement concurrently."""
        summary, settlement = await asyncio.gather(
            self.get_summary(trip_id),
            self.get_settlement(trip_id),
        )
        return summary, settlement

    # ---------- participants & expenses ----------

    async def add_participant(self, trip_id: int, name: str) -> Dict[str, Any]:
        return await self._request(
            "POST", f"/api/trips/{trip_id}/participants", "Could not add participant",
            json={"name": name},
        )

    async def add_expense(
        self,
        trip_id: int,
        amount: Decimal,
        expense_date: date,
        payer_id: int,
        description: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = {
            "amount": str(amount),
            "date": expense_date.isoformat(),
            "payerId": payer_id,
        }
        if description:
            payload["description"] = description
        return await self._request(
            "POST", f"/api/trips/{trip_id}/expenses", "Could not add expense", json=payload
        )

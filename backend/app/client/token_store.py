"""
Persistent storage for the bearer credential.

The token lives under a single key in a small JSON file, the way the
browser client keeps it in local storage.
"""
import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TOKEN_KEY = "authToken"


class TokenStore:
    """Reads, writes and clears the stored bearer token."""

    def __init__(self, path: str):
        self.path = Path(path).expanduser()

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except ValueError:
            logger.warning("Ignoring unreadable token store at %s", self.path)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self) -> Optional[str]:
        """Return the stored token, or None."""
        return self._read().get(TOKEN_KEY)

    def set(self, token: str) -> None:
        """Persist a token."""
        data = self._read()
        data[TOKEN_KEY] = token
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def clear(self) -> None:
        """Forget the token (session expired or logout)."""
        data = self._read()
        if data.pop(TOKEN_KEY, None) is not None:
            self.path.write_text(json.dumps(data), encoding="utf-8")

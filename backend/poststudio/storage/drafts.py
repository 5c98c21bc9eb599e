"""
Session-scoped draft storage.

Drafts live in a key-value store keyed by client session id, standing in for
the browser's local storage. Handlers receive the store through
Depends(get_draft_store) so tests and other deployments can swap it.
"""
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from ..models.records import Draft


class DraftStore:
    """In-process draft store: {session_id: {draft_id: Draft}}."""

    def __init__(self):
        self._drafts: dict[str, dict[str, Draft]] = {}
        self._lock = threading.Lock()

    def save(self, session_id: str, fields: dict[str, Any]) -> Draft:
        now = datetime.now(timezone.utc)
        draft = Draft(id=uuid.uuid4().hex, created_at=now, updated_at=now, **fields)
        with self._lock:
            self._drafts.setdefault(session_id, {})[draft.id] = draft
        return draft

    def list(self, session_id: str) -> list[Draft]:
        with self._lock:
            drafts = list(self._drafts.get(session_id, {}).values())
        return sorted(drafts, key=lambda draft: draft.updated_at, reverse=True)

    def get(self, session_id: str, draft_id: str) -> Optional[Draft]:
        with self._lock:
            return self._drafts.get(session_id, {}).get(draft_id)

    def update(self, session_id: str, draft_id: str, fields: dict[str, Any]) -> Optional[Draft]:
        with self._lock:
            drafts = self._drafts.get(session_id, {})
            existing = drafts.get(draft_id)
            if existing is None:
                return None
            # Re-validate so a bad field never replaces a stored draft
            updated = Draft.model_validate({
                **existing.model_dump(),
                **fields,
                "updated_at": datetime.now(timezone.utc),
            })
            drafts[draft_id] = updated
            return updated

    def delete(self, session_id: str, draft_id: str) -> bool:
        with self._lock:
            return self._drafts.get(session_id, {}).pop(draft_id, None) is not None

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._drafts.pop(session_id, None)


_draft_store = DraftStore()


def get_draft_store() -> DraftStore:
    """FastAPI dependency for the draft store."""
    return _draft_store

import os
from typing import Any, Dict, Iterable, Optional

import pandas as pd

try:
    from supabase import create_client, Client
except Exception:
    create_client = None
    Client = None  # type: ignore

from extraction.record import FIELD_NAMES

TABLE = "candidates"
CANDIDATE_COLUMNS = ["id", *FIELD_NAMES, "resume_file_name", "stored_file_path", "email_uid", "created_at"]


def get_supabase() -> Optional["Client"]:
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_KEY")
    if not url or not key or not create_client:
        return None
    try:
        sb = create_client(url, key)
        return sb
    except Exception:
        return None


def candidates_frame(rows: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    df = pd.DataFrame(list(rows))
    for col in CANDIDATE_COLUMNS:
        if col not in df.columns:
            df[col] = None
    return df[CANDIDATE_COLUMNS]


class SupabaseCandidates:
    """The ``candidates`` table. Writes raise on failure; callers decide."""

    def __init__(self, sb: "Client"):
        self.sb = sb

    def _exists(self, column: str, value: str) -> bool:
        res = self.sb.table(TABLE).select("id").eq(column, value).limit(1).execute()
        return bool(res.data)

    def exists_email(self, email: str) -> bool:
        return self._exists("email", email)

    def exists_uid(self, uid: str) -> bool:
        return self._exists("email_uid", uid)

    def insert(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        res = self.sb.table(TABLE).insert(payload).execute()
        return res.data[0]

    def update_stored_path(self, candidate_id, path: str) -> None:
        self.sb.table(TABLE).update({"stored_file_path": path}).eq("id", candidate_id).execute()

    def list(self, limit: int = 500) -> pd.DataFrame:
        res = self.sb.table(TABLE).select("*").order("created_at", desc=True).limit(limit).execute()
        return candidates_frame(res.data or [])

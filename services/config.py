import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_STORAGE_DIR = "storage/resumes"
DEFAULT_LOG_PATH = "logs/resume_processing.log"


class MissingConfiguration(ValueError):
    pass


def _flag(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def resume_storage_dir() -> str:
    """Where resume files live; needs no mailbox credentials."""
    load_dotenv()
    return os.getenv("RESUME_STORAGE_DIR", DEFAULT_STORAGE_DIR)


@dataclass(frozen=True)
class Settings:
    imap_host: str
    imap_user: str
    imap_password: str
    imap_port: int = 993
    imap_folder: str = "INBOX"
    storage_dir: str = DEFAULT_STORAGE_DIR
    log_path: str = DEFAULT_LOG_PATH
    skip_known_senders: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        """Read mailbox/storage settings from the environment (and ``.env``)."""
        load_dotenv()
        missing = [k for k in ("IMAP_HOST", "IMAP_USER", "IMAP_PASSWORD") if not os.getenv(k)]
        if missing:
            raise MissingConfiguration(f"Missing environment variables: {', '.join(missing)}")
        return cls(
            imap_host=os.getenv("IMAP_HOST"),
            imap_user=os.getenv("IMAP_USER"),
            imap_password=os.getenv("IMAP_PASSWORD"),
            imap_port=int(os.getenv("IMAP_PORT", "993")),
            imap_folder=os.getenv("IMAP_FOLDER", "INBOX"),
            storage_dir=resume_storage_dir(),
            log_path=os.getenv("RESUME_LOG_PATH", DEFAULT_LOG_PATH),
            skip_known_senders=_flag(os.getenv("SKIP_KNOWN_SENDERS")),
        )

import logging
import os
import secrets
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


def safe_filename(filename: str) -> str:
    name = Path(filename.replace("\\", "/")).name.strip()
    return name or "resume"


class ResumeStorage:
    """Resume files on local disk, keyed by paths relative to ``root``.

    A file is first staged under a provisional ``<random>_<filename>`` key,
    then moved to ``<candidate_id>_<filename>`` once the candidate row exists.
    """

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def path(self, key: str) -> Path:
        return self.root / key

    def stage(self, filename: str, content: bytes) -> str:
        self.root.mkdir(parents=True, exist_ok=True)
        key = f"{secrets.token_hex(5)}_{safe_filename(filename)}"
        self.path(key).write_bytes(content)
        return key

    def finalize(self, key: str, candidate_id, filename: str) -> str:
        """Move a staged file to its permanent key; safe to call again."""
        target = f"{candidate_id}_{safe_filename(filename)}"
        src, dst = self.path(key), self.path(target)
        if not src.exists():
            if dst.exists():
                return target
            raise FileNotFoundError(f"staged resume {key} is missing")
        os.replace(src, dst)
        logger.debug("moved %s -> %s", key, target)
        return target

import email
import imaplib
import logging
from dataclasses import dataclass, field
from email import policy
from email.utils import parseaddr
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass
class Attachment:
    filename: str
    content: bytes

    @property
    def extension(self) -> str:
        return self.filename.rsplit(".", 1)[-1].lower() if "." in self.filename else ""


@dataclass
class MailMessage:
    uid: str
    subject: str
    sender: str
    attachments: List[Attachment] = field(default_factory=list)


def parse_message(uid: str, raw: bytes) -> MailMessage:
    msg = email.message_from_bytes(raw, policy=policy.default)
    attachments = []
    for part in msg.iter_attachments():
        filename = part.get_filename()
        payload = part.get_payload(decode=True)
        if filename and payload:
            attachments.append(Attachment(filename=filename, content=payload))
    return MailMessage(
        uid=uid,
        subject=str(msg.get("Subject", "")),
        sender=parseaddr(str(msg.get("From", "")))[1],
        attachments=attachments,
    )


class Mailbox:
    """Unread messages of one IMAP folder, over SSL."""

    def __init__(self, host: str, user: str, password: str, port: int = 993, folder: str = "INBOX"):
        self.host = host
        self.user = user
        self.password = password
        self.port = port
        self.folder = folder
        self._conn: Optional[imaplib.IMAP4_SSL] = None

    @classmethod
    def from_settings(cls, settings) -> "Mailbox":
        return cls(settings.imap_host, settings.imap_user, settings.imap_password,
                   port=settings.imap_port, folder=settings.imap_folder)

    def __enter__(self) -> "Mailbox":
        self._conn = imaplib.IMAP4_SSL(self.host, self.port)
        self._conn.login(self.user, self.password)
        self._conn.select(self.folder)
        return self

    def __exit__(self, *exc) -> None:
        if self._conn is not None:
            try:
                self._conn.close()
            finally:
                self._conn.logout()
                self._conn = None

    @property
    def conn(self) -> imaplib.IMAP4_SSL:
        if self._conn is None:
            raise RuntimeError("Mailbox is not connected; use it as a context manager.")
        return self._conn

    def unseen(self) -> Iterator[MailMessage]:
        status, data = self.conn.uid("SEARCH", None, "UNSEEN")
        if status != "OK":
            raise imaplib.IMAP4.error(f"UNSEEN search failed: {status}")
        uids = data[0].split() if data and data[0] else []
        logger.info("Found %d unread messages.", len(uids))
        for uid in uids:
            # BODY.PEEK keeps the message unread until it is handled
            status, parts = self.conn.uid("FETCH", uid, "(BODY.PEEK[])")
            if status != "OK" or not parts or not isinstance(parts[0], tuple):
                logger.warning("Could not fetch message UID %s", uid.decode())
                continue
            yield parse_message(uid.decode(), parts[0][1])

    def mark_seen(self, uid: str) -> None:
        self.conn.uid("STORE", uid, "+FLAGS", "(\\Seen)")

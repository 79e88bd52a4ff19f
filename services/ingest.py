"""
Mailbox -> resume files -> candidate rows.

Each unread message with a PDF/DOCX/DOC attachment is handled as:
stage the file, extract its text, parse the fields, insert the candidate,
then move the staged file to ``<candidate id>_<filename>``.
"""
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from extraction.resume_parser import extract_fields
from services.config import DEFAULT_LOG_PATH, MissingConfiguration, Settings
from services.db import SupabaseCandidates, get_supabase
from services.mailbox import Mailbox, MailMessage
from services.storage import ResumeStorage
from services.text_extract import extract_text

logger = logging.getLogger(__name__)

RESUME_EXTENSIONS = {"pdf", "docx", "doc"}
UNKNOWN_NAME = "Unknown"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class IngestReport:
    entries: List[Dict[str, Any]] = field(default_factory=list)

    def add(self, uid: str, status: str, detail: str = "", candidate_id=None) -> None:
        self.entries.append({"uid": uid, "status": status, "detail": detail, "candidate_id": candidate_id})

    def count(self, status: str) -> int:
        return sum(1 for e in self.entries if e["status"] == status)

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.entries, columns=["uid", "status", "detail", "candidate_id"])


def candidate_payload(fields, message: MailMessage, filename: str, stored_path: str) -> Dict[str, Any]:
    data = fields.as_dict()
    data["full_name"] = data["full_name"] or UNKNOWN_NAME
    data["email"] = data["email"] or message.sender
    data.update(resume_file_name=filename, stored_file_path=stored_path, email_uid=message.uid)
    return data


def store_attachment(message: MailMessage, attachment, candidates, storage: ResumeStorage, report: IngestReport) -> bool:
    key = storage.stage(attachment.filename, attachment.content)
    text = extract_text(attachment.content, attachment.extension)
    if not text.strip():
        # staged file stays on disk for manual review
        logger.warning("Could not extract text from file: %s", attachment.filename)
        report.add(message.uid, "failed", f"no text in {attachment.filename}")
        return False

    fields = extract_fields(text, attachment.extension)
    try:
        row = candidates.insert(candidate_payload(fields, message, attachment.filename, key))
    except Exception as e:
        logger.error("Database insert failed for %s: %s", message.sender, e)
        report.add(message.uid, "failed", f"insert failed for {attachment.filename}")
        return False

    final_key = storage.finalize(key, row["id"], attachment.filename)
    candidates.update_stored_path(row["id"], final_key)
    logger.info("Processed candidate: %s (ID: %s)", row.get("full_name"), row["id"])
    report.add(message.uid, "processed", attachment.filename, candidate_id=row["id"])
    return True


def process_message(message: MailMessage, mailbox, candidates, storage: ResumeStorage,
                    report: IngestReport, skip_known_senders: bool = False) -> None:
    logger.info("Processing email UID: %s | Subject: %s", message.uid, message.subject)
    logger.info("Attachment count for UID %s: %d", message.uid, len(message.attachments))

    if not message.attachments:
        logger.info("Skipping email %s - No attachments.", message.uid)
        report.add(message.uid, "skipped", "no attachments")
        mailbox.mark_seen(message.uid)
        return

    if candidates.exists_uid(message.uid):
        logger.info("Skipping email %s - already processed.", message.uid)
        report.add(message.uid, "skipped", "already processed")
        mailbox.mark_seen(message.uid)
        return

    if skip_known_senders and candidates.exists_email(message.sender):
        logger.info("Skipping email %s - Candidate with email %s already exists.", message.uid, message.sender)
        report.add(message.uid, "skipped", "known sender")
        mailbox.mark_seen(message.uid)
        return

    processed = False
    for attachment in message.attachments:
        if attachment.extension not in RESUME_EXTENSIONS:
            continue
        processed = store_attachment(message, attachment, candidates, storage, report) or processed

    if processed:
        logger.info("Successfully processed email %s", message.uid)
    else:
        logger.warning("No valid resume extracted from email %s", message.uid)
        if not any(e["uid"] == message.uid for e in report.entries):
            report.add(message.uid, "skipped", "no resume attachment")
    mailbox.mark_seen(message.uid)


def process_mailbox(mailbox, candidates, storage: ResumeStorage, skip_known_senders: bool = False) -> IngestReport:
    report = IngestReport()
    for message in mailbox.unseen():
        try:
            process_message(message, mailbox, candidates, storage, report, skip_known_senders)
        except Exception as e:
            logger.error("Error processing message %s: %s", message.uid, e)
            report.add(message.uid, "failed", str(e))
    return report


def configure_logging(log_path: str) -> None:
    Path(log_path).parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(log_path, encoding="utf-8"), logging.StreamHandler()],
    )


def run(settings: Settings) -> IngestReport:
    sb = get_supabase()
    if sb is None:
        raise MissingConfiguration("SUPABASE_URL / SUPABASE_KEY are not configured.")
    candidates = SupabaseCandidates(sb)
    storage = ResumeStorage(settings.storage_dir)
    logger.info("Starting resume processing job...")
    with Mailbox.from_settings(settings) as mailbox:
        report = process_mailbox(mailbox, candidates, storage, settings.skip_known_senders)
    logger.info("Done: %d processed, %d skipped, %d failed.",
                report.count("processed"), report.count("skipped"), report.count("failed"))
    return report


def main() -> int:
    try:
        settings = Settings.from_env()
    except MissingConfiguration as e:
        configure_logging(DEFAULT_LOG_PATH)
        logger.critical("CRITICAL: Resume processing failed: %s", e)
        return 1
    configure_logging(settings.log_path)
    try:
        run(settings)
    except Exception as e:
        logger.critical("CRITICAL: Resume processing failed: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

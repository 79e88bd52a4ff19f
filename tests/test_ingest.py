import logging

import pytest

import services.ingest as ingest
from services.ingest import IngestReport, process_mailbox
from services.mailbox import Attachment, MailMessage
from services.storage import ResumeStorage


class FakeMailbox:
    def __init__(self, messages):
        self.messages = messages
        self.seen = []

    def unseen(self):
        return iter(self.messages)

    def mark_seen(self, uid):
        self.seen.append(uid)


class FakeCandidates:
    def __init__(self, emails=(), uids=(), fail_on=()):
        self.rows = []
        self.emails = set(emails)
        self.uids = set(uids)
        self.fail_on = set(fail_on)

    def exists_email(self, email):
        return email in self.emails

    def exists_uid(self, uid):
        return uid in self.uids

    def insert(self, payload):
        if payload["email_uid"] in self.fail_on:
            raise RuntimeError("duplicate key value violates unique constraint")
        row = dict(payload, id=len(self.rows) + 1)
        self.rows.append(row)
        return row

    def update_stored_path(self, candidate_id, path):
        self.rows[candidate_id - 1]["stored_file_path"] = path


@pytest.fixture(autouse=True)
def plain_text_attachments(monkeypatch):
    # attachments in these tests carry their resume text as raw bytes
    monkeypatch.setattr(ingest, "extract_text", lambda data, ext: data.decode("utf-8"))


def message(uid, *attachments, sender="asha@example.com"):
    return MailMessage(uid=uid, subject="Application", sender=sender, attachments=list(attachments))


def test_message_without_attachments_is_skipped(tmp_path):
    mailbox, candidates = FakeMailbox([message("1")]), FakeCandidates()
    report = process_mailbox(mailbox, candidates, ResumeStorage(tmp_path))
    assert mailbox.seen == ["1"]
    assert candidates.rows == []
    assert report.entries[0]["status"] == "skipped"


def test_resume_is_parsed_stored_and_renamed(tmp_path):
    att = Attachment("resume.pdf", b"Name: Asha Patel\nCTC: 5 LPA\nCity: Surat")
    mailbox, candidates = FakeMailbox([message("9", att)]), FakeCandidates()
    storage = ResumeStorage(tmp_path)

    report = process_mailbox(mailbox, candidates, storage)

    row = candidates.rows[0]
    assert row["full_name"] == "Asha Patel"
    assert row["email"] == "asha@example.com"
    assert row["salary"] == "5 LPA"
    assert row["current_location"] == "Surat"
    assert row["email_uid"] == "9"
    assert row["resume_file_name"] == "resume.pdf"
    assert row["stored_file_path"] == "1_resume.pdf"
    assert [p.name for p in tmp_path.iterdir()] == ["1_resume.pdf"]
    assert mailbox.seen == ["9"]
    assert report.count("processed") == 1


def test_missing_name_becomes_unknown(tmp_path):
    att = Attachment("cv.docx", b"CURRICULUM VITAE\nMobile: 9898989898")
    candidates = FakeCandidates()
    process_mailbox(FakeMailbox([message("3", att)]), candidates, ResumeStorage(tmp_path))
    assert candidates.rows[0]["full_name"] == "Unknown"
    assert candidates.rows[0]["mobile"] == "9898989898"


def test_empty_text_keeps_staged_file(tmp_path):
    att = Attachment("scan.pdf", b"   ")
    mailbox, candidates = FakeMailbox([message("4", att)]), FakeCandidates()
    report = process_mailbox(mailbox, candidates, ResumeStorage(tmp_path))
    assert candidates.rows == []
    assert len(list(tmp_path.iterdir())) == 1
    assert report.count("failed") == 1
    assert mailbox.seen == ["4"]


def test_unsupported_attachments_are_ignored(tmp_path):
    mailbox, candidates = FakeMailbox([message("5", Attachment("photo.png", b"x"))]), FakeCandidates()
    report = process_mailbox(mailbox, candidates, ResumeStorage(tmp_path))
    assert candidates.rows == []
    assert report.entries == [{"uid": "5", "status": "skipped", "detail": "no resume attachment", "candidate_id": None}]
    assert mailbox.seen == ["5"]


def test_duplicate_suppression(tmp_path):
    att = Attachment("resume.pdf", b"Name: Asha Patel")
    msgs = [message("6", att), message("7", att)]

    candidates = FakeCandidates(uids={"6"}, emails={"asha@example.com"})
    report = process_mailbox(FakeMailbox(msgs), candidates, ResumeStorage(tmp_path))
    assert [r["email_uid"] for r in candidates.rows] == ["7"]
    assert report.count("skipped") == 1

    candidates = FakeCandidates(uids={"6"}, emails={"asha@example.com"})
    report = process_mailbox(FakeMailbox(msgs), candidates, ResumeStorage(tmp_path), skip_known_senders=True)
    assert candidates.rows == []
    assert report.count("skipped") == 2


def test_insert_failure_does_not_stop_the_batch(tmp_path):
    att = Attachment("resume.pdf", b"Name: Asha Patel")
    mailbox = FakeMailbox([message("10", att), message("11", att)])
    candidates = FakeCandidates(fail_on={"10"})
    report = process_mailbox(mailbox, candidates, ResumeStorage(tmp_path))
    assert [r["email_uid"] for r in candidates.rows] == ["11"]
    assert report.count("failed") == 1
    assert report.count("processed") == 1
    assert mailbox.seen == ["10", "11"]


def test_message_error_is_reported(tmp_path):
    class BrokenCandidates(FakeCandidates):
        def exists_uid(self, uid):
            raise ConnectionError("supabase unreachable")

    att = Attachment("resume.pdf", b"Name: Asha Patel")
    report = process_mailbox(FakeMailbox([message("12", att)]), BrokenCandidates(), ResumeStorage(tmp_path))
    assert report.entries == [{"uid": "12", "status": "failed", "detail": "supabase unreachable", "candidate_id": None}]


def test_report_frame():
    report = IngestReport()
    report.add("1", "processed", "cv.pdf", candidate_id=3)
    report.add("2", "skipped", "no attachments")
    df = report.to_frame()
    assert list(df.columns) == ["uid", "status", "detail", "candidate_id"]
    assert len(df) == 2
    assert IngestReport().to_frame().empty


def test_job_logs_under_module_logger(tmp_path, caplog):
    with caplog.at_level(logging.INFO, logger="services.ingest"):
        process_mailbox(FakeMailbox([message("13")]), FakeCandidates(), ResumeStorage(tmp_path))
    assert any(r.name == "services.ingest" and "13" in r.getMessage() for r in caplog.records)

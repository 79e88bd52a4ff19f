import uuid

import pandas as pd
import streamlit as st
from dotenv import load_dotenv

from extraction.record import FIELD_NAMES
from extraction.resume_parser import extract_fields
from services.config import MissingConfiguration, Settings, resume_storage_dir
from services.db import SupabaseCandidates, get_supabase
from services.ingest import UNKNOWN_NAME, process_mailbox
from services.mailbox import Mailbox
from services.storage import ResumeStorage
from services.text_extract import extract_text

# --- Page Config & Theme ---
st.set_page_config(
    page_title="Resume Intake",
    page_icon="📥",
    layout="wide",
)

CUSTOM_CSS = """
<style>
:root { --radius: 16px; --ring: 1px solid rgba(255,255,255,0.06); }
.block-container { padding-top: 1.25rem; max-width: 1200px; }
header { visibility: hidden; }

.hero {
  margin: 0 0 1rem 0; padding: 1rem 1.2rem;
  border-radius: var(--radius);
  background: linear-gradient(135deg, rgba(30,121,255,0.18), rgba(139,92,246,0.18));
  border: var(--ring);
}
.stepper { display:flex; gap:.5rem; margin-bottom: .75rem; }
.step {
  padding: .45rem .85rem; border-radius: 999px;
  font-weight: 700; opacity:.7; border: var(--ring); background: #12141A;
}
.step.active { opacity:1; background: linear-gradient(90deg, rgba(30,121,255,.25), rgba(139,92,246,.25)); }
[data-testid="stFileUploader"] { border-radius: var(--radius); border: var(--ring); background: #10141c; }
.small { opacity: 0.75; font-size: 0.9rem; }
</style>
"""
st.markdown(CUSTOM_CSS, unsafe_allow_html=True)
st.markdown(
    """
    <div class="hero">
      <div style="font-size:1.1rem;font-weight:800;">Resumes in, candidate records out.</div>
      <div class="small">Rule-based field extraction: name, contact, education, salary and location.</div>
    </div>
    """,
    unsafe_allow_html=True,
)

load_dotenv()

FIELD_LABELS = {
    "full_name": "Full name",
    "email": "Email",
    "mobile": "Mobile",
    "education": "Education",
    "current_location": "Current location",
    "salary": "Salary",
    "preferred_location": "Preferred location",
}


# --- Session State ---
def _init_state():
    ss = st.session_state
    ss.setdefault("step", 1)
    ss.setdefault("raw_text", "")
    ss.setdefault("upload", None)
    ss.setdefault("fields", None)
    ss.setdefault("report_df", None)
    ss.setdefault("sb", get_supabase())

_init_state()

STEPS = [(1, "Upload"), (2, "Review & Save"), (3, "Mailbox"), (4, "Candidates")]


def stepper():
    cols = st.columns(len(STEPS))
    for i, (num, label) in enumerate(STEPS):
        with cols[i]:
            if st.button(f"{num}. {label}", key=f"step_{num}", use_container_width=True,
                         type="primary" if st.session_state.step == num else "secondary"):
                st.session_state.step = num
                st.rerun()


def _repo():
    sb = st.session_state.sb
    return SupabaseCandidates(sb) if sb else None


# --- Step 1: Upload ---
def step_upload():
    st.subheader("1) Upload a resume")
    file = st.file_uploader("Drop a resume (PDF/DOCX/TXT)", type=["pdf", "docx", "doc", "txt"], accept_multiple_files=False)
    if file is None:
        return

    data = file.getvalue()
    extension = file.name.rsplit(".", 1)[-1].lower()
    text = extract_text(data, extension)
    if not text.strip():
        st.error("No text could be extracted. Scanned PDFs are not supported; try a DOCX or TXT export.")
        return

    st.session_state.raw_text = text
    st.session_state.upload = {"name": file.name, "extension": extension, "data": data}
    with st.expander("Preview extracted text", expanded=False):
        st.text_area("Raw resume text", text, height=240)

    if st.button("Extract fields", type="primary"):
        with st.spinner("Reading the resume…"):
            st.session_state.fields = extract_fields(text, extension).as_dict()
        st.session_state.step = 2
        st.toast("Extracted. Review & fix next.", icon="📝")
        st.rerun()


# --- Step 2: Review & Save ---
def step_review():
    st.subheader("2) Review & Save")
    fields = st.session_state.fields
    if fields is None:
        st.info("Upload a resume first.")
        return

    found = sum(1 for v in fields.values() if v)
    st.caption(f"{found} of {len(FIELD_NAMES)} fields found. Empty fields were not detected.")

    with st.form(key="fields_form", clear_on_submit=False):
        col1, col2 = st.columns(2)
        edited = {}
        for i, name in enumerate(FIELD_NAMES):
            with (col1 if i % 2 == 0 else col2):
                edited[name] = st.text_input(FIELD_LABELS[name], fields.get(name) or "").strip() or None
        submitted = st.form_submit_button("Save candidate", type="primary")

    with st.expander("Raw text", expanded=False):
        st.text_area("Raw resume text", st.session_state.raw_text, height=300, disabled=True)

    if not submitted:
        return
    st.session_state.fields = edited
    repo = _repo()
    if repo is None:
        st.info("Supabase is not configured (SUPABASE_URL / SUPABASE_KEY); nothing was saved.")
        return
    if not edited["email"]:
        st.error("An email address is required to save a candidate.")
        return

    upload = st.session_state.upload
    storage = ResumeStorage(resume_storage_dir())
    key = storage.stage(upload["name"], upload["data"])
    payload = dict(edited, full_name=edited["full_name"] or UNKNOWN_NAME,
                   resume_file_name=upload["name"], stored_file_path=key,
                   email_uid=f"upload-{uuid.uuid4()}")
    try:
        row = repo.insert(payload)
    except Exception as e:
        st.warning(f"Supabase insert skipped: {e}")
        return
    repo.update_stored_path(row["id"], storage.finalize(key, row["id"], upload["name"]))
    st.toast(f"Saved candidate #{row['id']}", icon="✅")


# --- Step 3: Mailbox ---
def step_mailbox():
    st.subheader("3) Mailbox")
    st.markdown("<div class='small'>Reads unread messages, stores PDF/DOCX/DOC attachments and saves one candidate per resume.</div>",
                unsafe_allow_html=True)
    repo = _repo()
    try:
        settings = Settings.from_env()
    except MissingConfiguration as e:
        st.info(str(e))
        return
    if repo is None:
        st.info("Supabase is not configured (SUPABASE_URL / SUPABASE_KEY).")
        return

    st.write(f"Folder **{settings.imap_folder}** on **{settings.imap_host}** as {settings.imap_user}")
    if st.button("Process unread emails", type="primary"):
        with st.spinner("Processing mailbox…"):
            try:
                with Mailbox.from_settings(settings) as mailbox:
                    report = process_mailbox(mailbox, repo, ResumeStorage(settings.storage_dir),
                                             settings.skip_known_senders)
            except Exception as e:
                st.error(f"Mailbox processing failed: {e}")
                return
        st.session_state.report_df = report.to_frame()
        st.toast(f"{report.count('processed')} resumes stored", icon="📬")

    if st.session_state.report_df is not None:
        df = st.session_state.report_df
        if df.empty:
            st.info("No unread messages.")
        else:
            st.dataframe(df, use_container_width=True, hide_index=True)


# --- Step 4: Candidates ---
def step_candidates():
    st.subheader("4) Candidates")
    repo = _repo()
    if repo is None:
        st.info("Supabase is not configured (SUPABASE_URL / SUPABASE_KEY).")
        return
    try:
        df = repo.list()
    except Exception as e:
        st.warning(f"Could not load candidates: {e}")
        return
    if df.empty:
        st.info("No candidates yet.")
        return

    query = st.text_input("Filter (name, email, location)", "")
    if query:
        mask = pd.Series(False, index=df.index)
        for col in ["full_name", "email", "current_location", "preferred_location"]:
            mask |= df[col].fillna("").str.contains(query, case=False, regex=False)
        df = df[mask]
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.download_button("Download CSV", df.to_csv(index=False), file_name="candidates.csv")


# --- Router ---
stepper()

if st.session_state.step == 1:
    step_upload()
elif st.session_state.step == 2:
    step_review()
elif st.session_state.step == 3:
    step_mailbox()
else:
    step_candidates()

st.caption("© {year} Resume Intake".format(year=pd.Timestamp.today().year))

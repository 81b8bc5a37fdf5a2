"""Routine Analyzer - Streamlit front end."""

import json
import logging
from datetime import date, timedelta
from typing import Any, Dict, Optional

import streamlit as st
from dotenv import load_dotenv

from models.errors import FormatError, RangeError
from services.analysis_config import AnalysisSettings
from services.response_formatter import ResponseFormatter
from services.routine_analyzer import RoutineAnalyzer
from services.snapshot_loader import SnapshotLoader

# ============================================================================
# CONFIGURATION
# ============================================================================

# Load environment variables from .env file
load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

st.set_page_config(
    page_title="Routine Analyzer",
    page_icon="📊",
    layout="wide"
)

EXAMPLE_SNAPSHOT = {
    "events": [
        {"id": "1", "title": "Math lecture", "category": "class",
         "date": "2024-01-15", "start": "09:00", "end": "10:30"},
        {"id": "2", "title": "Cafe shift", "category": "job",
         "date": "2024-01-15", "start": "10:00", "end": "11:00"},
        {"id": "3", "title": "Project deadline", "category": "deadline",
         "date": "2024-01-17", "start": "14:00", "end": "18:00"},
    ],
    "availability": [
        {"weekday": "monday", "start": "09:00", "end": "17:00"},
        {"weekday": "wednesday", "start": "13:00"},
    ],
}

# ============================================================================
# SERVICE INITIALIZATION
# ============================================================================

@st.cache_resource
def get_services(_cache_version="v1"):
    """Initialize and cache the analyzer and the payload loader."""
    try:
        settings = AnalysisSettings.from_env()
    except ValueError as e:
        st.error(f"Invalid analyzer configuration: {e}")
        return None, None
    return RoutineAnalyzer(settings), SnapshotLoader()


def read_payload(loader: SnapshotLoader, uploaded, text: str) -> Optional[Dict[str, Any]]:
    """Parse the uploaded file, or the text area when nothing was uploaded."""
    raw = uploaded.getvalue() if uploaded is not None else text
    try:
        return loader.read_json(raw)
    except UnicodeDecodeError as e:
        st.error(f"Snapshot file is not UTF-8 text: {e}")
        return None
    except json.JSONDecodeError as e:
        st.error(f"Invalid JSON snapshot: {e}")
        return None

# ============================================================================
# PAGE
# ============================================================================

analyzer, loader = get_services()
if analyzer is None:
    st.stop()

st.title("📊 Routine Analyzer")

with st.sidebar:
    st.markdown("**Snapshot**")
    uploaded = st.file_uploader("Upload a JSON snapshot", type=["json"])
    st.markdown("---")
    range_start = st.date_input("Range start", value=date(2024, 1, 15))
    range_end = st.date_input("Range end", value=date(2024, 1, 15) + timedelta(days=6))
    st.markdown("---")
    show_all_slots = st.checkbox("Show all free slots", value=False)

text = st.text_area(
    "Snapshot JSON",
    value=json.dumps(EXAMPLE_SNAPSHOT, indent=2),
    height=300,
)

payload = read_payload(loader, uploaded, text)

if payload is not None and st.button("Analyze", key="analyze_button"):
    try:
        events, windows, _, _ = loader.load_snapshot(payload)
        report = analyzer.analyze(
            events,
            windows,
            range_start,
            range_end,
        )
    except (FormatError, RangeError) as e:
        st.markdown(ResponseFormatter.format_error(
            "Invalid Schedule",
            str(e),
            suggestions=["Times must be HH:MM", "Dates must be YYYY-MM-DD"],
        ))
    else:
        st.markdown(ResponseFormatter.format_report(report))
        if show_all_slots:
            st.markdown(ResponseFormatter.format_free_slots(list(report.free_slots), limit=None))
        with st.expander("Raw report", expanded=False):
            st.json(report.to_dict())

        offer_data = payload.get("job_offer")
        if offer_data:
            try:
                offer = loader.load_job_offer(offer_data)
            except FormatError as e:
                st.markdown(ResponseFormatter.format_error("Invalid Job Offer", str(e)))
            else:
                result = analyzer.job_compatibility(
                    offer, events, windows, report.range_start, report.range_end
                )
                st.markdown(ResponseFormatter.format_job_compatibility(result))

        candidate_data = payload.get("candidate_event")
        if candidate_data:
            try:
                candidate = loader.load_event(candidate_data)
                suggestion = analyzer.quick_suggestion(candidate, events)
            except FormatError as e:
                st.markdown(ResponseFormatter.format_error("Invalid Event", str(e)))
            else:
                st.markdown(ResponseFormatter.format_quick_suggestion(suggestion))

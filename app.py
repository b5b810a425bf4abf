from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from pathlib import Path

import pandas as pd
import streamlit as st

from pastery_cli.config import load_config, validate_runtime
from pastery_cli.duration import MAX_AMOUNT, DurationError, parse_duration
from pastery_cli.languages import AUTODETECT, LANGUAGES
from pastery_cli.models import Options
from pastery_cli.runner import create_paste
from pastery_cli.uploader import PasteError


st.set_page_config(page_title="Pastery", layout="wide")
st.title("Pastery paste uploader")

config = load_config()

st.caption(f"Current config: base_url={config.base_url} | timeout_sec={config.timeout_sec}")

with st.expander("Usage", expanded=False):
    st.markdown(
        "\n".join(
            [
                "- Paste text on the left or upload a file; typed text wins over the upload",
                "- Duration is `<amount><unit>` with unit one of `m h d w mo y` (`mo` is 4 weeks), at most `100y`",
                "- With no title, the uploaded file's name is used",
                "- Max views of `0` means no view limit",
            ]
        )
    )

api_key = st.text_input("API key", value=config.api_key or "", type="password")
config = replace(config, api_key=api_key or None)

runtime_errors = validate_runtime(config)
if runtime_errors:
    st.error("Runtime checks failed:\n- " + "\n- ".join(runtime_errors))

text_col, meta_col = st.columns([3, 2])
with text_col:
    paste_text = st.text_area("Content", height=320)
    uploaded_file = st.file_uploader("Or upload a file")

with meta_col:
    languages = [AUTODETECT] + sorted(LANGUAGES - {AUTODETECT})
    lang = st.selectbox("Language", languages, index=0)
    duration_text = st.text_input("Duration", value="1d")
    title = st.text_input("Title (optional)")
    max_views = st.number_input("Max views", min_value=0, max_value=MAX_AMOUNT, value=0, step=1)

if "pastery_history" not in st.session_state:
    st.session_state["pastery_history"] = []
if "pastery_logs" not in st.session_state:
    st.session_state["pastery_logs"] = []


if st.button("Create paste", type="primary"):
    logs: list[str] = st.session_state["pastery_logs"]
    log_box = st.empty()

    def log_cb(message: str) -> None:
        ts = datetime.now().strftime("%H:%M:%S")
        logs.append(f"[{ts}] {message}")
        log_box.code("\n".join(logs[-200:]))

    if paste_text.strip():
        body = paste_text.encode("utf-8")
        path = None
    elif uploaded_file is not None:
        body = uploaded_file.getvalue()
        path = Path(uploaded_file.name)
    else:
        body = b""
        path = None

    try:
        duration = parse_duration(duration_text.strip())
    except DurationError as exc:
        st.error(f"Invalid duration: {exc}")
        duration = None

    if not body:
        st.warning("Nothing to paste.")
    elif duration is None:
        log_cb("Invalid duration, skipped")
    elif runtime_errors:
        log_cb("Runtime checks failed, skipped")
    else:
        options = Options(
            api_key=api_key,
            lang=lang,
            duration=duration,
            title=title or None,
            max_views=int(max_views) or None,
            path=path,
        )
        try:
            result = create_paste(options, body, config, log_cb=log_cb)
        except PasteError as exc:
            log_cb(f"Failed: {exc}")
            st.error(str(exc))
        else:
            st.success(f"Created {result.url}")
            st.session_state["pastery_history"].append(
                {
                    "url": result.url,
                    "title": result.title,
                    "language": result.language,
                    "duration_minutes": result.duration_minutes,
                    "created_at": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
                }
            )

history = st.session_state["pastery_history"]
if history:
    st.subheader("Pastes created this session")
    st.dataframe(pd.DataFrame(history), use_container_width=True)

st.subheader("Log")
logs = st.session_state["pastery_logs"]
st.code("\n".join(logs[-500:]) if logs else "(no log yet)")

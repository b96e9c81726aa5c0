# Role: Streamlit chat UI for manual testing.
# - Backend is authoritative: every message is one GET /?message=... call.
# - Server errors (500 envelope) are shown inline instead of crashing the page.

from __future__ import annotations

import os
from typing import Any, Dict, Tuple

import requests
import streamlit as st

BACKEND_URL = os.getenv("INTENT_BRIDGE_URL", "http://127.0.0.1:7000").rstrip("/")


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "messages" not in st.session_state:
        st.session_state["messages"] = []
    if "busy" not in st.session_state:
        st.session_state["busy"] = False


# ----------------------------
# Backend calls
# ----------------------------
def send_to_backend(user_message: str) -> Tuple[bool, str]:
    """Return (ok, text): the bot reply on success, the server's error text otherwise."""
    resp = requests.get(f"{BACKEND_URL}/", params={"message": user_message}, timeout=30)
    payload: Dict[str, Any] = resp.json()

    if resp.status_code == 200:
        return True, payload["result"]["bot"]
    return False, str(payload.get("error") or payload.get("message") or resp.status_code)


# ----------------------------
# Chat
# ----------------------------
def render_sidebar() -> None:
    st.sidebar.title("Intent Bridge")
    st.sidebar.caption(f"Backend: {BACKEND_URL}")

    # Dialogflow sessions are per message, so clearing only affects what is shown here.
    if st.sidebar.button("Clear chat", width="stretch", disabled=st.session_state["busy"]):
        st.session_state["messages"] = []
        st.rerun()


def render_chat() -> None:
    for msg in st.session_state["messages"]:
        with st.chat_message(msg["role"]):
            if msg.get("error"):
                st.error(msg["content"])
            else:
                st.write(msg["content"])


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Intent Bridge", layout="wide")

    st.title("Intent Bridge")
    st.caption("Messages are sent to the Dialogflow agent one at a time.")

    ensure_session()
    render_sidebar()
    render_chat()

    user_input = st.chat_input("Say something…", disabled=st.session_state["busy"])
    if not user_input:
        return

    # Echo user message immediately
    st.session_state["messages"].append({"role": "user", "content": user_input})
    with st.chat_message("user"):
        st.write(user_input)

    st.session_state["busy"] = True
    try:
        with st.spinner("Thinking..."):
            ok, text = send_to_backend(user_input)

        st.session_state["messages"].append({"role": "assistant", "content": text, "error": not ok})
        with st.chat_message("assistant"):
            if ok:
                st.write(text)
            else:
                st.error(text)

    except requests.RequestException:
        msg = f"I couldn't reach the backend. Make sure the API is running on {BACKEND_URL}."
        st.session_state["messages"].append({"role": "assistant", "content": msg, "error": True})
        with st.chat_message("assistant"):
            st.error(msg)
    finally:
        st.session_state["busy"] = False


if __name__ == "__main__":
    main()

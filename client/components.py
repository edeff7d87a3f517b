# client/components.py
import streamlit as st
import pandas as pd

CARD_COLUMNS = ["name", "position", "email", "phone", "companyName", "companyAddress", "category"]

def cards_frame(rows) -> pd.DataFrame:
    """list[dict] of cards -> dataframe with the canonical columns first."""
    df = pd.DataFrame(rows or [])
    for col in CARD_COLUMNS:
        if col not in df.columns:
            df[col] = ""
    extra = [c for c in df.columns if c not in CARD_COLUMNS]
    return df[CARD_COLUMNS + extra]

def show_table(rows, caption: str | None = None):
    if caption:
        st.caption(caption)
    if not rows:
        st.info("No cards.")
        return
    st.dataframe(cards_frame(rows), use_container_width=True)

def show_error(e: Exception):
    """Surface the API's {error, details} body when there is one."""
    resp = getattr(e, "response", None)
    if resp is not None:
        try:
            body = resp.json()
            st.error(f"{body.get('error')}: {body.get('details')}")
            return
        except ValueError:
            pass
    st.error(e)

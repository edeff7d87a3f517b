import streamlit as st
import api as API
from components import show_table, show_error, CARD_COLUMNS

st.title("📚 Cards")

try:
    rows = API.cards()
except Exception as e:
    show_error(e)
    rows = []

show_table(rows, caption=f"{len(rows)} saved card(s), newest first")

if rows:
    labels = {f"#{c['id']} {c['name'] or '(no name)'} — {c['companyName']}": c for c in rows}
    choice = st.selectbox("Card", list(labels), key="card_pick")
    card = labels[choice]

    tab1, tab2 = st.tabs(["Edit", "Delete"])
    with tab1:
        with st.form("edit_card"):
            fields = {f: st.text_input(f, value=card.get(f) or "") for f in CARD_COLUMNS}
            if st.form_submit_button("Update"):
                try:
                    changed = {k: v for k, v in fields.items() if v != (card.get(k) or "")}
                    API.update(card["id"], changed)
                    st.success("Updated.")
                    st.rerun()
                except Exception as e:
                    show_error(e)
    with tab2:
        if st.button("🗑️ Delete this card", key="btn_delete"):
            try:
                st.success(API.delete(card["id"])["message"])
                st.rerun()
            except Exception as e:
                show_error(e)

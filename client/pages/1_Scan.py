import streamlit as st
import api as API
from components import cards_frame, show_error, CARD_COLUMNS

st.title("📷 Scan")

if "scanned" not in st.session_state:
    st.session_state.scanned = []
if "raw_response" not in st.session_state:
    st.session_state.raw_response = ""

up = st.file_uploader("Business card photo (max 10 MB)", type=["jpg", "jpeg", "png"], key="scan_upload")
if up is not None:
    st.image(up, width=420)
    if st.button("🔍 Scan cards", key="btn_scan"):
        with st.spinner("Asking the vision model..."):
            try:
                res = API.scan(up.name, up.getvalue(), up.type or "image/jpeg")
                st.session_state.scanned = res["cards"]
                st.session_state.raw_response = res.get("rawResponse", "")
                if res["count"]:
                    st.success(f"Found {res['count']} card(s).")
                else:
                    st.warning("No cards could be parsed. Check the raw response below.")
            except Exception as e:
                show_error(e)

if st.session_state.scanned:
    st.subheader("Review")
    edited = st.data_editor(
        cards_frame(st.session_state.scanned)[CARD_COLUMNS],
        num_rows="dynamic",
        use_container_width=True,
        key="scan_editor",
    )
    if st.button("💾 Save cards", key="btn_save"):
        try:
            rows = edited.fillna("").to_dict(orient="records")
            res = API.save(rows)
            st.success(res["message"])
            st.session_state.scanned = []
        except Exception as e:
            show_error(e)

if st.session_state.raw_response:
    with st.expander("Raw model response"):
        st.code(st.session_state.raw_response)

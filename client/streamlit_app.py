# client/streamlit_app.py
import pandas as pd
import streamlit as st
import api as API
from components import show_error

st.set_page_config(page_title="Card Scanner", layout="wide")
st.title("📇 Business Card Scanner")

with st.sidebar:
    st.caption(f"API: `{API.API}`")
    try:
        API.healthz()
        st.success("Backend is up")
    except Exception as e:
        st.error(f"Backend unreachable: {e}")

try:
    rows = API.cards()
except Exception as e:
    show_error(e)
    st.stop()

df = pd.DataFrame(rows)
c1, c2, c3 = st.columns(3)
c1.metric("Saved cards", len(df))
c2.metric("Companies", int(df["companyName"].replace("", pd.NA).nunique()) if len(df) else 0)
c3.metric("Last saved", df["createdAt"].iloc[0][:10] if len(df) else "—")

if len(df):
    st.subheader("By category")
    counts = df["category"].replace("", "(none)").value_counts()
    st.bar_chart(counts)

    st.subheader("Latest")
    st.dataframe(df.head(5)[["name", "position", "companyName", "email", "phone"]], use_container_width=True)
else:
    st.info("No cards yet. Open **📷 Scan** in the sidebar to add some.")

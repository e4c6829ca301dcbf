# authkeeper_ui/ui/home.py

import streamlit as st
from authkeeper_ui.services.api import logout_user


def home_page(username=None):
    if not username:
        st.title("Welcome")
        st.write("The main working screen")
        if st.button("Login"):
            st.session_state["page"] = "login"
            st.rerun()
        return

    flash = st.session_state.pop("flash", None)
    if flash:
        st.success(flash)

    st.title("Home")
    st.subheader(f"Welcome {username}!")

    if st.button("Logout"):
        result = logout_user()
        if result.get("error"):
            st.error(result["error"])
            return
        st.session_state["username"] = None
        st.session_state["page"] = "login"
        st.rerun()

# authkeeper_ui/main.py

import streamlit as st
from authkeeper_ui.services.api import get_session
from authkeeper_ui.ui.home import home_page
from authkeeper_ui.ui.login import login_page, register_page


st.set_page_config(page_title="authkeeper")


def resolve_initial_page():
    """
    Reads the stored session once per browser session and picks the first screen.
    An unreachable backend counts as logged out.
    """
    result = get_session()
    username = None if result.get("error") else result.get("username")
    st.session_state["username"] = username
    st.session_state["page"] = "home" if username else "login"


if "page" not in st.session_state:
    resolve_initial_page()

page = st.session_state["page"]
if page == "register":
    register_page()
elif page == "home":
    home_page(st.session_state.get("username"))
else:
    login_page()

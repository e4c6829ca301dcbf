# authkeeper_ui/ui/login.py

import streamlit as st
from authkeeper_ui.services.api import login_user, register_user


def go_to(page, username=None):
    st.session_state["page"] = page
    if username is not None:
        st.session_state["username"] = username
    st.rerun()


def login_page():
    st.title("Login")

    with st.form("login_form", clear_on_submit=True):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        submitted = st.form_submit_button("Login")

    if submitted:
        if not username or not password:
            st.warning("Please enter both username and password")
        else:
            with st.spinner("Logging in..."):
                result = login_user(username, password)
            if result.get("error"):
                st.error(result["error"])
            else:
                st.session_state["flash"] = result.get("message", "Login successful")
                go_to("home", result["username"])

    if st.button("Don't have an account? Register"):
        go_to("register")


def register_page():
    st.title("Register")

    with st.form("register_form"):
        username = st.text_input("Username")
        password = st.text_input("Password", type="password")
        confirm_password = st.text_input("Confirm password", type="password")
        submitted = st.form_submit_button("Register")

    if submitted:
        if not username or not password or not confirm_password:
            st.warning("Please enter all the fields.")
        elif password != confirm_password:
            st.error("Passwords do not match")
        else:
            with st.spinner("Creating your account..."):
                result = register_user(username, password, confirm_password)
            if result.get("error"):
                st.error(result["error"])
            else:
                st.session_state["flash"] = result.get("message", "Registration successful!")
                go_to("home", result["username"])

    if st.button("Already have an account? Login"):
        go_to("login")

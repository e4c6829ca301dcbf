# authkeeper_ui/services/api.py

import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")


def _unwrap(res):
    """
    Returns the `data` part of a success envelope,
    or {"error": message} for anything else.
    """
    try:
        payload = res.json()
    except ValueError:
        return {"error": f"Server error: {res.status_code}"}

    if res.status_code == 200 and payload.get("status") == "success":
        return payload.get("data") or {}
    return {"error": payload.get("message", f"Server error: {res.status_code}")}


# -------------------------------
# Session
# -------------------------------

def get_session():
    """
    Reads the logged-in username stored on this device.
    """
    try:
        res = requests.get(f"{FASTAPI_URL}/session")
        return _unwrap(res)
    except requests.RequestException as e:
        return {"error": str(e)}


def logout_user():
    try:
        res = requests.post(f"{FASTAPI_URL}/logout")
        return _unwrap(res)
    except requests.RequestException as e:
        return {"error": str(e)}


# -------------------------------
# Authentication
# -------------------------------

def login_user(username, password):
    """
    Logs in a user and stores the session on success.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/login",
            json={"username": username, "password": password},
        )
        return _unwrap(res)
    except requests.RequestException as e:
        return {"error": str(e)}


def register_user(username, password, confirm_password):
    """
    Creates an account and logs it in right away.
    """
    try:
        res = requests.post(
            f"{FASTAPI_URL}/register",
            json={
                "username": username,
                "password": password,
                "confirm_password": confirm_password,
            },
        )
        return _unwrap(res)
    except requests.RequestException as e:
        return {"error": str(e)}

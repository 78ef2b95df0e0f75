"""
HTML view routes for the fixture login demo.

Routes:
    GET  /                      - Redirect to the login page
    GET  /login.html            - Login form
    GET  /dashboard.html        - Landing page after a successful login
    GET  /forgot-password.html  - Password reset placeholder
"""

import logging

from flask import Blueprint, current_app, redirect, render_template, url_for

logger = logging.getLogger(__name__)

views_bp = Blueprint("views", __name__)

# Messages shown by the login form's client-side validation
BOTH_REQUIRED_MESSAGE = "Username and password are required"
PASSWORD_REQUIRED_MESSAGE = "Password required"
USERNAME_REQUIRED_MESSAGE = "Username required"
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password"


@views_bp.route("/")
def index():
    """Send visitors to the login page."""
    return redirect(url_for("views.login"))


@views_bp.route("/login.html")
def login():
    """
    Render the login form.

    The demo credentials are handed to the template so the in-page
    script can decide between the dashboard and the error message.
    """
    logger.info("GET /login.html - Rendering login page")
    return render_template(
        "login.html",
        demo_username=current_app.config["DEMO_USERNAME"],
        demo_password=current_app.config["DEMO_PASSWORD"],
        messages={
            "both": BOTH_REQUIRED_MESSAGE,
            "password": PASSWORD_REQUIRED_MESSAGE,
            "username": USERNAME_REQUIRED_MESSAGE,
            "invalid": INVALID_CREDENTIALS_MESSAGE,
        },
    )


@views_bp.route("/dashboard.html")
def dashboard():
    """Render the dashboard."""
    logger.info("GET /dashboard.html - Rendering dashboard")
    return render_template("dashboard.html")


@views_bp.route("/forgot-password.html")
def forgot_password():
    """Render the forgot-password page."""
    logger.info("GET /forgot-password.html - Rendering forgot password page")
    return render_template("forgot_password.html")

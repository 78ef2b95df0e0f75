"""Live-server helpers that give the browser suite a healthy base URL."""

from __future__ import annotations

import logging
import os
import threading
import time
from collections.abc import Generator

import requests
from flask import Flask

logger = logging.getLogger(__name__)

HEALTH_PATH = "/api/health"
SERVICE_NAME = "login-demo"


def is_server_ready(url: str, timeout: int = 2) -> bool:
    """
    Return True when the health endpoint responds with 200 and
    identifies itself as the login demo.
    """
    try:
        response = requests.get(f"{url}{HEALTH_PATH}", timeout=timeout)
    except requests.RequestException:
        return False
    if response.status_code != 200:
        return False
    try:
        payload = response.json()
    except ValueError:
        return False
    return isinstance(payload, dict) and payload.get("service") == SERVICE_NAME


def wait_for_healthy(url: str, timeout: float = 30, interval: float = 0.2) -> None:
    """Poll the health endpoint until ready or timeout."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_server_ready(url):
            logger.info("Fixture server at %s is healthy", url)
            return
        time.sleep(interval)
    raise RuntimeError(f"Fixture server at {url} not healthy after {timeout}s")


def start_server_thread(app: Flask, host: str, port: int) -> threading.Thread:
    """
    Run the Flask development server in a background daemon thread.

    The thread dies with the interpreter, so nothing has to stop it
    explicitly at the end of the test session.
    """
    server_thread = threading.Thread(
        target=lambda: app.run(host=host, port=port, use_reloader=False, threaded=True),
        name="fixture-live-server",
    )
    server_thread.daemon = True
    server_thread.start()
    logger.info("Started fixture server thread on %s:%s", host, port)
    return server_thread


def live_server_url(
    app: Flask,
    *,
    base_url_env: str = "TEST_BASE_URL",
    health_timeout: float = 30,
) -> Generator[str, None, None]:
    """
    Yield a healthy base URL serving the fixture pages.

    Priority:
    1. Use explicit base URL from `base_url_env` (and wait for health).
    2. Reuse a server already answering on the configured host/port.
    3. Start `app` in a background thread and wait for health.
    """
    provided_base_url = os.getenv(base_url_env)
    if provided_base_url:
        base_url = provided_base_url.rstrip("/")
        wait_for_healthy(base_url, timeout=health_timeout)
        yield base_url
        return

    host = app.config["LIVE_SERVER_HOST"]
    port = app.config["LIVE_SERVER_PORT"]
    base_url = f"http://{host}:{port}"

    if not is_server_ready(base_url):
        start_server_thread(app, host, port)
        wait_for_healthy(base_url, timeout=health_timeout)

    yield base_url

"""Offline sanity checks for the database URL and service account file."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

# https://<project>-default-rtdb.firebaseio.com
# https://<project>-default-rtdb.<region>.firebasedatabase.app
_DATABASE_HOST_PATTERN = re.compile(
    r"^https?://([^./]+)(?:\.[^/]*)?\.(?:firebaseio\.com|firebasedatabase\.app)(?:/|$)"
)


def extract_project_id(database_url: str) -> str | None:
    """Guess the Firebase project ID from a Realtime Database URL."""
    match = _DATABASE_HOST_PATTERN.match(database_url.strip())
    if not match:
        return None
    return match.group(1).replace("-default-rtdb", "")


def read_service_account(service_account_path: str) -> dict[str, str | None] | None:
    """Return the identifying fields of a service account file, or None if unreadable."""
    try:
        with open(service_account_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read service account file {service_account_path}: {e}")
        return None
    if not isinstance(data, dict):
        return None
    return {
        "project_id": data.get("project_id"),
        "client_email": data.get("client_email"),
        "type": data.get("type"),
    }


def suggest_database_url(project_id: str) -> str:
    return f"https://{project_id}-default-rtdb.firebaseio.com"


def validate_firebase_config(database_url: str, service_account_path: str) -> list[str]:
    """Return a list of human-readable configuration issues (empty when none are found)."""
    issues = []

    url_project = extract_project_id(database_url)
    if not url_project:
        issues.append(f"Could not extract project ID from database URL: {database_url}")

    if not Path(service_account_path).is_file():
        issues.append(f"Service account file not found: {service_account_path}")
        return issues

    info = read_service_account(service_account_path)
    if info is None:
        issues.append(f"Could not read service account file: {service_account_path}")
    elif info["type"] != "service_account":
        issues.append("Credential file is not a service account key")
    elif url_project and info["project_id"] and info["project_id"] != url_project:
        issues.append(
            f"Project mismatch: service account is for '{info['project_id']}' "
            f"but database URL is for '{url_project}'"
        )
        issues.append(f"Suggested database URL: {suggest_database_url(info['project_id'])}")

    return issues


def log_config_issues(database_url: str, service_account_path: str) -> list[str]:
    issues = validate_firebase_config(database_url, service_account_path)
    for issue in issues:
        logger.warning(issue)
    return issues

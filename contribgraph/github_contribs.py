from __future__ import annotations
import json
import logging
from typing import Any, Dict
import requests

from .models import Calendar

logger = logging.getLogger(__name__)

GQL_ENDPOINT = "https://api.github.com/graphql"

QUERY = """
query($login:String!) {
  user(login:$login) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            weekday
          }
        }
      }
    }
  }
}
"""


class GitHubAPIError(RuntimeError):
    """Raised when GitHub answers with a non-success status or an unusable body."""


class GitHubGraphQLError(GitHubAPIError):
    """Raised when the GraphQL payload carries an `errors` list."""


def _auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"bearer {token}"}


def extract_calendar(payload: Dict[str, Any]) -> Calendar:
    if payload.get("errors"):
        raise GitHubGraphQLError(f"GraphQL errors:\n{json.dumps(payload['errors'], indent=2)}")
    try:
        raw = payload["data"]["user"]["contributionsCollection"]["contributionCalendar"]
    except (KeyError, TypeError) as e:
        raise GitHubAPIError(f"Unexpected GitHub GraphQL response shape: missing {e}") from e
    if not isinstance(raw, dict):
        raise GitHubAPIError("Unexpected GitHub GraphQL response shape: contributionCalendar is not an object")
    return Calendar.from_api(raw)


def fetch_calendar(login: str, token: str, timeout: float = 25.0, endpoint: str = GQL_ENDPOINT) -> Calendar:
    """
    One POST against the GraphQL API for the rolling-year calendar of `login`.
    No retries: any failure propagates to the caller.
    """
    if not login:
        raise ValueError("empty login. Set GH_PROFILE_USER or github_user in config.yml")

    headers = {"Content-Type": "application/json"}
    headers.update(_auth_header(token))

    logger.info("Fetching contribution calendar for %s", login)
    r = requests.post(endpoint, json={"query": QUERY, "variables": {"login": login}}, headers=headers, timeout=timeout)
    if r.status_code != 200:
        raise GitHubAPIError(f"GitHub API error: {r.status_code}\n{r.text}")

    calendar = extract_calendar(r.json())
    logger.info("Received %d weeks, %d contributions", len(calendar.weeks), calendar.total)
    return calendar

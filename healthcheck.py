#!/usr/bin/env python3
"""
Container health probe for the Bank API.

Issues a GET to the service's ``/health`` endpoint and exits with
status 0 when the JSON body reports ``"status": "ok"``, 1 otherwise.
Connection failures and unparsable bodies also exit with 1.

Usage:
    python healthcheck.py [--url http://localhost:9090/health] [--timeout 5]
"""

import argparse
import os
import sys
from typing import Optional

import requests

DEFAULT_URL = os.getenv("HEALTHCHECK_URL", "http://localhost:9090/health")


def check_health(url: str = DEFAULT_URL, timeout: float = 5.0, session: Optional[requests.Session] = None) -> int:
    """Probe ``url`` and return the process exit code (0 healthy, 1 not)."""
    http = session or requests.Session()
    try:
        response = http.get(url, timeout=timeout)
    except requests.RequestException as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    body = response.text
    try:
        payload = response.json()
    except ValueError as exc:
        print(f"Error parsing JSON response body: {exc}", file=sys.stderr)
        return 1

    if isinstance(payload, dict) and payload.get("status") == "ok":
        return 0

    print(f"Unhealthy response received: {body}", file=sys.stderr)
    return 1


def main(argv=None):
    ap = argparse.ArgumentParser(description="Check the health of the Bank API.")
    ap.add_argument("--url", default=DEFAULT_URL, help=f"Health endpoint to probe (default: {DEFAULT_URL})")
    ap.add_argument("--timeout", type=float, default=5.0, help="Request timeout in seconds")
    args = ap.parse_args(argv)
    sys.exit(check_health(args.url, args.timeout))


if __name__ == "__main__":
    main()

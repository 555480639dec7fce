"""
Script to add sample data to the roster via the REST API.
Make sure the server is running before executing this script.

Usage:
    python add_data.py
"""

import json
import os
import sys

import requests

from roster.core.enums import RoleType
from roster.services import SAMPLE_RECORDS


def _console_supports_utf8() -> bool:
    enc = getattr(sys.stdout, "encoding", None)
    return enc is not None and "utf" in enc.lower()


_OK_CHAR = "✓" if _console_supports_utf8() else "[OK]"
_FAIL_CHAR = "✗" if _console_supports_utf8() else "[FAIL]"

ENDPOINTS = {
    RoleType.TEACHER: "/teachers",
    RoleType.ADMIN: "/admins",
    RoleType.STUDENT: "/students",
}


def _detect_base_url() -> str:
    """Determine a reachable base URL.

    Priority: environment variable `ROSTER_BASE_URL`, then common local ports.
    If nothing responds, fall back to http://127.0.0.1:8000.
    """
    env = os.environ.get("ROSTER_BASE_URL")
    if env:
        return env

    candidates = [
        "http://127.0.0.1:8000",
        "http://127.0.0.1:8888",
        "http://localhost:8000",
        "http://localhost:8888",
    ]

    for c in candidates:
        try:
            resp = requests.get(f"{c}/health", timeout=0.5)
            if resp.status_code == 200:
                return c
        except requests.exceptions.RequestException:
            continue

    return candidates[0]


def check_server(base_url):
    """Check if the server is running."""
    try:
        response = requests.get(f"{base_url}/health", timeout=2)
        if response.status_code == 200:
            print(f"{_OK_CHAR} Server is running")
            return True
    except requests.exceptions.RequestException:
        pass
    print(f"{_FAIL_CHAR} Server is not running!")
    print("\nPlease start the server first:")
    print("  python -m roster.main --serve --no-seed")
    return False


def to_payload(fields):
    """Make record fields JSON friendly."""
    return {key: str(value) if key == "salary" else value for key, value in fields.items()}


def create_record(base_url, role, fields):
    """Create one record of ``role``; returns the created record or None."""
    url = f"{base_url}{ENDPOINTS[role]}"
    try:
        response = requests.post(url, json=to_payload(fields), timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error creating {role.name.lower()}: {e}")
        return None
    if response.status_code == 201:
        record = response.json()
        print(f"{_OK_CHAR} Created {role.name.lower()}: {record['name']} (ID {record['id']})")
        return record
    print(f"{_FAIL_CHAR} Failed to create {role.name.lower()}: {response.text}")
    return None


def list_people(base_url):
    """List all records."""
    try:
        response = requests.get(f"{base_url}/people", timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error listing records: {e}")
        return []
    if response.status_code != 200:
        print(f"{_FAIL_CHAR} Failed to list records: {response.text}")
        return []
    people = response.json()
    print(f"\n{'='*60}")
    print(f"Records ({len(people)})")
    print(f"{'='*60}")
    for person in people:
        print(f"  {person['display']}")
    return people


def get_statistics(base_url):
    """Get roster statistics."""
    try:
        response = requests.get(f"{base_url}/statistics", timeout=5)
    except requests.exceptions.RequestException as e:
        print(f"{_FAIL_CHAR} Error getting statistics: {e}")
        return None
    if response.status_code != 200:
        print(f"{_FAIL_CHAR} Failed to get statistics: {response.text}")
        return None
    stats = response.json()
    print(f"\n{'='*60}")
    print("Roster Statistics")
    print(f"{'='*60}")
    print(json.dumps(stats['statistics'], indent=2))
    return stats


def main(base_url=None):
    """Main execution."""
    base_url = base_url or _detect_base_url()

    print("="*60)
    print("Roster - Data Addition Script")
    print("="*60)
    print()

    if not check_server(base_url):
        return 1

    print("\nAdding sample data...\n")
    created = [create_record(base_url, role, fields) for role, fields in SAMPLE_RECORDS]

    list_people(base_url)
    get_statistics(base_url)

    failed = created.count(None)
    print("\n" + "="*60)
    if failed:
        print(f"{_FAIL_CHAR} {failed} of {len(created)} records could not be added")
    else:
        print(f"{_OK_CHAR} Sample data added successfully!")
    print("="*60)
    print(f"\n  - View API docs: {base_url}/docs")
    print(f"  - List records: curl {base_url}/people")
    print()
    return 1 if failed else 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print(f"\n\n{_FAIL_CHAR} Interrupted by user")
        sys.exit(1)

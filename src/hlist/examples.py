"""
Example issue records for demos and tests.

Builds a small, deterministic set of issue records shaped like a
repository's issue list:

    {
        "id": 1001,
        "number": 1,
        "title": "...",
        "locked": False,
        "state": "open",
        "user": {"login": "alice", "id": 11},
        "labels": ["bug"],
    }

The records are converted with Container.from_python, so objects become
named containers and arrays stay containers (labels are never flattened
into a vector).
"""
from hlist.model import Container

_LOGINS = ["alice", "bob", "carol", "dave"]
_LABELS = [["bug"], [], ["enhancement", "docs"], ["bug", "help wanted"]]


def build_example_issue_records(issue_count: int = 6):
    records = []
    for i in range(1, issue_count + 1):
        login_index = (i - 1) % len(_LOGINS)
        records.append({
            "id": 1000 + i,
            "number": i,
            "title": f"Issue number {i}",
            "locked": i % 3 == 0,
            "state": "closed" if i % 2 == 0 else "open",
            "user": {"login": _LOGINS[login_index], "id": 11 * (login_index + 1)},
            "labels": list(_LABELS[(i - 1) % len(_LABELS)]),
        })
    return records


def build_example_issues(issue_count: int = 6) -> Container:
    return Container.from_python(build_example_issue_records(issue_count))

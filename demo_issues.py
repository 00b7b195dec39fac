"""
Demo: explore the example issue records and print a structure report.
"""

from hlist.analyzer import analyze_container
from hlist.examples import build_example_issues
from hlist.flatten import flatten_str
from hlist.mapping import map_int, map_str
from hlist.paths import extract_str
from hlist.predicates import detect_index, every, keep
from hlist.serialization import container_to_yaml
from hlist.transpose import transpose


def print_report(report):
    """Pretty-print a ContainerReport."""
    print()
    print("=" * 70)
    print("CONTAINER STRUCTURE REPORT")
    print("=" * 70)
    print(f"  Length:                {report.length}")
    print(f"  Depth:                 {report.depth}")
    print(f"  Leaves / Containers:   {report.leaf_count} / {report.container_count}")
    for kind, count in sorted(report.leaf_types.items()):
        print(f"    {kind}: {count}")
    print(f"  Rectangular:           {'YES' if report.is_rectangular else 'NO'}")
    print()

    if report.warnings:
        print("WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("NO WARNINGS")
    print()


def main():
    issues = build_example_issues(issue_count=6)

    print("Logins:        ", list(extract_str(issues, ["user", "login"])))
    print("Issue numbers: ", map_int(issues, "number"))
    print("States:        ", map_str(issues, "state"))

    open_issues = keep(issues, lambda issue: issue["state"] == "open")
    print("Open issues:   ", map_int(open_issues, "number"))
    print("All unlocked?  ", every(issues, lambda issue: not issue["locked"]))
    print("First locked at", detect_index(issues, "locked"))

    columns = transpose(issues)
    print("All labels:    ", list(flatten_str(columns["labels"])))

    print_report(analyze_container(issues))

    print(container_to_yaml(open_issues))


if __name__ == "__main__":
    main()

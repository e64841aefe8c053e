"""Build, load and write SARIF 2.1.0 static analysis reports."""

__version__ = "0.1.0"

__all__ = [
    "automation",
    "locations",
    "message",
    "notification",
    "properties",
    "provenance",
    "regions",
    "report",
    "result",
    "rules",
    "run",
    "stacks",
    "thread_flows",
    "tool",
    "web",
]
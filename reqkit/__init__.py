"""Transport-independent building blocks for an HTTP client: errors, containers, callbacks, async helpers and multi-request orchestration."""

__version__ = "1.11.2"
"""Adapter package for external I/O implementations.

Purpose:
    Concrete implementations of ``sharelist.domain.ports.ListPort``: the HTTP
    adapter for the list API and an in-memory double.

Dependencies:
    ``list_rest`` and ``http_client`` depend on ``requests``.

Call context:
    Imported by ``sharelist.app.controller`` for runtime wiring and by tests.
"""

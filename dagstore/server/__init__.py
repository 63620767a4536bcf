"""
dagstore Server Package.

This package contains the web server exposing the DAG store over HTTP.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    exception_handlers: Mapping of database and unhandled errors to HTTP responses.
    middleware: Request timing and tracing.
    services: FastAPI dependencies wiring repositories to request sessions.
"""

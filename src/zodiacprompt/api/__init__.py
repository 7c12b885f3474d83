"""Zodiac Prompt Generator — FastAPI web layer.

This package contains the FastAPI application that serves the selection
form and exposes prompt compilation over JSON.

Modules
-------
main
    FastAPI application with all route handlers and the ``main()`` CLI
    entry point.
models
    Pydantic models for API request and response validation.
"""

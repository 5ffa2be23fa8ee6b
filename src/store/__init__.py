"""Dashboard result access layer.

This package serializes ingestion results and exposes the SDK client
that callers use instead of wiring the pipeline themselves.
"""

"""Observability: structured logging, metrics and the dialog telemetry sink.

Uses structlog for logging and Prometheus for metrics.
"""

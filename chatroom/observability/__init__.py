"""Observability - Prometheus metrics."""

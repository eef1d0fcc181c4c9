"""Structured logging and Prometheus metrics for gcpcache."""

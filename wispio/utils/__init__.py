"""Shared utilities: logging, telemetry and enumerated name spaces."""

"""Interfaces layer: HTTP API and CLI. Interfaces call services only."""

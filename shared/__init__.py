"""
Shared utilities for the viewport capture CLI.

This package is intentionally small and focused. It currently provides:

- `shared.config` for environment-based configuration
- `shared.logging` for structlog-based structured logging

The capture pipeline should treat `shared/` as read-only infrastructure
code and avoid introducing capture-specific coupling here.
"""

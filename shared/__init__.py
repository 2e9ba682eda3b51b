"""
Shared utilities for the layout screenshot check.

- `shared.config` for environment-based configuration
- `shared.logging` for structlog-based structured logging
"""

"""
Shared module package.

Contains cross-cutting concerns used across layers:
- Request context and transport error carrier
- Error handling and mapping
- Logging configuration
"""

"""Presentation layer - HTTP concerns.

Translates application results into HTTP responses. The presentation layer
depends on the application layer but contains NO business logic.

Structure:
- errors/: error category to status mapping and RFC 9457 responses
"""

"""
car_registry.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation and request timing.
"""

# Package marker.

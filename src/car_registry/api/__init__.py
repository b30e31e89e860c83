"""
car_registry.api

API package for the Car Registry service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring, error translation and response headers.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: identifier checks + delegation to the car store.

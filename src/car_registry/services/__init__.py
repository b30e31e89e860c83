"""
car_registry.services

Service layer.

Responsibilities:
- Own transactions and the DTO <-> ORM mapping behind the `CarStore` interface.
"""

# Package marker.

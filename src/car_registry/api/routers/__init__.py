"""
car_registry.api.routers

HTTP routers mounted by `car_registry.api.app`.
"""

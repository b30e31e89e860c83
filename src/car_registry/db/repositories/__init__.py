"""
car_registry.db.repositories

Repository package.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories never commit; the service layer owns the transaction.

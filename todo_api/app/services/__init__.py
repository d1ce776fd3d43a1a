"""
Service layer abstraction.

Services encapsulate business logic and own the application state.
API handlers receive a service instance through a dependency instead
of touching module-level data.
"""

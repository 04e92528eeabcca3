"""
Service layer.

Each service encapsulates the business logic for one persistence
variant so that API handlers stay thin.
"""

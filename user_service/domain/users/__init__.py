"""
Users bounded context: domain layer.

This module contains all domain logic for the users context:
- The User entity and its invariants
- Email normalization
- The error taxonomy
- The repository port
"""

"""
Application layer for the users bounded context.

Use cases coordinate the User entity and the repository port to fulfill
business operations. No framework or infrastructure imports allowed.
"""

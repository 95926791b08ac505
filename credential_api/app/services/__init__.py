"""
Service layer abstraction.

Services encapsulate the business logic and receive their storage
backend at construction time, so API handlers never touch files.
"""

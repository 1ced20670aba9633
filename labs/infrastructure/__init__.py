"""
Infrastructure Layer

MongoDB persistence, security adapters (JWT, bcrypt) and dependency health
checks.
"""

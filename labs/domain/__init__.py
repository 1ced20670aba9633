"""
Domain Layer

Entities, repository interfaces, ports and domain services of the HR and
recruitment API. Nothing here depends on FastAPI, pymongo or any other
framework.
"""

"""
Application Layer

DTOs exchanged with the presentation layer and the management use cases
orchestrating domain entities, repositories and services.
"""

"""
Domain layer - presentation entities, value objects and errors.

This package holds the content model and business rules, independent of
the database, HTTP and third-party APIs.
"""

"""
Todo API package.

A FastAPI service exposing CRUD operations over todo records stored in an
in-memory SQL database that is seeded at startup.
"""

"""
Service layer.

Each service encapsulates the business rules of one domain and talks to
its collaborators (stores, gate, password hasher) only through the
objects passed to its constructor.
"""

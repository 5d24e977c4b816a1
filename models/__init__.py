"""
models/ - Domain Layer
======================
Plain dataclasses for the entities, plus the error and result types
shared by the repositories.
"""

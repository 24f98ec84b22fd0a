"""
Pydantic schema definitions for API payloads and stored documents.

Schemas are separated from the persistence layer so that documents
read from MongoDB can be validated and projected independently.
"""

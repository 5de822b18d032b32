"""
ScholarHub Backend — API Schemas
==================================

Pydantic models for request bodies and responses. Requests are validated
here before anything reaches the database; responses are built from ORM rows
with `model_validate(row)`.
"""

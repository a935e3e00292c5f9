"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks both features use (DB wiring, schema,
record types, the error taxonomy, logging). Keep feature-specific SQL in the
corresponding feature package (`questions/`, `answers/`).
"""

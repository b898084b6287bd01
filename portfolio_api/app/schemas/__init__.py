"""
Pydantic schema definitions for API payloads.

Each resource type defines a ``Base`` model with its writable fields,
a ``Create`` model used as the POST/PUT request body and a ``Read``
model returned by the API.  Python attributes are snake_case; the wire
format is camelCase.
"""

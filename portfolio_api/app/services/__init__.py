"""
Service layer abstraction.

Each service encapsulates the operations on one resource type and
translates between pydantic schemas and the plain records kept by
``core.store``.  Services never raise for a missing record; they return
``None`` or ``False`` and leave the HTTP mapping to the endpoints.
"""

"""
Pydantic schema definitions for API payloads.

Records are stored and returned as plain JSON objects; these models
describe their shape in the OpenAPI document and type the fixed
payloads (health, errors).
"""

"""HTTP API for the code point codec.

WHY: Clients that cannot import the package still need the codec.

HOW: app.py defines the FastAPI application, models.py the pydantic
request/response schemas.
"""

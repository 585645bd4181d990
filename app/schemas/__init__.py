"""
Schemas module - Request/Response schemas for API endpoints.

Request schemas validate what the client sends (400 on failure);
response schemas shape what the API returns.
"""

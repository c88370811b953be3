"""
Services Layer

Pure business logic services that:
- Accept domain inputs (IDs, DTOs) and a repository
- Return DTOs, never stored entities
- Do NOT depend on HTTP request/response objects
- Signal failures with domain exceptions the routes layer maps to HTTP status codes
"""

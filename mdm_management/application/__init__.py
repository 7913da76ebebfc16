"""
Application layer package.

Use cases (endpoints), DTOs and the default management service.
Orchestrates domain ports. No HTTP types here.
"""

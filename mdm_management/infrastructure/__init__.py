"""
Infrastructure layer package.

Adapters implementing domain ports: SQL profile storage and the DEP HTTP client.
"""

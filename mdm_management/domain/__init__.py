"""
Domain layer package.

Pure business types: entities, ports and errors.
No framework imports allowed.
"""

"""Route Modules: one file per resource (accounts, contacts, cases).

Invariants:
    - Each module defines its own APIRouter; paths are the connector's, unprefixed
    - Routes never build payloads themselves (delegate to services)
"""

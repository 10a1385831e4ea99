"""Core Layer: domain types, notifications and contracts. No IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Collaborators are described as Protocols and supplied by the shell
"""

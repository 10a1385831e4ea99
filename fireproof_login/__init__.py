"""Fireproof Login Package: login-detection fireproofing dialog flow.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

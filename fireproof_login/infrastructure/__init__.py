"""Infrastructure Layer: SQL-backed stores, pixel client and logging setup.

Invariants:
    - Every persistence failure surfaces as StoreError
    - Every pixel transport failure surfaces as TelemetryError
"""

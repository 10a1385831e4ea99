"""Services Layer: dialog flow handler, settings service and wiring.

Invariants:
    - Services depend on core/ Protocols, never on concrete infrastructure
      (factory.py is the only module that names concrete classes)
"""

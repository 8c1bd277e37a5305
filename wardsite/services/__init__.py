"""Services Layer — async stores and page assembly (the imperative shell).

Invariants:
    - Services own all DB access; routes stay thin
    - Pure computation is delegated to core/
"""

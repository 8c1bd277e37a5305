"""Infrastructure Layer — database sessions and logging setup.

Invariants:
    - Only the shell (api/, services/) imports from here; core/ never does
"""

"""Core Layer — pure domain logic and store contracts, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, models/ or db/
    - All functions are pure and deterministic (current date is injectable);
      repository_protocols only declares the async store contracts

Design Decisions:
    - Functional core separated from imperative shell: services await the store,
      then hand plain lists to core for filtering and ordering
"""

"""Pydantic Schemas — request/response contracts for API endpoints.

Invariants:
    - Payloads validate shape at the system boundary; *Record models hold the content
      rules that core.validation checks against entities after a merge
    - Wire names are camelCase (firstName, coverText, idAuthor); attributes are snake_case

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - One explicit projection model per view ("summary") instead of
      serialization groups resolved at runtime
"""

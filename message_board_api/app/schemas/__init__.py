"""
Pydantic schema definitions for API payloads.

Schemas describe the wire representation of messages and are kept
separate from the store's internal records.
"""

"""
Pydantic schema definitions for API payloads.

Request shapes carry their own validation rules so that malformed
input is rejected by the HTTP layer before it reaches the ledger.
"""

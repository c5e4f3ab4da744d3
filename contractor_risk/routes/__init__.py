"""
API routes for the Contractor Risk backend.

Route handlers only validate input, call the service layer and return
Pydantic response models. Error bodies are shaped by the exception handlers
in contractor_risk/main.py.
"""

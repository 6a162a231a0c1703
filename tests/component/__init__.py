"""
Component tests for the CartQL service

These tests drive the FastAPI app end to end (GraphQL and REST routes,
service layer, in-memory stores) without mocking internal components.
"""

"""
Test suite for the Test System service.

- Domain tests: pure transformations on Test
- Service tests: ownership and create/update rules against an in-memory store
- Integration tests: HTTP surface through FastAPI, Redis store against a real server
"""

"""gRPC transport layer for the book service.

This package hosts:
- The protocol buffer definition (in ``protos/``), compiled at import time.
- The servicer mapping gRPC requests onto the book usecase.
- Server bootstrap and interceptors.
"""

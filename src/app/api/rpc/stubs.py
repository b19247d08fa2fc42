"""Protobuf messages and gRPC service stubs generated from ``protos/book.proto``.

The proto is compiled at import time by grpcio-tools. Its path is resolved
against ``sys.path``, so the project root must be importable (it is whenever
``src.app`` is).
"""

import grpc
from google.protobuf import empty_pb2

BOOK_PROTO = "src/app/api/rpc/protos/book.proto"

book_pb2, book_pb2_grpc = grpc.protos_and_services(BOOK_PROTO)

__all__ = ["BOOK_PROTO", "book_pb2", "book_pb2_grpc", "empty_pb2"]

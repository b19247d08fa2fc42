"""Server interceptors for the gRPC transport."""

import time
import uuid

import grpc
from loguru import logger


class LoggingInterceptor(grpc.ServerInterceptor):
    """Log start, end and duration of every unary RPC with a request id.

    The id is taken from the ``x-request-id`` metadata key when the client
    sends one.
    """

    def intercept_service(self, continuation, handler_call_details):
        handler = continuation(handler_call_details)
        if handler is None or handler.unary_unary is None:
            return handler

        method = handler_call_details.method
        metadata = dict(handler_call_details.invocation_metadata or ())
        inner = handler.unary_unary

        def logged(request, context):
            request_id = metadata.get("x-request-id") or str(uuid.uuid4())
            start = time.perf_counter()

            with logger.contextualize(request_id=request_id, method=method):
                logger.info("rpc.start")
                try:
                    response = inner(request, context)
                except Exception as exc:
                    duration_ms = (time.perf_counter() - start) * 1000
                    code = context.code() or grpc.StatusCode.UNKNOWN
                    logger.bind(
                        status_code=code.name,
                        duration_ms=round(duration_ms, 1),
                        error_type=type(exc).__name__,
                    ).info("rpc.end")
                    raise

                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=grpc.StatusCode.OK.name,
                    duration_ms=round(duration_ms, 1),
                ).info("rpc.end")
                return response

        return grpc.unary_unary_rpc_method_handler(
            logged,
            request_deserializer=handler.request_deserializer,
            response_serializer=handler.response_serializer,
        )

"""gRPC server bootstrap."""

from concurrent import futures

import grpc
from loguru import logger

from src.app.api.rpc.interceptors import LoggingInterceptor
from src.app.api.rpc.servicer import BookServicer
from src.app.api.rpc.stubs import book_pb2_grpc
from src.app.api.utils.app_startup import configure_logging
from src.app.core.services import DbManageService, DbSessionService
from src.app.runtime.config.config_data import ConfigData, GrpcConfig
from src.app.runtime.context import get_config


def create_server(
    database_service: DbSessionService,
    grpc_config: GrpcConfig,
    address: str | None = None,
) -> tuple[grpc.Server, int]:
    """Build an unstarted server exposing ``book.BookService``.

    Returns the server and the bound port, which differs from the configured one
    when ``address`` asks for an ephemeral port (``host:0``).
    """
    server = grpc.server(
        futures.ThreadPoolExecutor(max_workers=grpc_config.max_workers),
        interceptors=[LoggingInterceptor()],
    )
    book_pb2_grpc.add_BookServiceServicer_to_server(
        BookServicer(database_service), server
    )
    port = server.add_insecure_port(address or grpc_config.address)
    return server, port


def serve(config: ConfigData | None = None) -> None:
    """Run the gRPC server until the process is terminated."""
    main_config = config or get_config()
    configure_logging(main_config)

    if not main_config.grpc.enabled:
        logger.warning("gRPC server is disabled in configuration; not starting")
        return

    database_service = DbSessionService(
        main_config.database, main_config.app.environment
    )
    if main_config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    server, port = create_server(database_service, main_config.grpc)
    server.start()
    logger.info("Starting gRPC server on {}:{}", main_config.grpc.host, port)
    try:
        server.wait_for_termination()
    except KeyboardInterrupt:
        logger.info("Interrupted; stopping gRPC server")
    finally:
        server.stop(grace=5).wait()
        database_service.dispose()


if __name__ == "__main__":
    serve()

"""Book service: CRUD for books over REST (FastAPI) and gRPC.

Layers, outermost first:
- api: HTTP and gRPC transports, request decoding, validation and status mapping.
- core: the book usecase, database services and the error taxonomy.
- entities: the Book domain model, its table and its repository.
- runtime: configuration loading and the application context.
"""

__version__ = "0.1.0"

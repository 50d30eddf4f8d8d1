"""Infrastructure adapters: Redis cache, XML-RPC transport, structured logging."""

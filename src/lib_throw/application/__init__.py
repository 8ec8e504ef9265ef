"""Application layer: assertion, attempt, and deferred cleanup use cases."""

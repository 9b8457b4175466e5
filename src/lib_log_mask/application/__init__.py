"""Application layer: ports and use cases of the masking engine."""

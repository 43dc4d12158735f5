"""Application layer: ports and use cases of the forwarding pipeline."""

"""Application layer: use-case services over the batch fetch core."""

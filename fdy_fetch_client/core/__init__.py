"""Core request/response normalization."""

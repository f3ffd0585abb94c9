"""Services layered around the rules engine: logging, event recording and serialization."""

class GenerationError(Exception):
    """Fatal error while producing the embedded source."""

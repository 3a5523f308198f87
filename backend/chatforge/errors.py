class ProviderError(Exception):
    """The text-generation provider could not produce a reply."""

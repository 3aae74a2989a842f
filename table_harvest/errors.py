class HarvestError(Exception):
    pass


class InputPathError(HarvestError):
    """Input path is missing or cannot be read."""

"""Exceptions raised by quartersort."""


class QuarterSortError(Exception):
    """Base error for the project."""


class ConfigurationError(QuarterSortError):
    """Invalid run configuration, raised before any file is touched."""


class DestinationExistsError(QuarterSortError):
    pass


class ActionError(QuarterSortError):
    """A copy or move failed at the OS level."""


class QuarterIndexError(QuarterSortError):
    pass

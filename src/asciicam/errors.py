class AsciicamError(Exception):
    """Base class for conversion errors."""


class InvalidDimensions(AsciicamError, ValueError):
    """A frame or target grid has a non-positive or inconsistent size."""


class UnknownPaletteKey(AsciicamError, KeyError):
    pass


class UnknownSizeClass(AsciicamError, KeyError):
    pass

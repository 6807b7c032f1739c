"""Error kinds raised by the identicon pipeline.

Both are fatal: the pipeline is pure, so retrying with the same input can
never change the outcome.
"""


class IdenticonError(Exception):
    """Base class for every error raised by this package."""


class PrecondApplicationError(IdenticonError, ValueError):
    """A stage received a record violating its required fields or lengths.

    Indicates stages were composed in the wrong order or a record was built
    by hand with bad values.
    """


class EncodingError(IdenticonError):
    """The rasterized canvas could not be serialized to PNG."""

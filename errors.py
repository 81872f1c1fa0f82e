"""Exception hierarchy for MtgDeck2Pdf.

Per-card failures (resolution, download, decode) are reported and skipped;
only scheduling faults, empty documents and file-system errors abort a run.
"""


class ProxyError(Exception):
    """Base exception for all MtgDeck2Pdf errors."""

    pass


class ResolutionError(ProxyError):
    """A card could not be resolved to image URLs via the card API."""

    pass


class ImageFetchError(ProxyError):
    """An image could not be turned into a printable bitmap."""

    pass


class ImageDownloadError(ImageFetchError):
    """The image bytes could not be downloaded."""

    pass


class DecodeError(ImageFetchError):
    """The downloaded bytes are not a decodable image."""

    pass


class SchedulingFault(ProxyError):
    """A fetch task died outside of its own error handling.

    This signals a fault in the worker pool rather than bad card data,
    so the whole run is aborted.
    """

    pass


class EmptyDocumentError(ProxyError):
    """There is nothing to put in the output document."""

    pass

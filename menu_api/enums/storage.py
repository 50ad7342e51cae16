from .base import BaseStrEnum


class ObjectExtension(BaseStrEnum):
    WEBP = ".webp"


class ImageContentType(BaseStrEnum):
    """
    Content types accepted for menu item images.

    PNG: image/png
    JPEG: image/jpeg (covers .jpg and .jpeg)
    GIF: image/gif
    """

    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"

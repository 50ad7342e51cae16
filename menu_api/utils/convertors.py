import io

from PIL import Image, UnidentifiedImageError
from unidecode import unidecode


def text_normalize(text: str) -> str:
    decoded_keyword = unidecode(text)

    # replace quotes with spaces
    decoded_keyword = decoded_keyword.replace('"', " ")
    decoded_keyword = decoded_keyword.replace("'", " ")

    decoded_keyword = "".join([ch if ch.isalnum() or ch in [" ", "_"] else " " for ch in decoded_keyword])
    return "-".join(decoded_keyword.split()).lower()


def webp_converter(data: bytes) -> bytes:
    """
    Convert image data bytes to webp.

    Args:
        data: bytes of image file

    Raises:
        InvalidImageException: if data is not a readable image

    Returns:
        bytes transformed to webp extension
    """
    from menu_api.core.exc import InvalidImageException

    try:
        with Image.open(io.BytesIO(data)) as f:
            webp_output = io.BytesIO()
            f.save(webp_output, format="WEBP")
            data = webp_output.getvalue()
            webp_output.close()

    except UnidentifiedImageError:
        raise InvalidImageException(reason="file is not a readable image")

    except (OSError, ValueError) as e:
        raise InvalidImageException(reason=f"error while converting image: {e}")

    return data

from .convertors import text_normalize, webp_converter
from .paginator import CursorPaginator, paginate_by_cursor

__all__ = (
    "CursorPaginator",
    "paginate_by_cursor",
    "text_normalize",
    "webp_converter",
)

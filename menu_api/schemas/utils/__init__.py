from .paginator import CursorOutput, CursorPage, CursorPaginationFilter

__all__ = (
    "CursorOutput",
    "CursorPage",
    "CursorPaginationFilter",
)

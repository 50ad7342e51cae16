from menu_api.core.exc.base import ObjectExistsException, ObjectNotFoundException


class CategoryNotFoundException(ObjectNotFoundException):
    message_pattern = ("Category not found",)
    log_message_pattern = ("Category {0} not found", "id")


class CategoryExistsException(ObjectExistsException):
    message_pattern = ("Category with this {0} already exists.", "obj")

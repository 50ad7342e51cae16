from menu_api.core.exc.base import ObjectExistsException, ObjectNotFoundException


class MenuNotFoundException(ObjectNotFoundException):
    message_pattern = ("No post with id '{0}'", "id")
    log_message_pattern = ("No post with id '{0}'", "id")


class MenuExistsException(ObjectExistsException):
    message_pattern = ("Menu item with this {0} already exists.", "obj")

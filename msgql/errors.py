from typing import Any

from graphql import GraphQLError


class ImproperlyConfigured(Exception):
    pass


class GraphQLExtensionError(GraphQLError):
    code = 'INTERNAL_SERVER_ERROR'
    message = 'internal server error'

    def __init__(self, message: str = None, **kwargs: Any):
        message = message or self.message
        extensions = {'code': self.code}
        if kwargs:
            extensions['exception'] = kwargs
        super().__init__(message=message, extensions=extensions)


class MessageNotFoundError(GraphQLExtensionError):
    code = 'NOT_FOUND'
    message = 'message not found'

    def __init__(self, id: str):
        self.id = id
        super().__init__(f'no message exists with id {id}', id=id)


class UserInputError(GraphQLExtensionError):
    code = 'USER_INPUT_ERROR'
    message = 'user input error'

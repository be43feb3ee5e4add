from .applications import GraphQL, create_app  # noqa
from .errors import GraphQLExtensionError, MessageNotFoundError  # noqa
from .resolver import default_field_resolver, field_resolver, mutate, query  # noqa
from .schema import make_message_schema, make_schema, make_schema_from_file  # noqa
from .service import Message, MessageInput, MessageService, NotFound  # noqa
from .store import Record, RecordStore  # noqa
from .utils import gql  # noqa

__version__ = '0.1.0'

from typing import Optional

from graphql import GraphQLResolveInfo

from .errors import MessageNotFoundError
from .resolver import mutate, query
from .service import Message, MessageInput, MessageResult, MessageService, NotFound
from .utils import gql

type_defs = gql("""
input MessageInput {
    content: String
    author: String
}

type Message {
    id: ID!
    content: String
    author: String
}

type Query {
    getMessage(id: ID!): Message
}

type Mutation {
    createMessage(input: MessageInput): Message
    updateMessage(id: ID!, input: MessageInput): Message
}
""")


def get_service(info: GraphQLResolveInfo) -> MessageService:
    return info.context['messages']


def unwrap(result: MessageResult) -> Message:
    if isinstance(result, NotFound):
        raise MessageNotFoundError(result.id)
    return result


@query
def get_message(parent, info, id: str) -> Message:
    return unwrap(get_service(info).get(id))


@mutate
def create_message(parent, info, input: Optional[dict] = None) -> Message:
    return get_service(info).create(MessageInput.from_dict(input))


@mutate
def update_message(parent, info, id: str, input: Optional[dict] = None) -> Message:
    return unwrap(get_service(info).update(id, MessageInput.from_dict(input)))

import logging
import secrets
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Union

from .store import Record, RecordStore

logger = logging.getLogger(__name__)

MIN_ID_BYTES = 10


def new_id(nbytes: int = MIN_ID_BYTES) -> str:
    return secrets.token_hex(nbytes)


@dataclass(frozen=True)
class MessageInput:
    content: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> 'MessageInput':
        if not data:
            return cls()
        return cls(content=data.get('content'), author=data.get('author'))

    def to_record(self) -> Record:
        return Record(content=self.content, author=self.author)


@dataclass(frozen=True)
class Message:
    id: str
    content: Optional[str] = None
    author: Optional[str] = None

    @classmethod
    def from_record(cls, id: str, record: Record) -> 'Message':
        return cls(id=id, content=record.content, author=record.author)


@dataclass(frozen=True)
class NotFound:
    id: str


MessageResult = Union[Message, NotFound]


class MessageService:
    def __init__(self, store: RecordStore, id_factory: Callable[[], str] = new_id) -> None:
        self.store = store
        self.id_factory = id_factory

    def get(self, id: str) -> MessageResult:
        record = self.store.get(id)
        if record is None:
            return NotFound(id)
        return Message.from_record(id, record)

    def create(self, input: MessageInput) -> Message:
        record = input.to_record()
        id = self.id_factory()
        while not self.store.put_new(id, record):
            logger.warning('identifier collision on %s, drawing another', id)
            id = self.id_factory()
        logger.debug('created message %s', id)
        return Message.from_record(id, record)

    def update(self, id: str, input: MessageInput) -> MessageResult:
        record = input.to_record()
        if self.store.replace(id, record) is None:
            return NotFound(id)
        logger.debug('updated message %s', id)
        return Message.from_record(id, record)

from typing import List, Union

from graphql import GraphQLSchema, build_schema

from . import dice, messages
from .resolver import register_resolvers
from .utils import join_type_defs


def make_schema(
    type_defs: Union[str, List[str]],
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    no_location: bool = False,
) -> GraphQLSchema:
    if isinstance(type_defs, list):
        type_defs = join_type_defs(type_defs)

    schema = build_schema(
        type_defs,
        assume_valid=assume_valid,
        assume_valid_sdl=assume_valid_sdl,
        no_location=no_location,
    )
    register_resolvers(schema)
    return schema


def make_schema_from_file(
    file: str,
    assume_valid: bool = False,
    assume_valid_sdl: bool = False,
    no_location: bool = False,
) -> GraphQLSchema:
    with open(file, 'r') as f:
        schema = make_schema(f.read(), assume_valid, assume_valid_sdl, no_location)
        return schema


def make_message_schema() -> GraphQLSchema:
    """Schema serving the message API and the dice examples."""
    return make_schema([messages.type_defs, dice.type_defs])

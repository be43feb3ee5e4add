import logging
from collections import defaultdict
from functools import partial, wraps
from inspect import iscoroutinefunction, isfunction
from typing import Dict, Mapping, Union

from graphql import (
    GraphQLError,
    GraphQLFieldResolver,
    GraphQLSchema,
    assert_interface_type,
    assert_object_type,
    is_interface_type,
    is_object_type,
)

from .utils import execute_async_function, recursive_to_snake_case, to_camel_case, to_snake_case

logger = logging.getLogger(__name__)

FieldResolverMap = Dict[str, Dict[str, GraphQLFieldResolver]]

field_resolver_map: FieldResolverMap = defaultdict(dict)


def _log_unexpected(type_name: str, name: str) -> None:
    logger.exception('resolver %s.%s failed', type_name, name)


def field_resolver(
    type_name: str,
    func_or_field: Union[GraphQLFieldResolver, str] = None,
    print_exc: bool = True,
    snake_argument: bool = True,
):
    """Register ``func`` as the resolver of ``type_name.<field>``.

    The field name is the camelCase form of the function name unless given
    explicitly. Arguments reach the resolver in snake_case. Exceptions other
    than ``GraphQLError`` are logged with their traceback before they are
    re-raised, unless ``print_exc`` is off.
    """

    def wrap(func: GraphQLFieldResolver):
        if isinstance(func_or_field, str):
            name = to_camel_case(func_or_field)
        else:
            name = to_camel_case(func.__name__)

        @wraps(func)
        def sync_resolver(*args, **kwargs):
            if snake_argument:
                kwargs = recursive_to_snake_case(kwargs)
            if not print_exc:
                return func(*args, **kwargs)

            try:
                return func(*args, **kwargs)
            except GraphQLError:
                raise
            except Exception:
                _log_unexpected(type_name, name)
                raise

        @wraps(func)
        async def async_resolver(*args, **kwargs):
            if snake_argument:
                kwargs = recursive_to_snake_case(kwargs)
            if not print_exc:
                return await execute_async_function(func, *args, **kwargs)

            try:
                return await execute_async_function(func, *args, **kwargs)
            except GraphQLError:
                raise
            except Exception:
                _log_unexpected(type_name, name)
                raise

        if iscoroutinefunction(func):
            field_resolver_map[type_name][name] = async_resolver
            return async_resolver

        field_resolver_map[type_name][name] = sync_resolver
        return sync_resolver

    if isfunction(func_or_field):
        return wrap(func_or_field)

    return wrap


mutate = partial(field_resolver, 'Mutation')
query = partial(field_resolver, 'Query')


def register_field_resolvers(schema: GraphQLSchema):
    for type_name, field_resolvers in field_resolver_map.items():
        type_ = schema.get_type(type_name)
        if is_object_type(type_):
            type_ = assert_object_type(type_)
        elif is_interface_type(type_):
            type_ = assert_interface_type(type_)
        else:
            continue

        for name, resolver in field_resolvers.items():
            field = type_.fields.get(name)
            if not field:
                continue
            field.resolve = resolver


def register_resolvers(schema: GraphQLSchema):
    register_field_resolvers(schema)


def get_field_value(source, field_name):
    return (
        source.get(field_name) if isinstance(source, Mapping) else getattr(source, field_name, None)
    )


def default_field_resolver(source, info, **args):
    """Default field resolver.

    Takes the property of the source object named like the field, trying the
    snake_case name first, and returns it. If it's a function, returns the
    result of calling it with the resolve info and the snake_case arguments.

    For dictionaries, the field names are used as keys, for all other objects they are
    used as attribute names.
    """
    value = get_field_value(source, to_snake_case(info.field_name))
    if value is None:
        value = get_field_value(source, info.field_name)

    if callable(value):
        return value(info, **recursive_to_snake_case(args))
    return value

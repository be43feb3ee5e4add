import json
from typing import List, Text, Tuple

import click
import uvicorn
from graphql import GraphQLOutputType, is_object_type, is_required_argument, print_schema

from ..config import load_settings
from ..execute import execute_sync, format_result
from ..log import setup_logging
from ..schema import make_message_schema, make_schema_from_file
from ..service import MessageService, new_id
from ..store import RecordStore


@click.group()
@click.option('-f', '--file', help='graphql sdl file to use instead of the built-in message schema')
@click.pass_context
def main(ctx, file):
    # ensure that ctx.obj exists and is a dict (in case `main()` is called
    # by means other than the console script)
    ctx.ensure_object(dict)
    ctx.obj['file'] = file
    ctx.obj['settings'] = settings = load_settings()
    setup_logging(settings.log_level)
    ctx.obj['schema'] = make_schema_from_file(file) if file else make_message_schema()


@main.command()
@click.pass_context
@click.option('--host', help='bind host, defaults to MSGQL_HOST')
@click.option('--port', type=int, help='bind port, defaults to MSGQL_PORT')
@click.option('--reload/--no-reload', default=False, help='restart on code changes')
def serve(ctx, host: str, port: int, reload: bool):
    """Run the GraphQL API server"""
    if ctx.obj['file']:
        # the served app always builds the message schema
        raise click.UsageError('-f/--file is not supported by serve')
    settings = ctx.obj['settings']
    host = host or settings.host
    port = port or settings.port
    click.echo(f'Running a GraphQL API server at http://{host}:{port}/graphql')
    uvicorn.run(
        'msgql.applications:create_app',
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level,
    )


@main.command()
@click.pass_context
def schema(ctx):
    """Print the schema definition"""
    click.echo(print_schema(ctx.obj['schema']))


@main.command()
@click.pass_context
@click.option('--variables', help='variables as a JSON object')
@click.option('--operation-name', help='operation to run when QUERY holds several')
@click.argument('query')
def query(ctx, query: str, variables: str, operation_name: str):
    """Execute QUERY against a fresh in-memory message store"""
    try:
        variable_values = json.loads(variables) if variables else None
    except ValueError:
        raise click.BadParameter('must be a JSON object', param_hint='--variables')
    if variable_values is not None and not isinstance(variable_values, dict):
        raise click.BadParameter('must be a JSON object', param_hint='--variables')

    service = MessageService(RecordStore(), id_factory=lambda: new_id(ctx.obj['settings'].id_bytes))
    result = execute_sync(
        ctx.obj['schema'],
        query,
        variables=variable_values,
        operation_name=operation_name,
        context_value={'messages': service},
    )
    click.echo(json.dumps(format_result(result), indent=2))
    if result.errors:
        ctx.exit(1)


def print_args(args) -> Tuple[list, list]:
    var_defs, vars = [], []
    for name, argument in args.items():
        var_defs.append(f'${name}: {argument.type}')
        vars.append(f'{name}: ${name}')
    return var_defs, vars


def of_type(type_: GraphQLOutputType) -> GraphQLOutputType:
    try:
        t = type_.of_type
    except AttributeError:
        return type_
    else:
        return of_type(t)


def print_block(items: List[Text], indent=0) -> Text:
    return ' {\n' + '\n'.join(items) + '\n' + ' ' * indent + '}' if items else ''


def print_field(type_: GraphQLOutputType, indent: int = 2) -> str:
    if not is_object_type(type_):
        return ''
    items = []
    indent_space = ' ' * indent
    for name, field in type_.fields.items():
        # fields with required arguments cannot be selected without values
        if any(is_required_argument(arg) for arg in field.args.values()):
            continue
        items.append(indent_space + name + print_field(of_type(field.type), indent + 2))
    return print_block(items, indent - 2)


@main.command()
@click.pass_context
@click.argument('op')
def client(ctx, op: str):
    """Generate client query"""
    schema = ctx.obj['schema']
    field = schema.query_type.fields.get(op) if schema.query_type else None
    op_type = 'query'
    if not field:
        field = schema.mutation_type.fields.get(op) if schema.mutation_type else None
        op_type = 'mutation'
        if not field:
            click.echo(f'No {op} query.')
            ctx.exit(1)

    operation_name = op
    if field.args:
        var_defs, vars = print_args(field.args)
        operation_name += f'({", ".join(var_defs)})'
        op += f'({", ".join(vars)})'
    fields = '  ' + op + print_field(of_type(field.type), indent=4)
    click.echo(op_type + ' ' + operation_name + print_block([fields]))

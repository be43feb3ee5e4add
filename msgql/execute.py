from typing import Any, Dict, Optional

from graphql import ExecutionResult, GraphQLSchema, graphql, graphql_sync

from .resolver import default_field_resolver


def format_result(result: ExecutionResult) -> Dict[str, Any]:
    error_data = [err.formatted for err in result.errors] if result.errors else None
    return {'data': result.data, 'errors': error_data}


def execute_sync(
    schema: GraphQLSchema,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    context_value: Any = None,
) -> ExecutionResult:
    return graphql_sync(
        schema,
        query,
        context_value=context_value,
        variable_values=variables,
        operation_name=operation_name,
        field_resolver=default_field_resolver,
    )


async def execute_async(
    schema: GraphQLSchema,
    query: str,
    variables: Optional[Dict[str, Any]] = None,
    operation_name: Optional[str] = None,
    context_value: Any = None,
) -> ExecutionResult:
    return await graphql(
        schema,
        query,
        context_value=context_value,
        variable_values=variables,
        operation_name=operation_name,
        field_resolver=default_field_resolver,
    )

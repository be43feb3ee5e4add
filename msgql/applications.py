import json
import logging
import typing

from graphql import GraphQLSchema
from starlette import status
from starlette.applications import Starlette
from starlette.background import BackgroundTasks
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

from .config import Settings, load_settings
from .execute import execute_async, format_result
from .log import setup_logging
from .playground import PLAYGROUND_HTML
from .schema import make_message_schema
from .service import MessageService, new_id
from .store import RecordStore

logger = logging.getLogger(__name__)


class GraphQL(Starlette):
    def __init__(
        self,
        schema: GraphQLSchema,
        *,
        context: typing.Dict[str, typing.Any] = None,
        playground: bool = True,
        debug: bool = False,
        routes: typing.List[BaseRoute] = None
    ):
        routes = routes or []
        routes.append(Route('/graphql', ASGIApp(schema, context=context, playground=playground)))
        super().__init__(debug=debug, routes=routes)


class ASGIApp:
    def __init__(
        self,
        schema: GraphQLSchema,
        context: typing.Dict[str, typing.Any] = None,
        playground: bool = True,
    ) -> None:
        self.schema = schema
        self.context = context or {}
        self.playground = playground

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive=receive, send=send)
        response = await self.handle_graphql(request)
        await response(scope, receive, send)

    async def handle_graphql(self, request: Request) -> Response:
        if request.method in ('GET', 'HEAD'):
            if 'text/html' in request.headers.get('Accept', ''):
                if not self.playground:
                    return PlainTextResponse('Not Found', status_code=status.HTTP_404_NOT_FOUND)
                return HTMLResponse(PLAYGROUND_HTML)

            data = request.query_params  # type: typing.Mapping[str, typing.Any]

        elif request.method == 'POST':
            content_type = request.headers.get('Content-Type', '')

            if 'application/json' in content_type:
                try:
                    data = await request.json()
                except ValueError:
                    return PlainTextResponse(
                        'Request body is not valid JSON', status_code=status.HTTP_400_BAD_REQUEST,
                    )
            elif 'application/graphql' in content_type:
                body = await request.body()
                data = {'query': body.decode()}
            elif 'query' in request.query_params:
                data = request.query_params
            else:
                return PlainTextResponse(
                    'Unsupported Media Type', status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                )
        else:
            return PlainTextResponse(
                'Method Not Allowed', status_code=status.HTTP_405_METHOD_NOT_ALLOWED
            )

        try:
            query = data['query']
            variables = data.get('variables')
            operation_name = data.get('operationName')
        except (KeyError, TypeError, AttributeError):
            query = None
        if not isinstance(query, str):
            return PlainTextResponse(
                'No GraphQL query found in the request', status_code=status.HTTP_400_BAD_REQUEST,
            )

        # Query string parameters carry variables as a JSON document.
        if isinstance(variables, str):
            try:
                variables = json.loads(variables)
            except ValueError:
                return PlainTextResponse(
                    'Variables are invalid JSON', status_code=status.HTTP_400_BAD_REQUEST
                )
        if variables is not None and not isinstance(variables, dict):
            return PlainTextResponse(
                'Variables must be a JSON object', status_code=status.HTTP_400_BAD_REQUEST
            )

        background = BackgroundTasks()
        context = {**self.context, 'request': request, 'background': background}

        result = await execute_async(
            self.schema,
            query,
            variables=variables,
            operation_name=operation_name,
            context_value=context,
        )
        status_code = status.HTTP_400_BAD_REQUEST if result.errors else status.HTTP_200_OK

        return JSONResponse(format_result(result), status_code=status_code, background=background)


def create_app(settings: Settings = None, store: RecordStore = None) -> GraphQL:
    """Build the message API application.

    One store lives for the lifetime of the application and is shared by
    every request through the ``messages`` context entry.
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level)
    store = store if store is not None else RecordStore()
    service = MessageService(store, id_factory=lambda: new_id(settings.id_bytes))

    app = GraphQL(
        make_message_schema(),
        context={'messages': service},
        playground=settings.playground,
        debug=settings.debug,
    )
    app.state.messages = service
    logger.info('message API ready at /graphql (playground %s)',
                'on' if settings.playground else 'off')
    return app

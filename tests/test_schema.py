from msgql.execute import execute_sync, format_result
from msgql.schema import make_schema, make_schema_from_file


def test_make_schema_from_list():
    schema = make_schema(['type Query { hello: String }', 'type Extra { value: Int }'])
    assert schema.get_type('Extra') is not None
    assert execute_sync(schema, '{ hello }').data == {'hello': 'Hello World!'}


def test_make_schema_from_file(tmp_path):
    path = tmp_path / 'schema.graphql'
    path.write_text('type Query { hello: String\n quoteOfTheDay: String }')
    schema = make_schema_from_file(str(path))
    assert set(schema.query_type.fields) == {'hello', 'quoteOfTheDay'}
    assert execute_sync(schema, '{ hello }').data == {'hello': 'Hello World!'}


def test_dice_extend_message_query(schema):
    assert {'getMessage', 'hello', 'rollDice', 'getDie'} <= set(schema.query_type.fields)


def test_format_result(execute):
    assert format_result(execute('{ hello }')) == {'data': {'hello': 'Hello World!'}, 'errors': None}
    body = format_result(execute('{ getMessage(id: "x") { id } }'))
    assert body['data'] == {'getMessage': None}
    assert body['errors'][0]['extensions']['code'] == 'NOT_FOUND'

CREATE = """
mutation Create($input: MessageInput) {
    createMessage(input: $input) { id content author }
}
"""

GET = """
query Get($id: ID!) {
    getMessage(id: $id) { id content author }
}
"""

UPDATE = """
mutation Update($id: ID!, $input: MessageInput) {
    updateMessage(id: $id, input: $input) { id content author }
}
"""


def test_schema_operations(schema):
    assert set(schema.query_type.fields) >= {'getMessage'}
    assert set(schema.mutation_type.fields) == {'createMessage', 'updateMessage'}
    assert set(schema.get_type('Message').fields) == {'id', 'content', 'author'}


def test_create_get_update_scenario(execute):
    result = execute(CREATE, input={'content': 'hi', 'author': 'ann'})
    assert result.errors is None
    message = result.data['createMessage']
    assert message['content'] == 'hi'
    assert message['author'] == 'ann'
    id = message['id']

    result = execute(GET, id=id)
    assert result.data == {'getMessage': message}

    result = execute(UPDATE, id=id, input={'content': 'bye', 'author': 'ann'})
    assert result.data == {'updateMessage': {'id': id, 'content': 'bye', 'author': 'ann'}}

    result = execute(GET, id=id)
    assert result.data == {'getMessage': {'id': id, 'content': 'bye', 'author': 'ann'}}


def test_create_without_input(execute):
    result = execute('mutation { createMessage { id content author } }')
    assert result.errors is None
    assert result.data['createMessage']['content'] is None
    assert result.data['createMessage']['author'] is None


def test_get_unknown_id_is_not_found(execute):
    result = execute(GET, id='nonexistent-id')
    assert result.data == {'getMessage': None}
    [error] = result.errors
    assert error.message == 'no message exists with id nonexistent-id'
    assert error.path == ['getMessage']
    assert error.extensions == {'code': 'NOT_FOUND', 'exception': {'id': 'nonexistent-id'}}


def test_update_unknown_id_is_not_found(execute, store):
    result = execute(UPDATE, id='nonexistent-id', input={'content': 'x'})
    assert result.data == {'updateMessage': None}
    assert result.errors[0].extensions['code'] == 'NOT_FOUND'
    assert len(store) == 0
    assert execute(GET, id='nonexistent-id').errors


def test_update_omitted_fields_become_null(execute):
    id = execute(CREATE, input={'content': 'a', 'author': 'x'}).data['createMessage']['id']
    execute(UPDATE, id=id, input={'content': 'b'})
    assert execute(GET, id=id).data['getMessage'] == {'id': id, 'content': 'b', 'author': None}


def test_input_type_is_checked_by_schema(execute, store):
    result = execute(CREATE, input={'content': 'a', 'title': 'x'})
    assert result.errors
    assert len(store) == 0

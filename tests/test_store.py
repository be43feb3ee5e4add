import threading

from msgql.store import Record, RecordStore


def test_get_missing_returns_none():
    store = RecordStore()
    assert store.get('nope') is None
    assert not store.contains('nope')
    assert 'nope' not in store


def test_put_then_get():
    store = RecordStore()
    record = Record(content='hi', author='ann')
    store.put('a', record)
    assert store.get('a') == record
    assert store.contains('a')
    assert len(store) == 1


def test_put_overwrites():
    store = RecordStore()
    store.put('a', Record(content='one'))
    store.put('a', Record(content='two'))
    assert store.get('a') == Record(content='two')
    assert len(store) == 1


def test_replace_unknown_id_writes_nothing():
    store = RecordStore()
    assert store.replace('a', Record(content='x')) is None
    assert store.get('a') is None
    assert len(store) == 0


def test_replace_returns_previous_record():
    store = RecordStore()
    store.put('a', Record(content='old'))
    assert store.replace('a', Record(content='new')) == Record(content='old')
    assert store.get('a') == Record(content='new')


def test_put_new_refuses_existing_key():
    store = RecordStore()
    assert store.put_new('a', Record(content='first'))
    assert not store.put_new('a', Record(content='second'))
    assert store.get('a') == Record(content='first')


def test_empty_record_is_stored():
    store = RecordStore()
    store.put('a', Record())
    assert store.contains('a')


def test_put_new_lets_one_writer_win():
    store = RecordStore()
    workers = 16
    barrier = threading.Barrier(workers)
    wins = []

    def work(n):
        barrier.wait()
        if store.put_new('a', Record(content=str(n))):
            wins.append(n)

    threads = [threading.Thread(target=work, args=(n,)) for n in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(wins) == 1
    assert store.get('a') == Record(content=str(wins[0]))

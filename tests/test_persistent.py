import json
import pytest
from unittest.mock import MagicMock

from dualstore.core.persistent import PersistentMap
from dualstore.core.errors import InvalidOperationError, ReadError, WriteError
from dualstore.persistence.file import JsonFileStorage
from dualstore.persistence.memory import MemoryDocumentStorage

@pytest.fixture
def data_file(tmp_path):
    return tmp_path / 'data.json'

@pytest.fixture
def persistent(data_file, clock):
    return PersistentMap(JsonFileStorage(data_file), clock=clock)

def read_document(path):
    return json.loads(path.read_text(encoding='utf-8'))

@pytest.mark.asyncio
async def test_set_writes_whole_map(persistent, data_file):
    result = await persistent.set('user1', {'name': 'John Doe'})
    assert result.success is True
    assert result.message == 'Data memorized in JSON'
    await persistent.set('user2', {'name': 'Jane Smith'})

    assert read_document(data_file) == {'user1': {'name': 'John Doe'}, 'user2': {'name': 'Jane Smith'}}
    assert await persistent.get('user1') == {'name': 'John Doe'}

@pytest.mark.asyncio
async def test_document_is_indented_utf8(persistent, data_file):
    await persistent.set('greeting', 'héllo')
    content = data_file.read_text(encoding='utf-8')
    assert '\n  "greeting": "héllo"' in content

@pytest.mark.asyncio
async def test_clear_rewrites_document(persistent, data_file):
    await persistent.set('a', 1)
    await persistent.set('b', 2)
    result = await persistent.clear('a')

    assert result.message == 'Data deleted from JSON'
    assert read_document(data_file) == {'b': 2}

@pytest.mark.asyncio
async def test_expiration_is_not_written(persistent, data_file, clock):
    await persistent.set('token', 'xyz', ttl=10)
    assert read_document(data_file) == {'token': 'xyz'}
    assert persistent.expiration('token') == clock.now + 10

@pytest.mark.asyncio
async def test_lazy_eviction_does_not_flush(persistent, data_file, clock):
    await persistent.set('token', 'xyz', ttl=10)
    clock.advance(11)

    assert await persistent.get('token') is None
    assert 'token' not in persistent
    assert read_document(data_file) == {'token': 'xyz'}

    await persistent.set('other', 1)
    assert read_document(data_file) == {'other': 1}

@pytest.mark.asyncio
async def test_load_replaces_map(data_file, clock):
    persistent = PersistentMap(JsonFileStorage(data_file), initial_data={'stale': True}, clock=clock)
    await persistent.set('ttl-key', 'v', ttl=5)
    assert persistent.expiration('ttl-key') is not None
    data_file.write_text(json.dumps({'user1': {'age': 30}}), encoding='utf-8')

    await persistent.load()

    assert persistent.snapshot() == {'user1': {'age': 30}}
    assert persistent.expiration('ttl-key') is None

@pytest.mark.asyncio
async def test_load_missing_file_raises(persistent, data_file):
    with pytest.raises(ReadError) as exc:
        await persistent.load()
    assert exc.value.path == str(data_file)
    assert isinstance(exc.value.__cause__, FileNotFoundError)

@pytest.mark.asyncio
async def test_load_malformed_file_raises_and_keeps_state(persistent, data_file):
    await persistent.set('kept', 1)
    data_file.write_text('{not json', encoding='utf-8')

    with pytest.raises(ReadError):
        await persistent.load()
    assert await persistent.get('kept') == 1

@pytest.mark.asyncio
async def test_load_non_object_document_raises(persistent, data_file):
    data_file.write_text('[1, 2, 3]', encoding='utf-8')
    with pytest.raises(ReadError):
        await persistent.load()

@pytest.mark.asyncio
async def test_flush_failure_keeps_in_memory_value(tmp_path):
    # the target path is a directory, so the write fails
    persistent = PersistentMap(JsonFileStorage(tmp_path))
    on_set = MagicMock()
    persistent.on('set', on_set)

    with pytest.raises(WriteError):
        await persistent.set('k', 'v')

    assert await persistent.get('k') == 'v'
    on_set.assert_called_once_with('k')

@pytest.mark.asyncio
async def test_unserializable_value_raises_write_error():
    persistent = PersistentMap(MemoryDocumentStorage())
    with pytest.raises(WriteError):
        await persistent.set('k', object())
    assert 'k' in persistent

@pytest.mark.asyncio
async def test_dispatch_uses_flushing_operations():
    storage = MemoryDocumentStorage()
    persistent = PersistentMap(storage)

    assert (await persistent.dispatch('k', 'set', [1, 2])).message == 'Data memorized in JSON'
    assert json.loads(storage.content) == {'k': [1, 2]}
    assert await persistent.dispatch('k', 'get') == [1, 2]
    assert (await persistent.dispatch('k', 'new')).message == 'Data deleted from JSON'
    assert json.loads(storage.content) == {}

@pytest.mark.asyncio
async def test_dispatch_invalid_operation():
    persistent = PersistentMap(MemoryDocumentStorage())
    with pytest.raises(InvalidOperationError):
        await persistent.dispatch('k', 'frobnicate', 'v')
    assert len(persistent) == 0

@pytest.mark.asyncio
async def test_flush_creates_parent_directory(tmp_path):
    path = tmp_path / 'nested' / 'dir' / 'store.json'
    persistent = PersistentMap(JsonFileStorage(path), initial_data={'seed': 1})
    await persistent.flush()
    assert read_document(path) == {'seed': 1}

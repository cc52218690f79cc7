import json
import logging

import pytest
import requests

from solrwire import SolrClient
from solrwire.config import Config
from solrwire.exception import SolrRequestError, UnsupportedInput
from solrwire.query import Common, Standard, Update


class FakeResponse():
    def __init__(self, status_code=200, payload=None, url=None):
        self.status_code = status_code
        self.payload = payload or {'responseHeader': {'status': 0}}
        self.url = url

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}")

    def json(self):
        return self.payload


class FakeSession():
    def __init__(self, status_code=200):
        self.headers = dict()
        self.calls = list()
        self.status_code = status_code

    def get(self, url, **kwargs):
        self.calls.append(('GET', url, kwargs))
        return FakeResponse(self.status_code, url=url)

    def post(self, url, **kwargs):
        self.calls.append(('POST', url, kwargs))
        return FakeResponse(self.status_code, url=url)


@pytest.fixture
def config():
    config = Config(env=False)
    config['endpoints'] = {
        'default': {'url': 'http://localhost:8983/solr/films/', 'headers': {'X-Token': 'secret'}},
        'library': {'url': 'http://localhost:8983/solr/library'},
    }
    return config


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(config, session):
    return SolrClient(config=config, session=session)


class TestClient():

    def test_endpoint_from_config(self, client, session):
        assert client.url == 'http://localhost:8983/solr/films'
        assert client.timeout == 10
        assert session.headers['X-Token'] == 'secret'

        other = SolrClient(endpoint='library', config=client.config, session=FakeSession())
        assert other.url == 'http://localhost:8983/solr/library'

    def test_explicit_url(self, config):
        c = SolrClient('http://solr:8983/solr/core1', config=config, timeout=1, session=FakeSession())
        assert c.url == 'http://solr:8983/solr/core1'
        assert c.timeout == 1

    def test_search(self, client, session):
        r = client.search(Standard(q='loch torridon'), Common(rows=10))
        assert r['responseHeader']['status'] == 0

        method, url, kwargs = session.calls[-1]
        assert method == 'GET'
        assert url == 'http://localhost:8983/solr/films/select?q=loch+torridon&rows=10'
        assert kwargs['timeout'] == 10

    def test_search_handler(self, client, session):
        client.search({'q': '*:*'}, handler='/query')
        assert session.calls[-1][1] == 'http://localhost:8983/solr/films/query?q=%2A%3A%2A'

    def test_search_without_params(self, client, session):
        client.search(Common())
        assert session.calls[-1][1] == 'http://localhost:8983/solr/films/select'

    def test_add(self, client, session):
        client.add([{'id': 'a'}, {'id': 'b'}], commit_within=500)
        method, url, kwargs = session.calls[-1]
        assert method == 'POST'
        assert url == 'http://localhost:8983/solr/films/update'
        assert kwargs['headers']['Content-Type'] == 'application/json'
        assert kwargs['data'] == (
            b'{"add":{"commitWithin":500,"doc":{"id":"a"}},'
            b'"add":{"commitWithin":500,"doc":{"id":"b"}},"commit":{}}'
        )

    def test_update_bare_docs(self, client, session):
        client.update({'id': 'a', 'name': 'Béla'})
        body = session.calls[-1][2]['data']
        assert json.loads(body) == {'add': {'doc': {'id': 'a', 'name': 'Béla'}}}

    def test_directives(self, client, session):
        client.delete(['a', 'b'], commit=False)
        assert session.calls[-1][2]['data'] == b'{"delete":{"id":"a"},"delete":{"id":"b"}}'

        client.delete_by_query('id:tt*')
        assert session.calls[-1][2]['data'] == b'{"delete":{"query":"id:tt*"},"commit":{}}'

        client.commit(wait_searcher=True)
        assert session.calls[-1][2]['data'] == b'{"commit":{"waitSearcher":true}}'

        client.optimize(max_segments=10)
        assert session.calls[-1][2]['data'] == b'{"optimize":{"maxSegments":10}}'

        client.rollback()
        assert session.calls[-1][2]['data'] == b'{"rollback":{}}'

    def test_update_needs_update(self, client):
        with pytest.raises(UnsupportedInput):
            client.update(Common(rows=1))
        with pytest.raises(UnsupportedInput):
            client.search(Update(commit=True))

    def test_http_error(self, config):
        c = SolrClient(config=config, session=FakeSession(status_code=500))
        with pytest.raises(SolrRequestError) as e:
            c.update(Update(commit=True))
        assert e.value.status_code == 500
        assert isinstance(e.value.__cause__, requests.HTTPError)

    def test_explicit_url_skips_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        (tmp_path / 'solrwire.yml').write_text('endpoints: [broken\n')
        c = SolrClient('http://solr:8983/solr/core1', session=FakeSession())
        assert c.config is None
        assert c.timeout == 10

    def test_config_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv('HOME', str(tmp_path))
        monkeypatch.delenv('SOLRWIRE_CONFIG', raising=False)
        monkeypatch.delenv('SOLRWIRE_TIMEOUT', raising=False)
        monkeypatch.delenv('SOLRWIRE_LOG_LEVEL', raising=False)
        (tmp_path / 'solrwire.yml').write_text(
            'log_level: debug\nendpoints:\n  default:\n    url: http://solr:8983/solr/films\n')
        try:
            c = SolrClient(session=FakeSession())
            assert c.url == 'http://solr:8983/solr/films'
            assert logging.getLogger('solrwire').level == logging.DEBUG
        finally:
            logging.getLogger('solrwire').setLevel(logging.NOTSET)

import requests

from .config import Config
from .encoder import encode
from .exception import SolrRequestError, UnsupportedInput
from .logger import get_logger, setup_logging
from .params import encode_all
from .query import Update

log = get_logger(__name__)

DEFAULT_TIMEOUT = 10


class SolrClient():
    """
        Thin HTTP wrapper around the encoders.

        url is the collection/core url, e.g. http://localhost:8983/solr/films
        Without url, the named endpoint (or the default one) is taken from config.
        A config loaded here from the environment also sets the package log level.
    """

    def __init__(self, url: str = None, endpoint: str = None, config: Config = None,
                 timeout: float = None, session: requests.Session = None):

        headers = dict()
        if url is None:
            if config is None:
                config = Config()
                setup_logging(config['log_level'])
            ep = config.endpoint(endpoint)
            url = ep['url']
            headers.update(ep.get('headers') or dict())

        self.config = config
        self.url = url.rstrip('/')
        self.timeout = timeout or (config['timeout'] if config is not None else DEFAULT_TIMEOUT)
        self.session = session or requests.Session()
        self.session.headers.update(headers)

    def __repr__(self):
        return f"SolrClient({self.url!r})"

    def handler_url(self, handler: str) -> str:
        return f"{self.url}/{handler.strip('/')}"

    def _check(self, r: requests.Response):
        try:
            r.raise_for_status()
        except requests.HTTPError as e:
            log.warning(f"{r.url} failed: {r.status_code}")
            raise SolrRequestError(f"Solr request failed: {e}", status_code=r.status_code) from e
        return r.json()

    def search(self, *queries, handler: str = 'select') -> dict:
        url = self.handler_url(handler)
        qs = encode_all(*queries)
        log.info(f"GET {url}?{qs}")
        r = self.session.get(f"{url}?{qs}" if qs else url, timeout=self.timeout)
        return self._check(r)

    def update(self, update, handler: str = 'update') -> dict:
        if isinstance(update, (dict, list)):
            update = Update(doc=update)
        if not isinstance(update, Update):
            raise UnsupportedInput(update)

        body = encode(update)
        url = self.handler_url(handler)
        log.info(f"POST {url} ({len(body)} chars)")
        r = self.session.post(url, data=body.encode('utf-8'),
                              headers={'Content-Type': 'application/json'},
                              timeout=self.timeout)
        return self._check(r)

    def add(self, docs, commit: bool = True, commit_within: int = None, overwrite: bool = None) -> dict:
        return self.update(Update(doc=docs, commit=commit, commit_within=commit_within, overwrite=overwrite))

    def delete(self, ids, commit: bool = True) -> dict:
        return self.update(Update(delete_id=ids, commit=commit))

    def delete_by_query(self, queries, commit: bool = True) -> dict:
        return self.update(Update(delete_query=queries, commit=commit))

    def commit(self, wait_searcher: bool = None, expunge_deletes: bool = None) -> dict:
        return self.update(Update(commit=True, wait_searcher=wait_searcher, expunge_deletes=expunge_deletes))

    def optimize(self, wait_searcher: bool = None, max_segments: int = None) -> dict:
        return self.update(Update(optimize=True, wait_searcher=wait_searcher, max_segments=max_segments))

    def rollback(self) -> dict:
        return self.update(Update(rollback=True))

import os

import yaml
from dotenv import load_dotenv

from .defdict import DefDict
from .exception import ConfigException
from .logger import level_name


def find_config():
    locations = [
        'solrwire.yml',
        os.path.expanduser('~/.solrwire.yml'),
        '/etc/solrwire.yml',
    ]

    locations = [ p for p in locations if os.path.exists(p) ]

    if not locations:
        return None

    return locations[0]


class Config(DefDict):
    def __init__(self, path: str = None, env: bool = True):

        super(Config, self).__init__()

        if env:
            load_dotenv()
            path = path or os.environ.get('SOLRWIRE_CONFIG') or find_config()

        self.path = path

        if self.path:
            self.update(self.read(self.path))

        if env:
            self.apply_env()

        self['log_level'] = level_name(self['log_level'])

    def set_defaults(self):
        self._d = {
            'endpoints': dict(),
            'default_endpoint': 'default',
            'timeout': 10,
            'log_level': 'INFO',
        }

    @staticmethod
    def read(path: str) -> dict:
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigException(f"Cannot read config {path!r}: {e}")
        except yaml.YAMLError as e:
            raise ConfigException(f"YAML error in {path}: {e}")

        if data is not None and not isinstance(data, dict):
            raise ConfigException(f"Config {path!r} must be a mapping, not {type(data).__name__}")
        return data or dict()

    def apply_env(self):
        if os.environ.get('SOLRWIRE_URL'):
            if not self.get('endpoints'):
                self['endpoints'] = dict()
            ep = self['endpoints'].setdefault('default', dict())
            ep['url'] = os.environ.get('SOLRWIRE_URL')

        if os.environ.get('SOLRWIRE_TIMEOUT'):
            try:
                self['timeout'] = float(os.environ.get('SOLRWIRE_TIMEOUT'))
            except ValueError:
                raise ConfigException(f"Bad SOLRWIRE_TIMEOUT {os.environ.get('SOLRWIRE_TIMEOUT')!r}")

        if os.environ.get('SOLRWIRE_LOG_LEVEL'):
            self['log_level'] = os.environ.get('SOLRWIRE_LOG_LEVEL')

    def endpoint(self, name: str = None) -> dict:
        """ endpoint settings by name (url, handler, headers) """
        name = name or self.get('default_endpoint', 'default')
        endpoints = self.get('endpoints') or dict()
        if name not in endpoints:
            raise ConfigException(f"No such endpoint {name!r}")

        ep = endpoints[name]
        if not isinstance(ep, dict) or not ep.get('url'):
            raise ConfigException(f"Endpoint {name!r} has no url")
        return ep

    def __repr__(self):
        return f"Config({self.path}) endpoints: {list(self.get('endpoints') or [])}"

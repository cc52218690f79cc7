class DefDict:
    """ dict-like settings holder; subclasses fill defaults in set_defaults() """

    def __init__(self, init: dict = None):
        self._d = dict()
        if hasattr(self, 'set_defaults'):
            self.set_defaults()
        self.update(init or dict())

    def __setitem__(self, key, item):
        self._d[key] = item

    def __getitem__(self, key):
        return self._d[key]

    def __contains__(self, key):
        return key in self._d

    def get(self, key, default=None):
        try:
            return self._d[key]
        except KeyError:
            return default

    def update(self, other: dict):
        """ merge one level deep: nested dicts are updated, not replaced """
        for k, v in other.items():
            if isinstance(v, dict) and isinstance(self._d.get(k), dict):
                self._d[k].update(v)
            else:
                self._d[k] = v

class EncodeException(Exception):
    pass


class UnsupportedInput(EncodeException, TypeError):
    """ no encoder knows this shape """

    def __init__(self, obj):
        self.type_name = type(obj).__name__
        super().__init__(f"Cannot encode input of type {self.type_name!r}")


class MalformedValue(EncodeException, ValueError):
    """ value cannot be written in the requested wire format """

    def __init__(self, value, fmt=None):
        self.value = value
        self.type_name = type(value).__name__
        where = f" as {fmt}" if fmt else ""
        super().__init__(f"Cannot format value of type {self.type_name!r}{where}: {value!r}")


class ConfigException(Exception):
    pass


class SolrRequestError(Exception):
    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)

__version__ = '0.1'

from .encoder import encode
from .params import encode_params, encode_all
from .update import encode_update, encode_document
from .formatter import WireFormat, format_value
from .exception import EncodeException, UnsupportedInput, MalformedValue
from .client import SolrClient
from .logger import setup_logging

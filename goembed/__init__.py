from goembed.config import Config
from goembed.emitter import emit, generate
from goembed.errors import GenerationError
from goembed.literal import escape
from goembed.payload import select_payload

__version__ = '0.1.0'

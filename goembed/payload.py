import gzip
import zlib

from goembed.errors import GenerationError


BEST_COMPRESSION = 9


def compress(raw):
    # mtime is pinned so the gzip header does not change between runs
    try:
        return gzip.compress(raw, compresslevel=BEST_COMPRESSION, mtime=0)
    except (OSError, zlib.error) as e:
        raise GenerationError(f'Compressing payload: {e}') from e


def select_payload(raw, use_gzip):
    if not use_gzip:
        return raw
    return compress(raw)

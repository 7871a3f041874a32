SPACE = 0x20
TAB = 0x09
LF = 0x0A

SIGNIFICANT = frozenset((SPACE, TAB, LF))

CHUNK_SIZE = 64 * 1024

_NAMES = {SPACE: 'space', TAB: 'tab', LF: 'LF'}


def token_name(byte):
    return _NAMES.get(byte, f'0x{byte:02X}')


def _chunks(source):
    if isinstance(source, str):
        yield source.encode('utf-8')
    elif isinstance(source, (bytes, bytearray, memoryview)):
        yield bytes(source)
    else:
        while chunk := source.read(CHUNK_SIZE):
            if isinstance(chunk, str):
                chunk = chunk.encode('utf-8')
            yield chunk


def sanitize(source):
    """
    Yields the significant bytes of ``source`` one at a time.

    Everything that is not a space, tab or line feed is a comment and is
    skipped. ``source`` can be text, bytes or a binary file; files are
    consumed lazily in chunks.
    """
    for chunk in _chunks(source):
        for byte in chunk:
            if byte in SIGNIFICANT:
                yield byte

from typing import Tuple

ASCII_DIGIT_ZERO = 0x30
ASCII_DIGIT_NINE = 0x39


def is_ascii_digit_byte(byte: int):
    return ASCII_DIGIT_ZERO <= byte <= ASCII_DIGIT_NINE


def encode_code_point(code_point: int):
    return chr(code_point).encode('utf-8')


def text_to_utf8_bytes(text: str) -> Tuple[bytes, str]:
    '''
    Returns the UTF-8 bytes and the error handler to pass to :func:`utf8_bytes_to_text`.

    ``surrogateescape`` restores the undecodable bytes of ``os.fsdecode``'d text.
    Any other lone surrogate falls back to ``surrogatepass``.
    '''
    try:
        return text.encode('utf-8', errors='surrogateescape'), 'surrogateescape'
    except UnicodeEncodeError:
        return text.encode('utf-8', errors='surrogatepass'), 'surrogatepass'


def utf8_bytes_to_text(data: bytes, errors: str = 'surrogateescape'):
    return data.decode('utf-8', errors=errors)

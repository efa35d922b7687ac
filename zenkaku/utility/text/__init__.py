from .opt import (
    is_ascii_digit_byte,
    encode_code_point,
    text_to_utf8_bytes,
    utf8_bytes_to_text,
)

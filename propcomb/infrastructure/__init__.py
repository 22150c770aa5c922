# ============================================================================
# propcomb/infrastructure/__init__.py
# ============================================================================
"""
Infrastructure layer - parsing engine (input views, combinators, tokens)
"""

from .input_source import (
    END_OF_INPUT,
    ArrayInput,
    InputSource,
    StreamInput,
    open_file_input,
    remaining_text,
    stream_to_input,
    string_to_input,
)
from .combinators import (
    NOTHING,
    Failure,
    Nothing,
    Pair,
    ParseResult,
    Parser,
    Success,
    and_then,
    bind,
    convert,
    expect_code_point,
    expect_code_points,
    expect_not_code_point,
    expect_several,
    expect_string,
    fail,
    first,
    once_or_more,
    optional,
    or_else,
    repeat_and_fold_left,
    repeated,
    second,
    succeed,
)
from .lexical import (
    expect,
    expect_identifier,
    expect_number,
    expect_spaces,
    skip_leading_spaces,
)

__all__ = [
    "END_OF_INPUT", "ArrayInput", "InputSource", "StreamInput",
    "open_file_input", "remaining_text", "stream_to_input", "string_to_input",
    "NOTHING", "Failure", "Nothing", "Pair", "ParseResult", "Parser", "Success",
    "and_then", "bind", "convert", "expect_code_point", "expect_code_points",
    "expect_not_code_point", "expect_several", "expect_string", "fail", "first",
    "once_or_more", "optional", "or_else", "repeat_and_fold_left", "repeated",
    "second", "succeed",
    "expect", "expect_identifier", "expect_number", "expect_spaces",
    "skip_leading_spaces",
]

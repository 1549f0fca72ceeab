"""
Utilities for parsing whitespace-separated integer streams.

Both drivers read the same shape of input: a leading size followed by
integer pairs, separated by any whitespace (spaces, tabs or newlines).
"""

from typing import List, Tuple


def parse_int_tokens(text: str) -> List[int]:
    """
    Split text on whitespace and convert every token to int.

    Raises:
        ValueError: If a token is not an integer
    """
    values = []
    for position, token in enumerate(text.split(), start=1):
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"Token {position} is not an integer: {token!r}") from None
    return values


def parse_sized_pairs(text: str) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse "size a1 b1 a2 b2 ..." into (size, [(a1, b1), (a2, b2), ...]).

    Raises:
        ValueError: On empty input, non-integer tokens or an unpaired value
    """
    values = parse_int_tokens(text)
    if not values:
        raise ValueError("Input is empty, expected a size followed by integer pairs")

    size, rest = values[0], values[1:]
    if len(rest) % 2:
        raise ValueError(f"Dangling value {rest[-1]} at end of input, expected pairs")

    return size, list(zip(rest[0::2], rest[1::2]))

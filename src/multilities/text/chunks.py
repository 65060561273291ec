"""
Text chunking utilities - no external dependencies.

Split text into fixed-size or near-equal pieces. Pieces are always returned
in reading order and concatenate back to the input.
"""

__all__ = [
    "split_every",
    "split_equally",
]

from multilities.errors import InvalidArgumentError


def split_every(text: str, length: int, start_from_right: bool = False) -> list[str]:
    """
    Split text into pieces of ``length`` characters.

    By default pieces are cut from the left and the last piece holds the
    remainder. With ``start_from_right`` the pieces are anchored at the end
    of the text instead, so the first piece holds the remainder (this is how
    thousands are grouped).

    Args:
        text: Text to split
        length: Size of each piece, must be positive
        start_from_right: Anchor the pieces at the end of the text

    Returns:
        List of pieces in reading order, empty for empty text

    Raises:
        InvalidArgumentError: If length is not positive

    Example:
        >>> split_every("123456789", 4)
        ['1234', '5678', '9']
        >>> split_every("123456789", 4, start_from_right=True)
        ['1', '2345', '6789']
    """
    if length <= 0:
        raise InvalidArgumentError("length", length, "must be positive")

    head = len(text) % length if start_from_right else 0
    pieces = [text[:head]] if head else []
    pieces.extend(text[i : i + length] for i in range(head, len(text), length))
    return pieces


def split_equally(text: str, number_of_chunks: int) -> list[str]:
    """
    Split text into ``number_of_chunks`` pieces of near-equal length.

    Every piece gets ``len(text) // number_of_chunks`` characters and the
    first ``len(text) % number_of_chunks`` pieces one more. When the text is
    shorter than the number of chunks the trailing pieces are empty.

    Args:
        text: Text to split
        number_of_chunks: Number of pieces, at least 1

    Returns:
        Exactly ``number_of_chunks`` pieces

    Raises:
        InvalidArgumentError: If number_of_chunks is below 1

    Example:
        >>> split_equally("0123456789", 4)
        ['012', '345', '67', '89']
    """
    if number_of_chunks < 1:
        raise InvalidArgumentError("number_of_chunks", number_of_chunks, "must be at least 1")

    size, remainder = divmod(len(text), number_of_chunks)
    pieces = []
    start = 0
    for index in range(number_of_chunks):
        end = start + size + (1 if index < remainder else 0)
        pieces.append(text[start:end])
        start = end
    return pieces

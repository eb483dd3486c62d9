"""Build strings piece by piece on top of an ArrayChain."""

from __future__ import annotations

from chaincoll.array_chain import ArrayChain

_NODE_SIZE = 128


class StringBuilder:
    """Collects characters and joins them into one string on demand."""

    def __init__(self) -> None:
        self._chain = ArrayChain(_NODE_SIZE)

    def append(self, s: str | None, size: int | None = None) -> None:
        """Append the first ``size`` characters of ``s`` (all when ``size`` is None).

        ``None`` is ignored.
        """
        if s is None:
            return
        if size is None:
            size = len(s)
        if size < 0 or size > len(s):
            raise ValueError(f"size {size} does not fit a string of length {len(s)}")
        self._chain.extend(s[:size])

    def append_str(self, s: str | None) -> None:
        """Append ``s`` up to its first NUL character; ``None`` is ignored."""
        if s is None:
            return
        self._chain.extend(s.split("\0", 1)[0])

    def to_string(self) -> str:
        """Return everything appended so far as one string."""
        return "".join(self._chain.to_array())

    def __str__(self) -> str:
        return self.to_string()

    def __len__(self) -> int:
        return len(self._chain)


def concat(*args: str | None) -> str:
    """Join the given strings; ``None`` arguments are skipped."""
    builder = StringBuilder()
    for piece in args:
        builder.append_str(piece)
    return builder.to_string()
import logging
from typing import Callable, Iterable

from .errors import StreamError

logger = logging.getLogger(__name__)


class StreamReader:
    """Drains an incremental text stream coming from the completion backend."""

    def __init__(self, chunks: Iterable[str]):
        """
        Initializes the reader.

        Args:
            chunks: An iterable yielding text chunks in arrival order.
        """
        self._chunks = chunks
        self._drained = False

    def drain(self, on_chunk: Callable[[str], None]) -> str:
        """
        Consumes the stream, forwarding every chunk as it arrives.

        Args:
            on_chunk: Called once per non-empty chunk, in arrival order.

        Returns:
            The full concatenated text once the stream ends.

        Raises:
            StreamError: If the transport fails before the end of the stream.
        """
        if self._drained:
            raise RuntimeError("Stream has already been drained")
        self._drained = True

        parts = []
        iterator = iter(self._chunks)
        while True:
            try:
                chunk = next(iterator)
            except StopIteration:
                break
            except StreamError:
                raise
            except Exception as e:
                logger.error(f"Stream terminated after {len(parts)} chunk(s): {e}")
                raise StreamError(f"The response stream ended unexpectedly: {e}") from e

            if not chunk:
                continue
            on_chunk(chunk)
            parts.append(chunk)

        return "".join(parts)

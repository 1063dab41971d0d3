"""
URL Cleaner Utility.
Reduces the path of an Amazon product link to its canonical form:
the segment before 'dp', 'dp' itself and the product id after it.

    /-/en/Jon-Gjengset/dp/1718501854/ref=sr_1_1  →  /Jon-Gjengset/dp/1718501854
"""
import logging
from enum import Enum
from typing import Iterable, Iterator

from linkcleaner.models.models import Clean, Cleaned, Original

logger = logging.getLogger(__name__)

# Amazon's product path marker; matched case-sensitively ("DP" is not a product page)
MARKER = 'dp'


class State(Enum):
    START = 'start'                        # looking for the marker
    AFTER_MARKER = 'after_marker'          # marker matched, emit it next
    EMITTING_TRAILER = 'emitting_trailer'  # emit the one segment after the marker
    DONE = 'done'


class Cleaner:
    """
    Forward-only scanner over path segments.

    Iterating yields the canonical segments. The source is consumed once; only the
    segment immediately before the marker is remembered. Once iteration is exhausted,
    `succeeded` tells whether the output is a canonical product path. When the marker
    is never seen nothing is yielded and the caller keeps the original path.
    """

    def __init__(self, segments: Iterable[str], marker: str = MARKER):
        self._segments = iter(segments)
        self.marker = marker
        self.state = State.START

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        while True:
            if self.state is State.START:
                previous = None
                for segment in self._segments:
                    if segment == self.marker:
                        self.state = State.AFTER_MARKER
                        break
                    previous = segment
                else:
                    raise StopIteration

                logger.debug(f"Found '{self.marker}' after {previous!r}")
                if previous is not None:
                    return previous
                # marker was the first segment, go straight on to emitting it
                continue

            if self.state is State.AFTER_MARKER:
                self.state = State.EMITTING_TRAILER
                return self.marker

            if self.state is State.EMITTING_TRAILER:
                self.state = State.DONE
                return next(self._segments)

            raise StopIteration

    @property
    def succeeded(self) -> bool:
        return self.state is State.DONE


def clean_segments(segments: Iterable[str]) -> Clean[list[str]]:
    """Run a Cleaner to exhaustion; fall back to the untouched segments if it found no marker."""
    segments = list(segments)
    cleaner = Cleaner(segments)
    cleaned = list(cleaner)
    if cleaner.succeeded:
        return Cleaned(cleaned)
    return Original(segments)

# core/utils/rate_limit.py

import time
from typing import Callable, Optional

class SearchCooldown:
    def __init__(self,
                 max_searches: int = 5,
                 window: float = 12.0,
                 clock: Callable[[], float] = time.monotonic):
        """
        Client-side cooldown for catalog searches.

        Searches are counted while each one follows the previous accepted
        search within ``window`` seconds; once ``max_searches`` have been
        counted, further searches in that window are refused. A search made
        after a full window of quiet resets the count. This only keeps a
        well-behaved client polite and is trivially bypassed.

        Args:
            max_searches: Searches allowed in a run of closely spaced searches
            window: Seconds after the last accepted search during which the count is kept
            clock: Monotonic time source in seconds
        """
        self.max_searches = max_searches
        self.window = window
        self.clock = clock
        self.search_count = 0
        self.last_search_time: Optional[float] = None

    def acquire(self) -> bool:
        """Record a search attempt. Returns False if the search should be refused."""
        now = self.clock()

        if self.last_search_time is not None and now - self.last_search_time < self.window:
            if self.search_count >= self.max_searches:
                return False
        else:
            self.search_count = 0

        self.search_count += 1
        self.last_search_time = now
        return True

    def retry_after(self) -> float:
        """Seconds until the next search would be accepted (0 if it would be now)."""
        if self.last_search_time is None or self.search_count < self.max_searches:
            return 0.0
        return max(0.0, self.window - (self.clock() - self.last_search_time))

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, List

from .models import Request


@dataclass
class Floor:
    """Pending requests waiting at one floor, in arrival order."""

    number: int
    queue: Deque[Request] = field(default_factory=deque)

    def add_request(self, request: Request) -> None:
        self.queue.append(request)

    def has_waiting(self) -> bool:
        return bool(self.queue)

    def take(self, accept: Callable[[Request], bool]) -> List[Request]:
        """Remove and return every waiting request ``accept`` approves."""
        taken: List[Request] = []
        remaining: Deque[Request] = deque()
        for request in self.queue:
            if accept(request):
                taken.append(request)
            else:
                remaining.append(request)
        self.queue = remaining
        return taken

    def __len__(self) -> int:
        return len(self.queue)

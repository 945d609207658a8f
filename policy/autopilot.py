# policy/autopilot.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple
import heapq
import numpy as np

from core.interfaces import BODY, HEAD, Coord, Heading, HeadingPolicy, Snapshot

HEADINGS: List[Heading] = [Heading.RIGHT, Heading.DOWN, Heading.LEFT, Heading.UP]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0]-b[0]) + abs(a[1]-b[1])


class Autopilot(HeadingPolicy):
    """
    Single-step replanning A* to the food:
      - Obstacles = snake body (tail treated as free since it moves)
      - Walls are implicit boundaries
      - If no path: pick the safest greedy step
    """
    def __init__(self, consider_tail_free: bool = True):
        self.consider_tail_free = consider_tail_free

    def act(self, snap: Snapshot) -> Heading:
        blocked = np.isin(snap.occupancy(), (BODY, HEAD))
        if self.consider_tail_free and len(snap.snake) > 1:
            tx, ty = snap.snake[-1]
            # a grown tail is duplicated and does not move this tick
            if snap.snake[-1] != snap.snake[-2]:
                blocked[ty, tx] = False

        path = self._astar(snap.head, snap.food, blocked)
        if path and len(path) >= 2:
            nxt = path[1]
            h = Heading((nxt[0] - snap.head[0], nxt[1] - snap.head[1]))
            if h != snap.heading.reverse or len(snap.snake) == 1:
                return h
        return self._safe_greedy(snap, blocked)

    def _free(self, p: Coord, blocked: np.ndarray) -> bool:
        H, W = blocked.shape
        return 0 <= p[0] < W and 0 <= p[1] < H and not blocked[p[1], p[0]]

    def _astar(self, start: Coord, goal: Coord, blocked: np.ndarray) -> Optional[List[Coord]]:
        openq: List[Tuple[int, Coord]] = []
        g: Dict[Coord, int] = {start: 0}
        parent: Dict[Coord, Coord] = {}
        heapq.heappush(openq, (manhattan(start, goal), start))

        while openq:
            _, u = heapq.heappop(openq)
            if u == goal:
                path = [u]
                while u in parent:
                    u = parent[u]
                    path.append(u)
                return list(reversed(path))
            for h in HEADINGS:
                v = h.offset(u)
                if not self._free(v, blocked):
                    continue
                cand = g[u] + 1
                if cand < g.get(v, 1 << 30):
                    g[v] = cand
                    parent[v] = u
                    heapq.heappush(openq, (cand + manhattan(v, goal), v))
        return None

    def _safe_greedy(self, snap: Snapshot, blocked: np.ndarray) -> Heading:
        # closer to food first, but only moves that keep us alive
        moves = []
        for h in HEADINGS:
            if h == snap.heading.reverse and len(snap.snake) > 1:
                continue
            nxt = h.offset(snap.head)
            if self._free(nxt, blocked):
                moves.append((manhattan(nxt, snap.food), HEADINGS.index(h), h))
        if moves:
            moves.sort(key=lambda t: (t[0], t[1]))
            return moves[0][2]
        return snap.heading  # trapped; move forward

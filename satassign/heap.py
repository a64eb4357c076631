"""A binary max-heap of variable ids ordered by an external activity score."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ["VarIdHeap"]


class VarIdHeap:
    """Heap of variable ids (1-based) keyed by ``activity(vi)``.

    Both internal lists have a fixed length equal to the number of vars + 1.
    ``_heap[k]`` is the var at heap position ``k``; ``_idxs[vi]`` is the
    position of ``vi``.  ``_idxs[0]`` holds the number of live elements, so a
    var is in the heap exactly when its position is not beyond that count.
    """

    def __init__(self, n: int, activity: Callable[[int], float]) -> None:
        self._activity = activity
        self._heap: list[int] = list(range(n + 1))
        self._idxs: list[int] = list(range(n + 1))
        self._idxs[0] = n

    def __len__(self) -> int:
        return self._idxs[0]

    def __contains__(self, vi: object) -> bool:
        if not isinstance(vi, int) or not 0 < vi < len(self._idxs):
            return False
        return self._idxs[vi] <= self._idxs[0]

    def __str__(self) -> str:
        return f" - seek pointer - nth -> var: {self._heap}\n - var -> nth: {self._idxs}"

    def _validate(self, vi: int) -> None:
        if not 0 < vi < len(self._idxs):
            raise IndexError(f"invalid var id: {vi}")

    def clear(self) -> None:
        """Empty the heap, restoring the identity layout."""
        for i in range(len(self._idxs)):
            self._idxs[i] = i
            self._heap[i] = i

    def expand(self) -> None:
        """Make room for one more var; the new var is not in the heap."""
        new_id = len(self._heap)
        self._heap.append(new_id)
        self._idxs.append(new_id)

    def insert(self, vi: int) -> None:
        """Insert ``vi`` (or re-sift it if present) and restore heap order."""
        self._validate(vi)
        heap, idxs = self._heap, self._idxs
        if vi in self:
            pos = idxs[vi]
        else:
            i = idxs[vi]
            pos = idxs[0] + 1
            vn = heap[pos]
            heap[i], heap[pos] = heap[pos], heap[i]
            idxs[vi], idxs[vn] = idxs[vn], idxs[vi]
            idxs[0] = pos
        self._percolate_up(pos)

    def update(self, vi: int) -> None:
        """Move ``vi`` up after its activity has grown."""
        self._validate(vi)
        if vi in self:
            self._percolate_up(self._idxs[vi])

    def pop_root(self) -> int:
        """Remove and return the var at the top of the heap."""
        if not len(self):
            raise IndexError("pop from an empty heap")
        heap, idxs = self._heap, self._idxs
        n = idxs[0]
        vs = heap[1]
        vn = heap[n]
        heap[1], heap[n] = heap[n], heap[1]
        idxs[vs], idxs[vn] = idxs[vn], idxs[vs]
        idxs[0] -= 1
        if 1 < idxs[0]:
            self._percolate_down(1)
        return vs

    def remove(self, vi: int) -> None:
        """Take ``vi`` out of the heap if it is there."""
        self._validate(vi)
        heap, idxs = self._heap, self._idxs
        i = idxs[vi]
        n = idxs[0]
        if n < i:
            return
        vn = heap[n]
        heap[n], heap[i] = heap[i], heap[n]
        idxs[vn], idxs[vi] = idxs[vi], idxs[vn]
        idxs[0] -= 1
        if 1 < idxs[0]:
            self._percolate_down(i)

    def peek(self) -> int:
        """Return the var at the top of the heap without removing it."""
        if not len(self):
            raise IndexError("peek into an empty heap")
        return self._heap[1]

    def check(self) -> None:
        """Raise ``ValueError`` unless both tables are permutations of the var ids."""
        heap_part = sorted(self._heap[1:])
        idx_part = sorted(self._idxs[1:])
        for expected, (h, d) in enumerate(zip(heap_part, idx_part), start=1):
            if h != expected:
                raise ValueError(f"heap {expected - 1} {h} {heap_part}")
            if d != expected:
                raise ValueError(f"idxs {expected - 1} {d} {idx_part}")

    def _percolate_up(self, start: int) -> None:
        heap, idxs, act = self._heap, self._idxs, self._activity
        q = start
        vq = heap[q]
        aq = act(vq)
        while True:
            p = q // 2
            if p == 0:
                break
            vp = heap[p]
            if act(vp) < aq:
                heap[q] = vp
                idxs[vp] = q
                q = p
            else:
                break
        heap[q] = vq
        idxs[vq] = q

    def _percolate_down(self, start: int) -> None:
        heap, idxs, act = self._heap, self._idxs, self._activity
        n = len(self)
        i = start
        vi = heap[i]
        ai = act(vi)
        while True:
            left = 2 * i
            if left < n:
                vl = heap[left]
                al = act(vl)
                right = left + 1
                if right < n and al < act(heap[right]):
                    target, vc = right, heap[right]
                    ac = act(vc)
                else:
                    target, vc, ac = left, vl, al
                if ai < ac:
                    heap[i] = vc
                    idxs[vc] = i
                    i = target
                    continue
            heap[i] = vi
            idxs[vi] = i
            return
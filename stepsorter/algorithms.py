from enum import Enum

from .events import StepEvent

# ============================================================
# ===================== ALGORITHM STATES =====================
# ============================================================
#
# Every algorithm is an explicit state object instead of a generator.
# advance(arr) performs exactly one comparison (plus the swap or move it
# implies) and leaves the cursors pointing at the next comparison. It is
# only ever called with len(arr) >= 2 and while done is False; the engine
# handles empty and single-element arrays itself.
#
# Equal elements never move: every swap is guarded by a strict ">".


class SortState:
    __slots__ = ("done",)

    def __init__(self):
        self.done = False

    def start(self, arr):
        """Called once, before the first advance(), with the array to sort."""

    def advance(self, arr) -> StepEvent:
        raise NotImplementedError


class BubbleState(SortState):
    """
    Progress through bubble sort.

    Attributes
    ----------
    pass_   : int   — completed passes; the last pass_ slots are final
    index   : int   — left position of the next adjacent comparison
    swapped : bool  — whether the current pass moved anything
    """
    __slots__ = ("pass_", "index", "swapped")

    def __init__(self):
        super().__init__()
        self.pass_   = 0
        self.index   = 0
        self.swapped = False

    def advance(self, arr):
        n, i = len(arr), self.index
        swap = arr[i] > arr[i+1]
        if swap:
            arr[i], arr[i+1] = arr[i+1], arr[i]
            self.swapped = True

        self.index += 1
        if self.index >= n - 1 - self.pass_:
            self.pass_ += 1
            # A pass without swaps proves the array ordered
            if not self.swapped or self.pass_ >= n - 1:
                self.done = True
            self.index   = 0
            self.swapped = False
        return StepEvent((i, i+1), swap)


class InsertionState(SortState):
    """Sinks arr[current] left one adjacent swap per step."""
    __slots__ = ("current", "position")

    def __init__(self):
        super().__init__()
        self.current  = 1
        self.position = 1

    def advance(self, arr):
        j = self.position
        swap = arr[j-1] > arr[j]
        if swap:
            arr[j-1], arr[j] = arr[j], arr[j-1]
            self.position -= 1

        if not swap or self.position == 0:
            self.current += 1
            self.position = self.current
            if self.current >= len(arr):
                self.done = True
        return StepEvent((j-1, j), swap)


class ConfirmedState(SortState):
    """
    Base for algorithms that would otherwise re-sort an ordered array.

    Before handing over to sort_step() it scans adjacent pairs. An ordered
    array finishes after that single pass with no swaps; the first
    inversion found hands control to the real algorithm on the next step.
    """
    __slots__ = ("check", "confirming")

    def __init__(self):
        super().__init__()
        self.check      = 0
        self.confirming = True

    def advance(self, arr):
        if not self.confirming:
            return self.sort_step(arr)

        p = self.check
        if arr[p] > arr[p+1]:
            self.confirming = False
        else:
            self.check += 1
            if self.check >= len(arr) - 1:
                self.done = True
        return StepEvent((p, p+1))

    def sort_step(self, arr) -> StepEvent:
        raise NotImplementedError


class SelectionState(ConfirmedState):
    """
    Progress through selection sort.

    Attributes
    ----------
    boundary : int   — first slot of the unsorted suffix
    scan     : int   — next position compared against the minimum
    minimum  : int   — position of the smallest value seen this pass
    ordered  : bool  — no adjacent pair scanned this pass was inverted
    """
    __slots__ = ("boundary", "scan", "minimum", "ordered")

    def __init__(self):
        super().__init__()
        self.boundary = 0
        self.scan     = 1
        self.minimum  = 0
        self.ordered  = True

    def sort_step(self, arr):
        n, j, m = len(arr), self.scan, self.minimum
        # Strict: among equal values the leftmost stays the minimum
        if arr[j] < arr[m]:
            self.minimum = j
        if arr[j-1] > arr[j]:
            self.ordered = False
        self.scan += 1
        event = StepEvent((m, j))
        if self.scan < n:
            return event

        b, m = self.boundary, self.minimum
        if m != b:
            arr[b], arr[m] = arr[m], arr[b]
            event = StepEvent((b, m), True)

        # An ordered suffix means the whole array is ordered
        self.boundary += 1
        if self.ordered or self.boundary >= n - 1:
            self.done = True
        self.scan    = self.boundary + 1
        self.minimum = self.boundary
        self.ordered = True
        return event


class QuickState(ConfirmedState):
    """
    Lomuto quick sort with an explicit range stack.

    Attributes
    ----------
    stack : list[(int, int)]  — inclusive (low, high) ranges still to partition
    span  : (int, int) | None — range being partitioned, pivot at span[1]
    store : int               — next slot for a value below the pivot
    scan  : int               — next position compared against the pivot
    """
    __slots__ = ("stack", "span", "store", "scan")

    def __init__(self):
        super().__init__()
        self.stack = []
        self.span  = None
        self.store = 0
        self.scan  = 0

    def start(self, arr):
        self.stack = [(0, len(arr) - 1)]

    def sort_step(self, arr):
        if self.span is None:
            lo, hi = self.stack.pop()
            self.span  = (lo, hi)
            self.store = self.scan = lo
        lo, hi = self.span

        if self.scan < hi:
            i, j = self.store, self.scan
            event = StepEvent((j, hi))
            if arr[j] < arr[hi]:
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    event = StepEvent((i, j), True)
                self.store += 1
            self.scan += 1
            # Everything was below the pivot: it is already in place
            if self.scan == hi and self.store == hi:
                self._finish(hi)
            return event

        i = self.store
        swap = arr[i] > arr[hi]
        if swap:
            arr[i], arr[hi] = arr[hi], arr[i]
        self._finish(i)
        return StepEvent((i, hi), swap)

    def _finish(self, pivot):
        lo, hi = self.span
        self.span = None
        if hi - (pivot + 1) >= 1:
            self.stack.append((pivot + 1, hi))
        if (pivot - 1) - lo >= 1:
            self.stack.append((lo, pivot - 1))
        if not self.stack:
            self.done = True


class MergeState(ConfirmedState):
    """
    Bottom-up merge sort.

    Winners are written into scratch; scratch is copied back into the
    array once every pair of segments at the current width is merged.
    That copy is the only time the array changes, so it is the only step
    reported as swapped.
    """
    __slots__ = ("width", "offset", "left", "mid", "right", "end", "out", "scratch", "moved")

    def __init__(self):
        super().__init__()
        self.width   = 1
        self.offset  = 0
        self.left    = self.mid = 0
        self.right   = self.end = 0
        self.out     = 0
        self.scratch = []
        self.moved   = False

    def start(self, arr):
        self.scratch = list(arr)
        self._seek(arr, 0)

    def sort_step(self, arr):
        self.moved = False
        i, j = self.left, self.right
        take_right = arr[i] > arr[j]
        if take_right:
            self.scratch[self.out] = arr[j]
            self.right += 1
        else:
            self.scratch[self.out] = arr[i]
            self.left += 1
        self.out += 1

        if self.left == self.mid or self.right == self.end:
            # One side is exhausted, the other is already in order
            rest = list(arr[self.left:self.mid]) + list(arr[self.right:self.end])
            self.scratch[self.out:self.end] = rest
            self._seek(arr, self.offset + 2 * self.width)
        return StepEvent((i, j), self.moved)

    def _seek(self, arr, offset):
        n = len(arr)
        while True:
            if offset >= n:
                if list(arr) != self.scratch:
                    arr[:] = self.scratch
                    self.moved = True
                self.width *= 2
                if self.width >= n:
                    self.done = True
                    return
                offset = 0

            mid = min(offset + self.width, n)
            end = min(offset + 2 * self.width, n)
            if mid < end:
                self.offset = self.left = self.out = offset
                self.mid = self.right = mid
                self.end = end
                return
            # Trailing segment without a partner carries over unchanged
            self.scratch[offset:end] = arr[offset:end]
            offset = end


# ============================================================
# ======================== SELECTOR ==========================
# ============================================================

class Algorithm(Enum):
    BUBBLE    = ("Bubble Sort",    "bubble")
    SELECTION = ("Selection Sort", "selection")
    INSERTION = ("Insertion Sort", "insertion")
    QUICK     = ("Quick Sort",     "quick")
    MERGE     = ("Merge Sort",     "merge")

    def __init__(self, label, key):
        self.label = label
        self.key   = key

    @classmethod
    def from_key(cls, key: str) -> "Algorithm":
        for algo in cls:
            if algo.key == key:
                return algo
        raise KeyError(f"Unknown key: {key}")

    def new_state(self) -> SortState:
        return _STATES[self]()


_STATES = {
    Algorithm.BUBBLE:    BubbleState,
    Algorithm.SELECTION: SelectionState,
    Algorithm.INSERTION: InsertionState,
    Algorithm.QUICK:     QuickState,
    Algorithm.MERGE:     MergeState,
}

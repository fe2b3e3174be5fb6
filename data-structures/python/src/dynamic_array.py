from typing import TypeVar, Generic, Iterable, Iterator, List, Optional

T = TypeVar('T')

INITIAL_CAPACITY = 10


class ConcurrentModificationError(RuntimeError):
    """Raised by an iterator whose array was structurally modified after it was created."""


class DynamicArray(Generic[T]):
    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if not isinstance(capacity, int) or capacity < 0:
            raise ValueError(f"capacity must be a non-negative integer, got {capacity!r}")
        self._capacity: int = max(1, capacity)
        self._data: List[Optional[T]] = [None] * self._capacity
        self._size: int = 0
        self._mod_count: int = 0

    @staticmethod
    def from_iterable(items: Iterable[T]) -> 'DynamicArray[T]':
        """Build an array holding items in iteration order.

        Note: Items are added one at a time with append, so the array's
        modification count ends at len(items).
        """
        items = list(items)
        arr: DynamicArray[T] = DynamicArray(max(INITIAL_CAPACITY, len(items)))
        for item in items:
            arr.append(item)
        return arr

    def _check_index(self, method: str, index: int, upper: int) -> None:
        if index < 0 or index >= upper:
            raise IndexError(
                f"DynamicArray.{method}: index out of range (index={index}, size={self._size})"
            )

    def _reallocate(self, new_cap: int) -> None:
        new_data: List[Optional[T]] = [None] * new_cap
        for i in range(self._size):
            new_data[i] = self._data[i]
        self._data = new_data
        self._capacity = new_cap

    def _grow(self) -> None:
        self._reallocate(INITIAL_CAPACITY if self._capacity == 0 else 2 * self._capacity)

    def append(self, value: T) -> bool:
        if self._size == self._capacity:
            self._grow()
        self._data[self._size] = value
        self._size += 1
        self._mod_count += 1
        return True

    def insert_at(self, index: int, value: T) -> None:
        self._check_index("insert_at", index, self._size + 1)
        if self._size == self._capacity:
            self._grow()
        for i in range(self._size, index, -1):
            self._data[i] = self._data[i - 1]
        self._data[index] = value
        self._size += 1
        self._mod_count += 1

    def get(self, index: int) -> T:
        self._check_index("get", index, self._size)
        return self._data[index]

    def set(self, index: int, value: T) -> T:
        self._check_index("set", index, self._size)
        old_value = self._data[index]
        self._data[index] = value
        return old_value

    def _delete(self, index: int) -> T:
        value = self._data[index]
        for i in range(index + 1, self._size):
            self._data[i - 1] = self._data[i]
        self._size -= 1
        self._data[self._size] = None
        self._mod_count += 1
        return value

    def remove_at(self, index: int) -> T:
        self._check_index("remove_at", index, self._size)
        return self._delete(index)

    def remove(self, value: T) -> bool:
        index = self.index_of(value)
        if index == -1:
            return False
        self._delete(index)
        return True

    def index_of(self, value: T) -> int:
        for i in range(self._size):
            item = self._data[i]
            if item is value or item == value:
                return i
        return -1

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0
        self._mod_count += 1

    def ensure_capacity(self, min_capacity: int) -> None:
        if min_capacity <= self._capacity:
            return
        self._reallocate(max(min_capacity, max(1, self._capacity * 2)))

    def trim_to_size(self) -> None:
        if self._capacity == self._size:
            return
        self._reallocate(self._size)

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __setitem__(self, index: int, value: T) -> None:
        self.set(index, value)

    def __contains__(self, value: object) -> bool:
        return self.index_of(value) != -1

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> 'DynamicArrayIterator[T]':
        return DynamicArrayIterator(self)

    def __repr__(self) -> str:
        return f"DynamicArray([{', '.join(repr(self._data[i]) for i in range(self._size))}])"

    def __str__(self) -> str:
        if self._size == 0:
            return "[]"
        return "[" + ", ".join(str(self._data[i]) for i in range(self._size)) + "]"


class DynamicArrayIterator(Generic[T]):
    """Forward cursor over a DynamicArray that fails fast on structural change.

    The array's modification count is captured at creation and compared on
    every call to __next__, before any element is read. has_next() does not
    check it.
    """

    def __init__(self, array: DynamicArray[T]) -> None:
        self._array = array
        self._cursor: int = 0
        self._expected_mod_count: int = array._mod_count

    def has_next(self) -> bool:
        return self._cursor != self._array._size

    def __iter__(self) -> 'DynamicArrayIterator[T]':
        return self

    def __next__(self) -> T:
        if self._array._mod_count != self._expected_mod_count:
            raise ConcurrentModificationError(
                "DynamicArray was structurally modified during iteration"
            )
        if self._cursor >= self._array._size:
            raise StopIteration
        value = self._array._data[self._cursor]
        self._cursor += 1
        return value

import logging
from typing import Generic, TypeVar, Hashable, Mapping as MappingType, Union, Optional, Iterable as IterableType, \
    Iterator, ItemsView, KeysView, ValuesView
from collections import Counter
from collections.abc import Mapping

_T = TypeVar('_T', bound=Hashable)
_Source = Union['Multiset[_T]', IterableType[_T], MappingType[_T, int]]

logger = logging.getLogger(__name__)


class Multiset(Generic[_T]):
    """A multiset implementation.

    A multiset (sometimes called a bag) is similar to the builtin :class:`set`, but elements can occur
    multiple times in the multiset. Occurrences are tracked by count rather than stored repeatedly,
    and the total number of occurrences is cached.

    Copies share their storage until one of them is mutated, so a multiset behaves like a value:
    changing a copy is never observable through the original.

    :see: https://en.wikipedia.org/wiki/Multiset
    """

    __slots__ = ('_elements', '_total', '_shared')
    _elements: Counter[_T]
    _total: int
    _shared: bool

    def __init__(self, iterable: Optional[_Source] = None):
        if isinstance(iterable, Multiset):
            iterable._shared = True
            self._elements = iterable._elements
            self._total = iterable._total
            self._shared = True
            return
        self._elements = Counter[_T]()
        self._total = 0
        self._shared = False
        if isinstance(iterable, Mapping):
            for element, occurrences in iterable.items():
                self.insert(element, occurrences)
        elif iterable is not None:
            for element in iterable:
                self.insert(element)

    @classmethod
    def of(cls, *elements: _T) -> 'Multiset[_T]':
        """Builds a multiset from the listed elements, keeping every duplicate.

        ``Multiset.of('x', 'x', 'y')`` holds two occurrences of ``'x'``.
        """
        return cls(elements)

    @property
    def count(self) -> int:
        'Number of elements stored in the multiset, including multiple copies.'
        return self._total

    @property
    def unique_count(self) -> int:
        return len(self._elements)

    @property
    def is_empty(self) -> bool:
        return self._total == 0

    def contains(self, element: _T) -> bool:
        return element in self._elements

    def occurrences(self, element: _T) -> int:
        return self._elements.get(element, 0)

    def __contains__(self, element: object) -> bool:
        return element in self._elements

    def __getitem__(self, element: _T) -> int:
        return self._elements.get(element, 0)

    def __len__(self) -> int:
        return self._total

    def __bool__(self) -> bool:
        return self._total > 0

    def __detach(self):
        if self._shared:
            logger.debug(f'Detaching shared storage of {len(self._elements)} unique elements')
            self._elements = self._elements.copy()
            self._shared = False

    def insert(self, element: _T, occurrences: int = 1) -> int:
        """
        Inserts a number of occurrences of an element into the multiset.

        Returns the number of occurrences of the element before the operation.
        Raises ValueError if fewer than one occurrence is requested.
        """
        if occurrences < 1:
            raise ValueError('Cannot insert fewer than one occurrence.')
        self.__detach()
        previous = self._elements.get(element, 0)
        self._elements[element] = previous + occurrences
        self._total += occurrences
        return previous

    def remove(self, element: _T, occurrences: int = 1) -> int:
        """
        Removes a number of occurrences of an element from the multiset, if present.
        If the multiset holds fewer occurrences than requested, all of them are removed.

        Returns the number of occurrences of the element before the operation.
        Raises ValueError if fewer than one occurrence is requested.
        """
        if occurrences < 1:
            raise ValueError('Cannot remove fewer than one occurrence.')
        current = self._elements.get(element, 0)
        if current == 0:
            return 0
        self.__detach()
        removed = min(current, occurrences)
        self._total -= removed
        if current == removed:
            del self._elements[element]
        else:
            self._elements[element] = current - removed
        return current

    def remove_all_of(self, element: _T) -> int:
        'Removes every occurrence of an element, returning how many there were.'
        current = self.occurrences(element)
        if current >= 1:
            return self.remove(element, current)
        return 0

    def remove_all(self, keep_capacity: bool = True):
        """
        Removes all the elements from the multiset.

        With keep_capacity the existing storage is cleared in place, otherwise it is
        released and replaced by a new one. Both leave the multiset empty.
        """
        logger.debug(f'Clearing multiset of {self._total} occurrences ({len(self._elements)} unique)')
        if keep_capacity and not self._shared:
            self._elements.clear()
        else:
            self._elements = Counter[_T]()
            self._shared = False
        self._total = 0

    def __iter__(self) -> Iterator[_T]:
        return self._elements.elements()

    def items(self) -> ItemsView[_T, int]:
        return self._elements.items()

    def distinct_elements(self) -> KeysView[_T]:
        return self._elements.keys()

    def multiplicities(self) -> ValuesView[int]:
        return self._elements.values()

    def isdisjoint(self, other: 'Multiset[_T]') -> bool:
        return self._elements.keys().isdisjoint(other._elements.keys())

    def issubset(self, other: 'Multiset[_T]') -> bool:
        if self._total > other._total:
            return False
        return all(q <= other[element] for element, q in self._elements.items())

    def issuperset(self, other: 'Multiset[_T]') -> bool:
        return other.issubset(self)

    def combine(self, other: 'Multiset[_T]') -> 'Multiset[_T]':
        result = self.copy()
        for element, q in other._elements.items():
            result.insert(element, q)
        return result

    def copy(self) -> 'Multiset[_T]':
        return self.__class__(self)

    __copy__ = copy

    def __le__(self, other: 'Multiset[_T]') -> bool:
        return self.issubset(other)

    def __ge__(self, other: 'Multiset[_T]') -> bool:
        return self.issuperset(other)

    def __add__(self, other: 'Multiset[_T]') -> 'Multiset[_T]':
        return self.combine(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiset):
            return False
        if self._total != other._total or len(self._elements) != len(other._elements):
            return False
        return all(other[element] == q for element, q in self._elements.items())

    def __hash__(self) -> int:
        # frozenset keeps the hash independent of enumeration order
        return hash((len(self._elements), self._total, frozenset(self._elements.items())))

    def __str__(self) -> str:
        return '[' + ', '.join(str(element) for element in self) + ']'

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}([{", ".join(repr(element) for element in self)}])'

from .multiset import Multiset

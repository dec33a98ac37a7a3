"""
Generic collection primitives shared by the query operations.
"""

from typing import Dict, Hashable, Iterable, List, Set, Tuple, TypeVar

K = TypeVar('K', bound=Hashable)
V = TypeVar('V', bound=Hashable)


def distinct_sorted(values: Iterable[str]) -> List[str]:
	"""
	Deduplicate strings and sort them ascending by code point (ordinal order).
	No case folding or locale rules are applied.
	"""
	return sorted(set(values))


def group_into_sets(pairs: Iterable[Tuple[K, V]]) -> Dict[K, Set[V]]:
	"""
	Fold (key, value) pairs into a mapping of sets.
	Keys keep first-seen order; a key only exists if at least one pair carried it.
	"""
	grouped: Dict[K, Set[V]] = {}
	for key, value in pairs:
		if key not in grouped:
			grouped[key] = {value}  # insert if absent
		else:
			grouped[key].add(value)  # else add to the existing set
	return grouped

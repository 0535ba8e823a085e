"""Type hints used in Two Stage."""

from typing import Dict, List, Tuple

# A 0-based pair of indices into a seeded qualifier list
SeedPair = Tuple[int, int]
# All round 1 pairings of a bracket
SeedPairs = List[SeedPair]

# Group label -> participant ids, in first-seen order
GroupMembers = Dict[str, List[str]]

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Iterable

from codec import Weight

# This adjustment affects only the low and singles tables.
BUMP_START = 0x2384 # Latin small capital A
BUMP_END = 0x2454 # Small gap above this, before Latin H, that we can use
BUMP = 1

SHIFT_START = 0x2380 # Latin script begins
SHIFT_END = 0x72B6 # Large gap above this that we can use
SHIFT = 0x400

FIRST_ARABIC_PRIMARY = 0x2A68 # 0621, ARABIC LETTER HAMZA
LAST_ARABIC_PRIMARY = 0x2B56 # 088E, ARABIC VERTICAL TAIL
ARABIC_OFFSET = 0x600

LAST_PRIMARY_BEFORE_LATIN = 0x237F
FIRST_LATIN_PRIMARY = SHIFT_START + SHIFT # 0061, LATIN SMALL LETTER A

# Primaries are stored in 16 bits.
PRIMARY_LIMIT = 0x10000

class RangeShift:
	def __init__(self, first: int, last: int, offset: int):
		assert first <= last
		self.first = first
		self.last = last
		self.offset = offset

	def applies(self, primary: int) -> bool:
		return self.first <= primary <= self.last

	def apply(self, primary: int) -> int:
		return primary + self.offset

	def __repr__(self) -> str:
		return f"RangeShift({self.first:#06x}..={self.last:#06x}, {self.offset:+#x})"

# Moves individual primaries to hand-picked targets.
class PrimaryMapping:
	def __init__(self, mapping: dict[int, int]):
		self.mapping = mapping

	def applies(self, primary: int) -> bool:
		return primary in self.mapping

	def apply(self, primary: int) -> int:
		return self.mapping[primary]

	def __repr__(self) -> str:
		return f"PrimaryMapping({len(self.mapping)} primaries)"

Policy = RangeShift | PrimaryMapping

BUMP_POLICY = RangeShift(BUMP_START, BUMP_END, BUMP)
SHIFT_POLICY = RangeShift(SHIFT_START, SHIFT_END, SHIFT)

# The whole Arabic block, moved into the gap that the shift opens up just before Latin.
ARABIC_SCRIPT_POLICY = RangeShift(FIRST_ARABIC_PRIMARY, LAST_ARABIC_PRIMARY, -ARABIC_OFFSET)

# Arabic letters placed next to their nearest Latin counterparts. Targets are given in shifted (and, where
# the Latin letter is bumped, bumped) CLDR terms, and each lands on a gap in that ordering.
ARABIC_INTERLEAVED_POLICY = PrimaryMapping({
	0x2A69: 0x2381 + SHIFT, # Alif madda
	0x2A6A: 0x2382 + SHIFT, # Alif hamza above
	0x2A6E: 0x2383 + SHIFT, # Alif hamza below
	0x2A76: 0x2384 + SHIFT, # Alif
	0x2A78: 0x239B + BUMP + SHIFT, # Ba
	0x2AA9: 0x23CB + BUMP + SHIFT, # Dal
	0x2AAA: 0x23CC + BUMP + SHIFT, # Dhal
	0x2AD8: 0x23CD + BUMP + SHIFT, # Ḍ
	0x2AED: 0x2423 + BUMP + SHIFT, # Fa
	0x2AE5: 0x2432 + BUMP + SHIFT, # Gh
	0x2A9E: 0x2459 + SHIFT, # Ḥ
	0x2B30: 0x245A + SHIFT, # Ha
	0x2A93: 0x2490 + SHIFT, # Jim
	0x2A9F: 0x24A9 + SHIFT, # Kh
	0x2B00: 0x24AA + SHIFT, # Kaf
	0x2B19: 0x24BD + SHIFT, # Lam
	0x2B21: 0x24F7 + SHIFT, # Mim
	0x2B25: 0x2506 + SHIFT, # Nun
	0x2AF9: 0x2572 + SHIFT, # Qaf
	0x2AB9: 0x2585 + SHIFT, # Ra
	0x2ACC: 0x25C7 + SHIFT, # Sin
	0x2ACD: 0x25C8 + SHIFT, # Shin
	0x2AD7: 0x25C9 + SHIFT, # Ṣ
	0x2A89: 0x25F2 + SHIFT, # Ta
	0x2A8A: 0x25F3 + SHIFT, # Tha
	0x2ADD: 0x25F4 + SHIFT, # Ṭ
	0x2B36: 0x2657 + SHIFT, # Waw
	0x2B45: 0x266D + SHIFT, # Ya
	0x2ABA: 0x2683 + SHIFT, # Za
	0x2ADE: 0x2684 + SHIFT, # Ẓ
})

class Tailoring(StrEnum):
	ducet = "ducet"
	cldr = "cldr"
	arabic_script = "arabic_script"
	arabic_interleaved = "arabic_interleaved"

def uses_cldr_keys(tailoring: Tailoring) -> bool:
	return tailoring != Tailoring.ducet

@dataclass
class Remapper:
	# Tried first; a primary it moves is final.
	relocation: Policy | None = None
	# Otherwise these run in order, each seeing the previous one's result.
	adjustments: list[Policy] = field(default_factory = list)

	# Returns the new primary, and whether the relocation produced it.
	def remap_primary(self, primary: int) -> tuple[int, bool]:
		if self.relocation is not None and self.relocation.applies(primary):
			return self.relocation.apply(primary), True

		for policy in self.adjustments:
			if policy.applies(primary):
				primary = policy.apply(primary)

		return primary, False

	def remap_weight(self, weight: Weight) -> tuple[Weight, bool]:
		primary, relocated = self.remap_primary(weight.primary)

		return weight._replace(primary = primary), relocated

def remapper_for(tailoring: Tailoring, bump: bool) -> Remapper:
	if tailoring == Tailoring.ducet:
		return Remapper()

	adjustments: list[Policy] = [BUMP_POLICY, SHIFT_POLICY] if bump else [SHIFT_POLICY]

	relocation = {
		Tailoring.cldr: None,
		Tailoring.arabic_script: ARABIC_SCRIPT_POLICY,
		Tailoring.arabic_interleaved: ARABIC_INTERLEAVED_POLICY,
	}[tailoring]

	return Remapper(relocation, adjustments)

# A relocated range has to fit strictly between `below` and `above`.
def check_relocation_bounds(policy: RangeShift, below: int, above: int) -> None:
	new_first = policy.apply(policy.first)
	new_last = policy.apply(policy.last)

	assert new_first > below, f"{policy} starts at {new_first:#x}, not above {below:#x}"
	assert new_last < above, f"{policy} ends at {new_last:#x}, not below {above:#x}"

# No two different primaries of a table may end up with the same remapped value.
def check_injective(primaries: Iterable[int], remapper: Remapper) -> None:
	sources: dict[int, int] = {}

	for primary in primaries:
		remapped, _ = remapper.remap_primary(primary)

		existing = sources.setdefault(remapped, primary)
		assert existing == primary, f"primaries {existing:#06x} and {primary:#06x} both remap to {remapped:#06x}"

# Bumped primaries stay inside the block the shift moves next, and the shift stays inside 16 bits.
# Whether the gaps above BUMP_END and SHIFT_END are really empty depends on the table data, so
# `check_injective` repeats the test against every table as it is built.
check_relocation_bounds(BUMP_POLICY, SHIFT_START - 1, SHIFT_END + 1)
check_relocation_bounds(SHIFT_POLICY, LAST_PRIMARY_BEFORE_LATIN, PRIMARY_LIMIT)
check_relocation_bounds(ARABIC_SCRIPT_POLICY, LAST_PRIMARY_BEFORE_LATIN, FIRST_LATIN_PRIMARY)

assert all(ARABIC_SCRIPT_POLICY.applies(primary) for primary in ARABIC_INTERLEAVED_POLICY.mapping)
assert all(FIRST_LATIN_PRIMARY < primary <= SHIFT_END + SHIFT for primary in ARABIC_INTERLEAVED_POLICY.mapping.values())

from dataclasses import dataclass

from allkeys import Multiplicity, Record, read_records
from codec import Weight, encode_weight, pack_code_points
from remap import Remapper, Tailoring, check_injective, remapper_for, uses_cldr_keys

# The low table covers code points 0x00 through 0xB6: 181 of those have collation weights, once capital and
# lowercase L are left out, so the weights fit in an array indexed by code point.
LOW_SIZE = 0xB7

# Capital and lowercase L start contractions (with the middle dot), so the runtime can't take the fast path
# for them.
LOW_EXCLUDED = {0x4C, 0x6C}

@dataclass
class Sources:
	ducet: str
	cldr: str
	ucd: str

	@classmethod
	def read(cls, ducet_path: str, cldr_path: str, ucd_path: str) -> "Sources":
		texts = []
		for path in (ducet_path, cldr_path, ucd_path):
			with open(path, "r", encoding = "utf-8") as file:
				texts.append(file.read())

		return cls(*texts)

	def keys(self, tailoring: Tailoring) -> str:
		return self.cldr if uses_cldr_keys(tailoring) else self.ducet

# Returns the remapped weights, and whether the tailoring's relocation moved any of them.
def remap_record(record: Record, remapper: Remapper) -> tuple[list[Weight], bool]:
	weights = []
	any_relocated = False

	for weight in record.weights:
		remapped, relocated = remapper.remap_weight(weight)
		weights.append(remapped)
		any_relocated = any_relocated or relocated

	return weights, any_relocated

def primaries_of(records: list[Record]) -> set[int]:
	return {weight.primary for record in records for weight in record.weights}

# The Arabic tailorings only hold the records they change; the runtime reads them on top of the CLDR tables.
def is_overlay(tailoring: Tailoring) -> bool:
	return tailoring in (Tailoring.arabic_script, Tailoring.arabic_interleaved)

def map_low(keys_text: str, tailoring: Tailoring) -> list[int]:
	remapper = remapper_for(tailoring, bump = True)

	records = [
		record for record in read_records(keys_text, Multiplicity.single)
		if record.code_points[0] < LOW_SIZE and record.code_points[0] not in LOW_EXCLUDED
	]
	check_injective(primaries_of(records), remapper)

	map: dict[int, int] = {}
	for record in records:
		weights, _ = remap_record(record, remapper)

		# Every code point in this range is a single collation element in practice; only the first is kept.
		map[record.code_points[0]] = encode_weight(weights[0])

	arr = [0] * LOW_SIZE
	for code_point, packed in map.items():
		arr[code_point] = packed

	for i, value in enumerate(arr):
		assert value == map.get(i, 0), f"low table entry {i:#x} is {value:#x}, expected {map.get(i, 0):#x}"

	return arr

def map_singles(keys_text: str, tailoring: Tailoring) -> dict[int, list[int]]:
	remapper = remapper_for(tailoring, bump = True)

	records = list(read_records(keys_text, Multiplicity.single))
	check_injective(primaries_of(records), remapper)

	map: dict[int, list[int]] = {}
	for record in records:
		weights, relocated = remap_record(record, remapper)
		if is_overlay(tailoring) and not relocated:
			continue

		map[record.code_points[0]] = [encode_weight(weight) for weight in weights]

	return map

def map_multis(keys_text: str, tailoring: Tailoring) -> dict[int, list[int]]:
	remapper = remapper_for(tailoring, bump = False)

	map: dict[int, list[int]] = {}
	for record in read_records(keys_text, Multiplicity.multi):
		weights, relocated = remap_record(record, remapper)
		if is_overlay(tailoring) and not relocated:
			continue

		map[pack_code_points(record.code_points)] = [encode_weight(weight) for weight in weights]

	return map

# Code points with a variable weight or a zero primary weight. Only DUCET is needed: every code point that
# has one of those in the CLDR table has it in DUCET too, though not the other way around.
def map_variable(ducet_text: str) -> set[int]:
	variable: set[int] = set()

	for record in read_records(ducet_text, Multiplicity.single):
		if any(weight.variable or weight.primary == 0 for weight in record.weights):
			variable.add(record.code_points[0])

	return variable

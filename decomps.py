import re

from typing import Iterator

# Code point ranges that never carry a collation-relevant canonical decomposition: CJK ideographs, Hangul
# syllables, surrogates, private use, Tangut and the supplementary private use planes. Skipping them keeps
# the decomposition and FCD tables small.
IGNORED_RANGES = [
	range(0x3400, 0x4DBF + 1),
	range(0x4E00, 0x9FFF + 1),
	range(0xAC00, 0xD7A3 + 1),
	range(0xD800, 0xDFFF + 1),
	range(0xE000, 0xF8FF + 1),
	range(0x17000, 0x187F7 + 1),
	range(0x18D00, 0x18D08 + 1),
	range(0x20000, 0x2A6DF + 1),
	range(0x2A700, 0x2B738 + 1),
	range(0x2B740, 0x2B81D + 1),
	range(0x2B820, 0x2CEA1 + 1),
	range(0x2CEB0, 0x2EBE0 + 1),
	range(0x30000, 0x3134A + 1),
	range(0xF0000, 0xFFFFD + 1),
	range(0x100000, 0x10FFFD + 1),
]

DECOMP_CODE_POINT_RE = re.compile(r"[0-9A-F]{4,5}")

def is_ignored(code_point: int) -> bool:
	return any(code_point in ignored for ignored in IGNORED_RANGES)

# Yields the semicolon-separated fields of every line of `UnicodeData.txt`.
def read_fields(ucd_text: str) -> Iterator[list[str]]:
	for line in ucd_text.splitlines():
		if line == "" or line.startswith("#"):
			continue

		fields = line.split(";")
		assert len(fields) >= 6, f"too few fields in character property line {line!r}"

		yield fields

# First pass: the decomposition each code point lists in field 5, if it is canonical.
# Compatibility mappings carry a `<tag>` and are left out.
def read_listed_decomps(ucd_text: str) -> dict[int, tuple[int, ...]]:
	listed: dict[int, tuple[int, ...]] = {}

	for fields in read_fields(ucd_text):
		code_point = int(fields[0], 16)
		if is_ignored(code_point):
			continue

		decomp_col = fields[5]
		if decomp_col == "":
			continue

		if "<" in decomp_col:
			continue

		tokens = decomp_col.split()
		assert len(tokens) > 0 and all(DECOMP_CODE_POINT_RE.fullmatch(token) for token in tokens), \
			f"malformed decomposition {decomp_col!r} for U+{code_point:04X}"

		decomp = tuple(int(token, 16) for token in tokens)

		listed[code_point] = decomp

	return listed

# Canonical combining class (field 3) of every code point that has a nonzero one.
def read_combining_classes(ucd_text: str) -> dict[int, int]:
	classes: dict[int, int] = {}

	for fields in read_fields(ucd_text):
		ccc = int(fields[3]) if fields[3] else 0
		if ccc == 0:
			continue

		classes[int(fields[0], 16)] = ccc

	return classes

class DecompositionResolver:
	"""
	Second pass: expands listed decompositions until only base code points remain.

	Every code point is resolved at most once; later lookups are served from `resolved`, so resolving a
	whole table stays close to linear in its size.
	"""

	def __init__(self, listed: dict[int, tuple[int, ...]]) -> None:
		self.listed = listed
		self.resolved: dict[int, tuple[int, ...]] = {}
		self.resolving: set[int] = set()

	def resolve(self, code_point: int) -> tuple[int, ...]:
		if (existing := self.resolved.get(code_point)) is not None:
			return existing

		decomp = self.listed.get(code_point)
		if decomp is None:
			# No further decomposition, including code points the property table does not list at all.
			return (code_point,)

		assert code_point not in self.resolving, f"decomposition cycle at U+{code_point:04X}"
		self.resolving.add(code_point)

		if len(decomp) == 1:
			final_decomp = self.resolve(decomp[0])
		else:
			final_decomp = tuple(base for part in decomp for base in self.resolve(part))

		self.resolving.discard(code_point)

		self.resolved[code_point] = final_decomp

		return final_decomp

def map_decomps(ucd_text: str) -> dict[int, tuple[int, ...]]:
	listed = read_listed_decomps(ucd_text)
	resolver = DecompositionResolver(listed)

	return {code_point: resolver.resolve(code_point) for code_point in listed}

def pack_fcd(first_cc: int, last_cc: int) -> int:
	assert 0 <= first_cc <= 0xFF and 0 <= last_cc <= 0xFF

	return (first_cc << 8) | last_cc

# `decomps` is the output of `map_decomps`, normally read back from the artifact written by an earlier run.
def map_fcd(ucd_text: str, decomps: dict[int, tuple[int, ...]]) -> dict[int, int]:
	classes = read_combining_classes(ucd_text)
	fcd: dict[int, int] = {}

	for fields in read_fields(ucd_text):
		code_point = int(fields[0], 16)
		if is_ignored(code_point):
			continue

		canon_decomp = decomps.get(code_point)
		if canon_decomp is None:
			continue

		first_cc = classes.get(canon_decomp[0], 0)
		last_cc = classes.get(canon_decomp[-1], 0)

		packed = pack_fcd(first_cc, last_cc)
		if packed == 0:
			continue

		fcd[code_point] = packed

	return fcd

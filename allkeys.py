import re

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

from codec import Weight

# Code points on the left of the semicolon, e.g. `0041` or `1D15E`.
CODE_POINT_RE = re.compile(r"[0-9A-F]{4,5}")

# One collation element, e.g. `[*0209.0020.0002]` or `[.0B7E.0020.0008]`. The brackets are not part of the token.
WEIGHT_GROUP_RE = re.compile(r"([*.])([0-9A-F]{4})\.([0-9A-F]{4})\.([0-9A-F]{4})")

# Everything between the semicolon and the comment: bracketed collation elements and nothing else.
WEIGHTS_RE = re.compile(r"(?:\s*\[[*.][0-9A-F]{4}\.[0-9A-F]{4}\.[0-9A-F]{4}\])+\s*")

class Multiplicity(Enum):
	single = 1
	multi = 2

	def accepts(self, count: int) -> bool:
		if self is Multiplicity.single:
			return count == 1

		return count >= 2

@dataclass
class Record:
	code_points: tuple[int, ...]
	weights: list[Weight]

def is_data_line(line: str) -> bool:
	return line != "" and not line.startswith("@") and not line.startswith("#")

def parse_weights(text: str) -> list[Weight]:
	weights = []

	for match in WEIGHT_GROUP_RE.finditer(text):
		marker, primary, secondary, tertiary = match.groups()

		weights.append(Weight(
			marker == "*",
			int(primary, 16),
			int(secondary, 16),
			int(tertiary, 16),
		))

	return weights

# Parses one line of `allkeys.txt` (or `allkeys_CLDR.txt`), of the form
#   0041 ; [.2380.0020.0008] # LATIN CAPITAL LETTER A
# Returns None for blank lines, comments and `@version`-style directives.
def parse_line(line: str) -> Record | None:
	line = line.rstrip("\r\n")
	if not is_data_line(line):
		return None

	assert ";" in line, f"no separator in collation element line {line!r}"
	left_of_semicolon, right_of_semicolon = line.split(";", 1)
	left_of_hash = right_of_semicolon.split("#", 1)[0]

	tokens = left_of_semicolon.split()
	assert len(tokens) > 0, f"no code points in collation element line {line!r}"
	assert all(CODE_POINT_RE.fullmatch(token) for token in tokens), f"malformed code point in collation element line {line!r}"
	code_points = tuple(int(token, 16) for token in tokens)

	assert left_of_hash.strip() != "", f"no weights in collation element line {line!r}"
	assert WEIGHTS_RE.fullmatch(left_of_hash), f"malformed weights in collation element line {line!r}"
	weights = parse_weights(left_of_hash)

	return Record(code_points, weights)

def read_records(text: str, multiplicity: Multiplicity) -> Iterator[Record]:
	for line in text.splitlines():
		record = parse_line(line)
		if record is None:
			continue

		if not multiplicity.accepts(len(record.code_points)):
			continue

		yield record

import io, struct, typing

from enum import IntEnum

MAGIC = b"UCACOLLT"
VERSION = 1

# Magic, version, table kind, entry count.
HEADER_FORMAT = "<8sIII"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)

class TableKind(IntEnum):
	low = 1
	singles = 2
	multis = 3
	variable = 4
	decomps = 5
	fcd = 6

def align_file_to_u32(file: typing.BinaryIO):
	location = file.tell()

	for i in range(-location % 4):
		file.write(b"\x00")

def write_sequence(file: typing.BinaryIO, key_format: str, key: int, values: typing.Sequence[int]):
	file.write(struct.pack(key_format + "I", key, len(values)))
	file.write(struct.pack(f"<{len(values)}I", *values))

# Writes `content` in the layout for `kind`. Entries of keyed tables are sorted, so the same table always
# produces the same bytes.
def write_table(file: typing.BinaryIO, kind: TableKind, content) -> None:
	file.write(struct.pack(HEADER_FORMAT, MAGIC, VERSION, kind, len(content)))
	align_file_to_u32(file)

	if kind == TableKind.low:
		file.write(struct.pack(f"<{len(content)}I", *content))

	elif kind in (TableKind.singles, TableKind.decomps):
		for key in sorted(content):
			write_sequence(file, "<I", key, content[key])

	elif kind == TableKind.multis:
		for key in sorted(content):
			write_sequence(file, "<Q", key, content[key])

	elif kind == TableKind.variable:
		for code_point in sorted(content):
			file.write(struct.pack("<I", code_point))

	elif kind == TableKind.fcd:
		for code_point in sorted(content):
			file.write(struct.pack("<IH", code_point, content[code_point]))

	else:
		raise ValueError(f"unknown table kind {kind!r}")

	align_file_to_u32(file)

def table_bytes(kind: TableKind, content) -> bytes:
	buffer = io.BytesIO()
	write_table(buffer, kind, content)

	return buffer.getvalue()

class Reader:
	def __init__(self, data: bytes, offset: int):
		self.data = data
		self.offset = offset

	def read(self, format: str) -> tuple:
		values = struct.unpack_from(format, self.data, self.offset)
		self.offset += struct.calcsize(format)

		return values

	def read_sequence(self, key_format: str) -> tuple[int, tuple[int, ...]]:
		key, count = self.read(key_format + "I")

		return key, self.read(f"<{count}I")

def read_table(data: bytes) -> tuple[TableKind, typing.Any]:
	magic, version, kind, count = struct.unpack_from(HEADER_FORMAT, data, 0)

	assert magic == MAGIC, f"not a collation table (magic {magic!r})"
	assert version == VERSION, f"unsupported collation table version {version}"

	kind = TableKind(kind)
	reader = Reader(data, HEADER_SIZE + (-HEADER_SIZE % 4))

	if kind == TableKind.low:
		return kind, list(reader.read(f"<{count}I"))

	if kind == TableKind.singles:
		return kind, {key: list(weights) for key, weights in (reader.read_sequence("<I") for _ in range(count))}

	if kind == TableKind.multis:
		return kind, {key: list(weights) for key, weights in (reader.read_sequence("<Q") for _ in range(count))}

	if kind == TableKind.decomps:
		return kind, dict(reader.read_sequence("<I") for _ in range(count))

	if kind == TableKind.variable:
		return kind, set(reader.read(f"<{count}I"))

	# TableKind.fcd
	return kind, dict(reader.read("<IH") for _ in range(count))

def read_decomps(file: typing.BinaryIO) -> dict[int, tuple[int, ...]]:
	kind, decomps = read_table(file.read())
	assert kind == TableKind.decomps, f"expected a decomposition table, found {kind.name}"

	return decomps

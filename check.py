#! /usr/bin/env python3

import argparse, typing

from artifact import TableKind, read_table
from codec import CODE_POINT_BITS, unpack_weights

def parse_args(argv = None):
	parser = argparse.ArgumentParser(
		prog = 'check-collation',
		description = "Print the contents of a binary table, in the format that `compile.py` writes.",
	)
	parser.add_argument(
		'filename',
		type = argparse.FileType('rb'),
	)

	return parser.parse_args(argv)

def format_weights(packed: typing.Iterable[int]) -> str:
	return "".join(str(unpack_weights(weights)) for weights in packed)

def format_key(key: int) -> str:
	mask = (1 << CODE_POINT_BITS) - 1
	code_points = [(key >> (CODE_POINT_BITS * 2)) & mask, (key >> CODE_POINT_BITS) & mask, key & mask]

	# A two-code-point key leaves the top slot empty; U+0000 never starts a contraction.
	if code_points[0] == 0:
		code_points = code_points[1:]

	return " ".join(f"U+{code_point:04X}" for code_point in code_points)

def format_table(kind: TableKind, content) -> typing.Iterator[str]:
	if kind == TableKind.low:
		for code_point, packed in enumerate(content):
			if packed != 0:
				yield f"U+{code_point:04X} {format_weights([packed])}"

	elif kind == TableKind.singles:
		for code_point in sorted(content):
			yield f"U+{code_point:04X} {format_weights(content[code_point])}"

	elif kind == TableKind.multis:
		for key in sorted(content):
			yield f"{format_key(key)} {format_weights(content[key])}"

	elif kind == TableKind.variable:
		for code_point in sorted(content):
			yield f"U+{code_point:04X}"

	elif kind == TableKind.decomps:
		for code_point in sorted(content):
			yield f"U+{code_point:04X} -> " + " ".join(f"U+{base:04X}" for base in content[code_point])

	elif kind == TableKind.fcd:
		for code_point in sorted(content):
			packed = content[code_point]
			yield f"U+{code_point:04X} first ccc {packed >> 8}, last ccc {packed & 0xFF}"

def main(argv = None) -> None:
	args = parse_args(argv)

	with args.filename as file:
		kind, content = read_table(file.read())

	print(f"{kind.name} table, {len(content)} entries")

	for line in format_table(kind, content):
		print(line)

if __name__ == '__main__':
	main()

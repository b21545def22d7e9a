#! /usr/bin/env python3

import sys, argparse, os, time, typing

from artifact import TableKind, read_decomps, write_table
from decomps import map_decomps, map_fcd
from remap import Tailoring
from tables import Sources, map_low, map_multis, map_singles, map_variable

# Prints "<name>..." to stderr when a phase begins and how long it took once it ends.
class Phase:
	def __init__(self, name: str):
		self.name = name

	def __enter__(self):
		self.start_time = time.time()
		print(self.name + "...", file = sys.stderr, end = "")
		sys.stderr.flush()

	def __exit__(self, exc_type, _value, _traceback):
		# Leave the traceback of a failed phase on a line of its own.
		if exc_type is not None:
			print("failed", file = sys.stderr)
			return

		print(f"done in {time.time() - self.start_time:.3}s", file = sys.stderr)

def write_artifact(out: typing.BinaryIO, kind: TableKind, content) -> None:
	write_table(out, kind, content)
	print(f"{getattr(out, 'name', kind.name)}: {len(content)} entries, {out.tell() / 1024} KiB")

def add_output_argument(parser: argparse.ArgumentParser):
	parser.add_argument(
		'-o', '--out',
		required = True,
		type = argparse.FileType('wb'),
	)

def add_tailoring_argument(parser: argparse.ArgumentParser):
	parser.add_argument(
		'-t', '--tailoring',
		choices = [tailoring.value for tailoring in Tailoring],
		default = Tailoring.ducet.value,
		help = "which ordering to build (default: %(default)s)",
	)

def parse_args(argv = None):
	parser = argparse.ArgumentParser(
		prog = 'compile-collation',
		description = "Compile Unicode collation element tables and character data into binary lookup tables",
	)
	subparsers = parser.add_subparsers(dest = 'command', required = True)

	decomps = subparsers.add_parser('decomps', help = "canonical decompositions from UnicodeData.txt")
	decomps.add_argument('ucd', type = argparse.FileType('r', encoding = 'utf-8'))
	add_output_argument(decomps)

	fcd = subparsers.add_parser('fcd', help = "FCD combining class pairs, from a decomps table built earlier")
	fcd.add_argument('ucd', type = argparse.FileType('r', encoding = 'utf-8'))
	fcd.add_argument(
		'--decomps',
		required = True,
		type = argparse.FileType('rb'),
	)
	add_output_argument(fcd)

	variable = subparsers.add_parser('variable', help = "code points with variable or zero primary weights (DUCET)")
	variable.add_argument('keys', type = argparse.FileType('r', encoding = 'utf-8'))
	add_output_argument(variable)

	for kind in (TableKind.low, TableKind.singles, TableKind.multis):
		table = subparsers.add_parser(kind.name, help = f"the {kind.name} collation weight table")
		table.add_argument('keys', type = argparse.FileType('r', encoding = 'utf-8'))
		add_tailoring_argument(table)
		add_output_argument(table)

	everything = subparsers.add_parser('all', help = "every table, in dependency order")
	everything.add_argument('--ducet', required = True, help = "allkeys.txt")
	everything.add_argument('--cldr', required = True, help = "allkeys_CLDR.txt")
	everything.add_argument('--ucd', required = True, help = "UnicodeData.txt")
	everything.add_argument('-o', '--out-dir', required = True)

	return parser.parse_args(argv)

TABLE_BUILDERS = {
	TableKind.low: map_low,
	TableKind.singles: map_singles,
	TableKind.multis: map_multis,
}

def output_name(kind: TableKind, tailoring: Tailoring) -> str:
	if tailoring == Tailoring.ducet:
		return kind.name

	return f"{kind.name}_{tailoring.value}"

def compile_all(args):
	with Phase("Reading sources"):
		sources = Sources.read(args.ducet, args.cldr, args.ucd)

	os.makedirs(args.out_dir, exist_ok = True)

	def output_path(name: str) -> str:
		return os.path.join(args.out_dir, name + ".bin")

	def open_output(name: str) -> typing.BinaryIO:
		return open(output_path(name), "wb")

	with Phase("Resolving canonical decompositions"):
		decomps = map_decomps(sources.ucd)

	with open_output(TableKind.decomps.name) as out:
		write_artifact(out, TableKind.decomps, decomps)

	# FCD works from the decompositions as written, not from the map still in memory.
	with open(output_path(TableKind.decomps.name), "rb") as file:
		decomps = read_decomps(file)

	with Phase("Deriving FCD values"):
		fcd = map_fcd(sources.ucd, decomps)

	with open_output(TableKind.fcd.name) as out:
		write_artifact(out, TableKind.fcd, fcd)

	with Phase("Collecting variable weights"):
		variable = map_variable(sources.ducet)

	with open_output(TableKind.variable.name) as out:
		write_artifact(out, TableKind.variable, variable)

	builds = [(TableKind.low, tailoring) for tailoring in (Tailoring.ducet, Tailoring.cldr)]
	builds += [(kind, tailoring) for kind in (TableKind.singles, TableKind.multis) for tailoring in Tailoring]

	for kind, tailoring in builds:
		with Phase(f"Building {kind.name} table ({tailoring.value})"):
			content = TABLE_BUILDERS[kind](sources.keys(tailoring), tailoring)

		with open_output(output_name(kind, tailoring)) as out:
			write_artifact(out, kind, content)

def main(argv = None):
	args = parse_args(argv)

	if args.command == 'all':
		compile_all(args)
		return

	if args.command == 'decomps':
		with Phase("Resolving canonical decompositions"):
			kind, content = TableKind.decomps, map_decomps(args.ucd.read())

	elif args.command == 'fcd':
		with Phase("Reading decompositions"):
			decomps = read_decomps(args.decomps)

		with Phase("Deriving FCD values"):
			kind, content = TableKind.fcd, map_fcd(args.ucd.read(), decomps)

	elif args.command == 'variable':
		with Phase("Collecting variable weights"):
			kind, content = TableKind.variable, map_variable(args.keys.read())

	else:
		kind = TableKind[args.command]
		tailoring = Tailoring(args.tailoring)

		with Phase(f"Building {kind.name} table ({tailoring.value})"):
			content = TABLE_BUILDERS[kind](args.keys.read(), tailoring)

	with args.out:
		write_artifact(args.out, kind, content)

if __name__ == "__main__":
	main()

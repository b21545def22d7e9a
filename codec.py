from typing import NamedTuple, Sequence

# Largest secondary and tertiary weights that are actually used in the CLDR 46.1 tables.
SEC_MAX = 0x126
TER_MAX = 0x1E

PRIMARY_MAX = 0xFFFF

# Enough bits for any code point up to U+10FFFF.
CODE_POINT_BITS = 21

class Weight(NamedTuple):
	variable: bool
	primary: int
	secondary: int
	tertiary: int

	def __str__(self) -> str:
		marker = "*" if self.variable else "."
		return f"[{marker}{self.primary:04X}.{self.secondary:04X}.{self.tertiary:04X}]"

# Layout of a packed weight, from the most significant bit down:
#   primary (16) | variable (1) | tertiary (6) | secondary (9)
def pack_weights(variable: bool, primary: int, secondary: int, tertiary: int) -> int:
	assert 0 <= primary <= PRIMARY_MAX, f"primary weight {primary:#x} does not fit in 16 bits"
	assert 0 <= secondary <= SEC_MAX, f"secondary weight {secondary:#x} exceeds {SEC_MAX:#x}"
	assert 0 <= tertiary <= TER_MAX, f"tertiary weight {tertiary:#x} exceeds {TER_MAX:#x}"

	upper = primary << 16
	lower = (int(variable) << 15) | (tertiary << 9) | secondary

	return upper | lower

def unpack_weights(packed: int) -> Weight:
	primary = packed >> 16

	lower = packed & 0xFFFF
	variable = lower >> 15 == 1
	secondary = lower & 0b1_1111_1111
	tertiary = (lower >> 9) & 0b11_1111

	return Weight(variable, primary, secondary, tertiary)

# Packs a weight and checks that it survives the trip back.
def encode_weight(weight: Weight) -> int:
	packed = pack_weights(*weight)

	unpacked = unpack_weights(packed)
	assert unpacked == weight, f"weight {weight} came back as {unpacked} after packing"

	return packed

def pack_code_points(code_points: Sequence[int]) -> int:
	assert len(code_points) in (2, 3), f"cannot pack a key of {len(code_points)} code points"

	key = 0
	for code_point in code_points:
		assert 0 <= code_point <= 0x10FFFF, f"{code_point:#x} is not a code point"
		key = (key << CODE_POINT_BITS) | code_point

	return key

assert unpack_weights(pack_weights(True, 0x0209, 0x0020, 0x0002)) == (True, 0x0209, 0x0020, 0x0002)
assert pack_code_points([0x4C, 0xB7]) == (0x4C << 21) | 0xB7

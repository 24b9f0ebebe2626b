from breaklib.attack import confirm_ecb, discover_block_size, discover_secret_length, recover_secret
from breaklib.blocks import chunks, detect_ecb_lines, looks_like_ecb, transpose, untranspose
from breaklib.errors import (AmbiguousKeySize, AttackAborted, BreakError, CodecError, DictionaryMiss,
							 EmptyInput, NoKeyFound, NotEcbMode)
from breaklib.keysize import estimate_key_size, top_key, top_n_keys
from breaklib.oracle import BudgetedOracle, EcbOracle, RandomModeOracle, detect_encryption_mode
from breaklib.scoring import englishness, hamming_distance, score
from breaklib.xor import (break_repeating_key_xor, break_single_byte_xor, decrypt_repeating_key_xor,
						  detect_single_byte_xor_line, repeating_key_xor, single_byte_xor, xor_bytes)

__version__ = '0.2.0'

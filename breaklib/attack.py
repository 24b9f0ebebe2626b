"""
Byte-at-a-time attack on an ECB oracle that appends a fixed secret.

The oracle is any callable taking the attacker's bytes and returning
ciphertext of `attacker input + secret` under a fixed, unknown key. Each
recovered byte costs 256 dictionary queries plus one target query, so the
attack makes O(block_size + len(secret) * 256) oracle calls.
"""
import logging

from breaklib.blocks import looks_like_ecb
from breaklib.errors import AttackAborted, DictionaryMiss, NotEcbMode
from breaklib.oracle import BudgetedOracle

logger = logging.getLogger(__name__)

FILLER = b'A'
MAX_BLOCK_PROBE = 256
PADDING_MARKER = 0x01


def _check_filler(filler):
	#every probe length is counted in filler bytes
	if len(filler) != 1:
		raise ValueError('filler must be a single byte')


def discover_block_size(oracle, filler=FILLER, max_probe=MAX_BLOCK_PROBE):
	_check_filler(filler)
	#grow the input one byte at a time until the output jumps a block
	base = len(oracle(b''))
	for i in range(1, max_probe + 1):
		size = len(oracle(filler * i))
		if size > base:
			logger.info('block size %d', size - base)
			return size - base
	raise AttackAborted('output length did not change within %d bytes of input' % max_probe)


def discover_secret_length(oracle, block_size, filler=FILLER):
	_check_filler(filler)
	#the jump happens once input + secret fills the last block exactly
	base = len(oracle(b''))
	for i in range(1, block_size + 1):
		if len(oracle(filler * i)) > base:
			return base - i
	raise AttackAborted('output length did not change within one block of input')


def confirm_ecb(oracle, block_size, filler=FILLER):
	_check_filler(filler)
	ciphertext = oracle(filler * (block_size * 2))
	if not looks_like_ecb(ciphertext, block_size):
		raise NotEcbMode('no repeated block under %d bytes of identical input' % (block_size * 2))


def recover_next_byte(oracle, block_size, known, filler=FILLER):
	"""
	Recover the secret byte that follows `known`.

	The filler pushes the unknown byte to the end of a block; the 256
	candidate inputs rebuild that block with every possible last byte.
	Raises DictionaryMiss when none of them matches.
	"""
	_check_filler(filler)
	pad_len = block_size - len(known) % block_size - 1
	prefix = filler * pad_len
	length = pad_len + len(known) + 1
	target = oracle(prefix)[:length]
	dictionary = {}
	for candidate in range(256):
		guess = prefix + known + bytes([candidate])
		dictionary[oracle(guess)[:length]] = candidate
	try:
		return dictionary[target]
	except KeyError:
		raise DictionaryMiss(len(known))


def recover_secret(oracle, filler=FILLER, max_calls=None):
	_check_filler(filler)
	if max_calls is not None:
		oracle = BudgetedOracle(oracle, max_calls)
	block_size = discover_block_size(oracle, filler)
	confirm_ecb(oracle, block_size, filler)
	length = discover_secret_length(oracle, block_size, filler)
	logger.info('secret length %d', length)

	known = bytearray()
	while True:
		try:
			byte = recover_next_byte(oracle, block_size, bytes(known), filler)
		except DictionaryMiss:
			break
		known.append(byte)
		logger.debug('recovered %d bytes: %r', len(known), bytes(known))

	#pkcs#7 padding leaks a single 0x01 before the loop runs dry
	if known and known[-1] == PADDING_MARKER:
		del known[-1]
	if len(known) != length:
		logger.warning('recovered %d bytes, oracle output implies %d', len(known), length)
	logger.info('recovered %d byte secret', len(known))
	return bytes(known)

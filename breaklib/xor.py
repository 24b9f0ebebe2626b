import logging

from breaklib.blocks import transpose
from breaklib.errors import EmptyInput, NoKeyFound
from breaklib.keysize import KEY_SIZE_RANGE, estimate_key_size, top_key
from breaklib.scoring import score

logger = logging.getLogger(__name__)

#english plaintext keys are ascii, so the search stops at 127
ASCII_KEYS = range(128)


def xor_bytes(s1, s2):
	if len(s1) != len(s2):
		raise ValueError('s1 and s2 must be the same length')
	return bytes(a ^ b for a, b in zip(bytes(s1), bytes(s2)))


def single_byte_xor(s, k):
	return bytes(byte ^ k for byte in bytes(s))


def repeating_key_xor(s, k):
	#k and s can be differing lengths, k is cycled over s
	k = bytes(k)
	if not k:
		raise EmptyInput('key must not be empty')
	return bytes(byte ^ k[i % len(k)] for i, byte in enumerate(bytes(s)))


def max_score_search(keygen, ciphertext, process=single_byte_xor, scorer=score):
	"""
	Try every key from keygen and keep the best scoring result.

	Returns (key, score, plaintext). The first key reaching the maximum wins,
	so the outcome only depends on the order of keygen.
	"""
	best = None
	for k in keygen:
		plaintext = process(ciphertext, k)
		value = scorer(plaintext)
		if best is None or best[1] < value:
			best = (k, value, plaintext)
	if best is None:
		raise NoKeyFound('no candidate key was produced')
	return best


def break_single_byte_xor(ciphertext, keys=ASCII_KEYS):
	if not ciphertext:
		raise NoKeyFound('cannot recover a key byte from empty input')
	return max_score_search(keys, bytes(ciphertext))


def detect_single_byte_xor_line(lines, keys=ASCII_KEYS):
	#returns (index, key, score, plaintext) of the line that decrypts best
	best = None
	for index, line in enumerate(lines):
		if not line:
			continue
		key, value, plaintext = break_single_byte_xor(line, keys)
		if best is None or best[2] < value:
			best = (index, key, value, plaintext)
	if best is None:
		raise NoKeyFound('no non-empty line to search')
	logger.info('line %d decrypts best with key 0x%02x', best[0], best[1])
	return best


def smallest_period(key):
	#a key found at a multiple of the real length is the real key repeated
	for length in range(1, len(key)):
		if len(key) % length == 0 and key[:length] * (len(key) // length) == key:
			return key[:length]
	return key


def break_repeating_key_xor(s, size_range=KEY_SIZE_RANGE, workers=None, guessFunction=break_single_byte_xor, collapse=False):
	#guesses key of a buffer which has been encrypted with a repeated key
	#guessFunction must return (key, score, plaintext) for a single column
	#the key has the detected size unless collapse is set
	if not s:
		raise EmptyInput('cannot recover a key from empty input')
	keysize = top_key(estimate_key_size(s, size_range, workers))
	logger.info('best key size %d', keysize)
	key = bytearray()
	for column, row in enumerate(transpose(s, keysize)):
		k, value, _ = guessFunction(row)
		logger.debug('column %d: key 0x%02x score %d', column, k, value)
		key.append(k)
	key = bytes(key)
	if collapse:
		key = smallest_period(key)
	if len(key) != keysize:
		logger.info('key of size %d repeats, reduced to %d', keysize, len(key))
	return key


def decrypt_repeating_key_xor(s, size_range=KEY_SIZE_RANGE, workers=None):
	key = break_repeating_key_xor(s, size_range, workers, collapse=True)
	return key, repeating_key_xor(s, key)

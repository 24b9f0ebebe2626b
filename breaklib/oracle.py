import logging
import random

from breaklib.blocks import BLOCK_SIZE, looks_like_ecb
from breaklib.cipher import encrypt_cbc, encrypt_ecb
from breaklib.errors import AttackAborted

logger = logging.getLogger(__name__)

KEY_SIZE = 16
MODE_ECB = 'ecb'
MODE_CBC = 'cbc'


def random_bytes(rng, n):
	return bytes(rng.randrange(256) for _ in range(n))


class EcbOracle(object):
	"""
	Chosen-plaintext oracle: appends a hidden secret to the caller's input and
	encrypts it with AES-ECB under a key fixed at construction time.
	"""

	def __init__(self, secret, rng=None, key_size=KEY_SIZE):
		rng = rng or random.SystemRandom()
		self._secret = bytes(secret)
		self._key = random_bytes(rng, key_size)

	def __call__(self, plaintext):
		return encrypt_ecb(bytes(plaintext) + self._secret, self._key)


class RandomModeOracle(object):
	#each call: fresh key, 5-10 random bytes on both sides, ecb or cbc by coin flip

	def __init__(self, rng=None, key_size=KEY_SIZE):
		self.rng = rng or random.SystemRandom()
		self.key_size = key_size
		self.last_mode = None

	def __call__(self, plaintext):
		rng = self.rng
		plaintext = random_bytes(rng, rng.randint(5, 10)) + bytes(plaintext) + random_bytes(rng, rng.randint(5, 10))
		key = random_bytes(rng, self.key_size)
		if rng.randrange(2) == 0:
			self.last_mode = MODE_ECB
			ciphertext = encrypt_ecb(plaintext, key)
		else:
			self.last_mode = MODE_CBC
			iv = random_bytes(rng, BLOCK_SIZE)
			ciphertext = encrypt_cbc(plaintext, key, iv)
		logger.debug('encrypted %d bytes in %s mode', len(plaintext), self.last_mode)
		return ciphertext


class BudgetedOracle(object):
	"""Wraps an oracle and aborts once max_calls queries have been spent."""

	def __init__(self, oracle, max_calls):
		if max_calls < 0:
			raise ValueError('max_calls must not be negative')
		self.oracle = oracle
		self.max_calls = max_calls
		self.calls = 0

	def __call__(self, plaintext):
		if self.calls >= self.max_calls:
			raise AttackAborted('oracle budget of %d calls exhausted' % self.max_calls)
		self.calls += 1
		return self.oracle(plaintext)


def detect_encryption_mode(function, block_size=BLOCK_SIZE):
	#up to block_size - 1 bytes of unknown prefix, still two aligned filler blocks
	plaintext = b'A' * (block_size * 4 - 1)
	ciphertext = function(plaintext)
	if looks_like_ecb(ciphertext, block_size):
		return MODE_ECB
	return MODE_CBC

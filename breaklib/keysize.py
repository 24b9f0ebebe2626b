import logging
from concurrent.futures import ThreadPoolExecutor

from breaklib.blocks import chunks
from breaklib.errors import AmbiguousKeySize
from breaklib.scoring import hamming_distance

logger = logging.getLogger(__name__)

KEY_SIZE_RANGE = range(2, 42)


def normalized_distance(s, keysize):
	"""
	Mean bit distance per byte between adjacent keysize chunks, times 1000.

	Returns None when no adjacent pair of equal-length chunks exists.
	"""
	blocks = chunks(s, keysize)
	pairs = 0
	distance = 0
	for a, b in zip(blocks, blocks[1:]):
		if len(a) != len(b):
			continue
		pairs += 1
		distance += hamming_distance(a, b)
	if not pairs:
		return None
	return 1000.0 * distance / (keysize * pairs)


def estimate_key_size(s, size_range=KEY_SIZE_RANGE, workers=None):
	#uses hamming distance to rank key lengths of a repeating key ciphertext
	#s is ciphertext, lower scores are more likely
	sizes = list(size_range)
	if not sizes:
		raise AmbiguousKeySize('key size range is empty')
	if workers and workers > 1:
		with ThreadPoolExecutor(max_workers=workers) as pool:
			distances = list(pool.map(lambda k: normalized_distance(s, k), sizes))
	else:
		distances = [normalized_distance(s, k) for k in sizes]
	scores = []
	for keysize, distance in zip(sizes, distances):
		if distance is None:
			#too short to compare even one pair of chunks
			logger.debug('key size %d skipped, no adjacent chunk pairs', keysize)
			continue
		scores.append((keysize, distance))
	if not scores:
		raise AmbiguousKeySize('ciphertext of %d bytes is too short for key sizes %d..%d' % (len(s), sizes[0], sizes[-1]))
	return scores


def top_n_keys(n, scores):
	ranked = sorted(scores, key=lambda item: item[1])
	return [keysize for keysize, _ in ranked[:n]]


def top_key(scores):
	if not scores:
		raise AmbiguousKeySize('no key sizes determined')
	return top_n_keys(1, scores)[0]

import logging

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16


def _check_size(size):
	if not isinstance(size, int):
		raise TypeError('block size must be an int')
	if size < 1:
		raise ValueError('block size must be positive')


def chunks(data, length):
	#consecutive pieces of `length` bytes, the last one may be short
	_check_size(length)
	data = bytes(data)
	return [data[i:i + length] for i in range(0, len(data), length)]


def transpose(data, block_size):
	"""
	Regroup `data` so that row i holds every byte at position i (mod block_size).

	Rows past the ragged edge are simply one byte shorter; nothing is padded,
	so any byte value (255 included) survives the trip.
	"""
	_check_size(block_size)
	rows = [bytearray() for _ in range(block_size)]
	for i, byte in enumerate(bytes(data)):
		rows[i % block_size].append(byte)
	return [bytes(row) for row in rows]


def untranspose(rows):
	if not rows:
		return b''
	longest = len(rows[0])
	lengths = [len(row) for row in rows]
	if lengths != sorted(lengths, reverse=True) or lengths[-1] < longest - 1:
		raise ValueError('rows are not the transpose of a single buffer')
	out = bytearray()
	for j in range(longest):
		for row in rows:
			if j < len(row):
				out.append(row[j])
	return bytes(out)


def looks_like_ecb(ciphertext, block_size=BLOCK_SIZE):
	#just checks if any blocks are equivalent
	seen = set()
	for block in chunks(ciphertext, block_size):
		if block in seen:
			logger.debug('repeated block %s', block.hex())
			return True
		seen.add(block)
	return False


def detect_ecb_lines(lines, block_size=BLOCK_SIZE):
	return [(index, line) for index, line in enumerate(lines) if looks_like_ecb(line, block_size)]

import string
from collections import Counter

from scipy.stats import chi2

#percent frequencies of english letters, space is slightly above 'e'
CHAR_FREQ = {"a":8.167, "k":0.772, "u":2.758, "b":1.492, "l":4.025, "v":0.978, "c":2.782, "m":2.406, "w":2.360, "d":4.253, "n":6.749, "x":0.150, "e":12.702,
			 "o":7.507, "y":1.974, "f":2.228, "p":1.929, "z":0.074, "g":2.015, "q":0.095, "h":6.094, "r":5.987, "i":6.966, "s":6.327, "j":0.153, "t":9.056, " ":13.000}
BASE_WEIGHT = 100000
UNKNOWN_WEIGHT = 1


def char_weights(freq=None, base=BASE_WEIGHT):
	#fixed point weights keyed by byte value
	freq = CHAR_FREQ if freq is None else freq
	return dict((ord(c), base + int(round(f * 1000))) for c, f in freq.items())

WEIGHTS = char_weights()


def score(s, weights=None, unknown=UNKNOWN_WEIGHT):
	"""
	English-likeness of a byte buffer, higher is better.

	Letters are folded to lowercase before lookup; every byte missing from
	the table weighs `unknown`. An empty buffer scores 0.
	"""
	weights = WEIGHTS if weights is None else weights
	frequency = Counter(bytes(s).lower())
	return sum(weights.get(byte, unknown) * count for byte, count in frequency.items())


def englishness(s):
	#chi square fit of the letter histogram against CHAR_FREQ, as a percentage
	if not s:
		return 0.0
	s = bytes(s).lower()
	frequency = Counter(s)
	letters = sum(frequency[ord(c)] for c in CHAR_FREQ)
	if not letters:
		return 0.0
	total = sum(CHAR_FREQ.values())
	statistic = 0.0
	for c, f in CHAR_FREQ.items():
		expected = letters * f / total
		statistic += pow(frequency[ord(c)] - expected, 2) / expected
	printable = string.printable.encode('ascii')
	for byte, count in frequency.items():
		if chr(byte) in CHAR_FREQ:
			continue
		if byte not in printable: #non-printables are bad
			statistic += 2 * count
		elif chr(byte) in string.digits:
			statistic += 0.5 * count
		else:
			statistic += count
	return float(chi2.sf(statistic, len(CHAR_FREQ) - 1)) * 100


def count_set_bits(byte):
	return bin(byte & 0xff).count('1')


def hamming_distance(s1, s2):
	if len(s1) != len(s2):
		raise ValueError('s1 and s2 must be the same length')
	return sum(count_set_bits(a ^ b) for a, b in zip(bytes(s1), bytes(s2)))

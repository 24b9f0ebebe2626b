"""
Tests for XOR primitives and the single-byte / repeating-key breakers
"""

import pytest

from breaklib.codec import hex_decode, hex_encode
from breaklib.errors import AmbiguousKeySize, EmptyInput, NoKeyFound
from breaklib.xor import (break_repeating_key_xor, break_single_byte_xor, decrypt_repeating_key_xor,
						  detect_single_byte_xor_line, max_score_search, repeating_key_xor, single_byte_xor,
						  smallest_period, xor_bytes)

LOREM = b"Lorem Ipsum is simply dummy text of the printing and typesetting industry."


def test_fixed_xor():
	a = hex_decode("1c0111001f010100061a024b53535009181c")
	b = hex_decode("686974207468652062756c6c277320657965")
	assert hex_encode(xor_bytes(a, b)) == "746865206b696420646f6e277420706c6179"


def test_fixed_xor_length_mismatch():
	with pytest.raises(ValueError):
		xor_bytes(b"ab", b"a")


def test_single_byte_round_trip():
	for key in (0, 1, 0x41, 0x7f, 0xff):
		assert single_byte_xor(single_byte_xor(LOREM, key), key) == LOREM


def test_repeating_key_round_trip():
	key = b"Hello World"
	assert repeating_key_xor(repeating_key_xor(LOREM, key), key) == LOREM
	assert repeating_key_xor(b"", key) == b""


def test_repeating_key_xor_vector():
	"""Known answer: ICE over the two line verse"""
	message = b"Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"
	expected = (
		"0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a26226324272765272"
		"a282b2f20430a652e2c652a3124333a653e2b2027630c692b20283165286326302e27282f"
	)
	assert hex_encode(repeating_key_xor(message, b"ICE")) == expected


def test_repeating_key_xor_empty_key():
	with pytest.raises(EmptyInput):
		repeating_key_xor(b"data", b"")


def test_break_single_byte_xor_vector():
	ciphertext = hex_decode("1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736")
	key, value, plaintext = break_single_byte_xor(ciphertext)
	assert plaintext == b"Cooking MC's like a pound of bacon", plaintext
	assert key == ord('X')
	assert value > 0


def test_break_single_byte_xor_every_ascii_key():
	"""Every key in 0..127 is recovered exactly"""
	for key in range(128):
		found, _, plaintext = break_single_byte_xor(single_byte_xor(LOREM, key))
		assert found == key, "expected key %d, got %d" % (key, found)
		assert plaintext == LOREM


def test_break_single_byte_xor_empty():
	with pytest.raises(NoKeyFound):
		break_single_byte_xor(b"")


def test_max_score_search_first_maximum_wins():
	#constant scorer, so every key ties
	key, value, _ = max_score_search(range(5, 10), b"abc", scorer=lambda s: 7)
	assert (key, value) == (5, 7)
	with pytest.raises(NoKeyFound):
		max_score_search([], b"abc")


def test_detect_single_byte_xor_line(rng):
	line = hex_decode("7b5a4215415d544115415d5015455447414c155c46155f4058455c5b52")
	lines = [bytes(rng.randrange(256) for _ in range(len(line))) for _ in range(40)]
	lines.insert(17, line)
	lines.insert(3, b"")
	index, key, _, plaintext = detect_single_byte_xor_line(lines)
	assert index == 18, index
	assert key == ord('5')
	assert plaintext.strip() == b"Now that the party is jumping"


def test_detect_single_byte_xor_line_nothing_to_search():
	with pytest.raises(NoKeyFound):
		detect_single_byte_xor_line([b"", b""])


def test_smallest_period():
	assert smallest_period(b"ICEICE") == b"ICE"
	assert smallest_period(b"aaaa") == b"a"
	assert smallest_period(b"ICEIC") == b"ICEIC"
	assert smallest_period(b"k") == b"k"


def test_break_repeating_key_xor(english):
	key = b"Terminator X: Bring the noise"
	ciphertext = repeating_key_xor(english, key)
	assert break_repeating_key_xor(ciphertext) == key


def test_break_repeating_key_xor_parallel(english):
	key = b"Terminator X: Bring the noise"
	ciphertext = repeating_key_xor(english, key)
	assert break_repeating_key_xor(ciphertext, workers=4) == key


def test_break_repeating_key_xor_keeps_detected_size(english):
	"""The key is as long as the detected size unless collapsing is asked for"""
	ciphertext = repeating_key_xor(english, b"ICE")
	assert break_repeating_key_xor(ciphertext, size_range=range(6, 7)) == b"ICEICE"
	assert break_repeating_key_xor(ciphertext, size_range=range(6, 7), collapse=True) == b"ICE"


def test_decrypt_repeating_key_xor_collapses_multiples(english):
	ciphertext = repeating_key_xor(english, b"ICE")
	key, plaintext = decrypt_repeating_key_xor(ciphertext, size_range=range(6, 7))
	assert key == b"ICE"
	assert plaintext == english


def test_decrypt_repeating_key_xor(english):
	key = b"Hello World"
	ciphertext = repeating_key_xor(english, key)
	found, plaintext = decrypt_repeating_key_xor(ciphertext, size_range=range(2, 21))
	assert found == key
	assert plaintext == english


def test_break_repeating_key_xor_errors():
	with pytest.raises(EmptyInput):
		break_repeating_key_xor(b"")
	with pytest.raises(AmbiguousKeySize):
		break_repeating_key_xor(b"abc", size_range=range(2, 5))
	with pytest.raises(AmbiguousKeySize):
		break_repeating_key_xor(b"abcdef", size_range=range(0))

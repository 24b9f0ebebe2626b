from Crypto.Cipher import AES
from Crypto.Util import Padding

from breaklib.blocks import chunks
from breaklib.xor import xor_bytes

BLOCK_SIZE = AES.block_size


def block_encrypt(key, block):
	#one raw block, no padding
	return AES.new(key, AES.MODE_ECB).encrypt(block)


def block_decrypt(key, block):
	return AES.new(key, AES.MODE_ECB).decrypt(block)


def encrypt_ecb(plaintext, key):
	cipher = AES.new(key, AES.MODE_ECB)
	return cipher.encrypt(pad(plaintext, BLOCK_SIZE))


def decrypt_ecb(ciphertext, key):
	cipher = AES.new(key, AES.MODE_ECB)
	return unpad(cipher.decrypt(ciphertext), BLOCK_SIZE)


def encrypt_cbc(plaintext, key, iv):
	ciphertext = b''
	for block in chunks(pad(plaintext, BLOCK_SIZE), BLOCK_SIZE):
		cblock = block_encrypt(key, xor_bytes(iv, block))
		iv = cblock
		ciphertext += cblock
	return ciphertext


def decrypt_cbc(ciphertext, key, iv):
	if len(ciphertext) % BLOCK_SIZE != 0:
		raise ValueError('invalid ciphertext')
	plaintext = b''
	for block in chunks(ciphertext, BLOCK_SIZE):
		plaintext += xor_bytes(block_decrypt(key, block), iv)
		iv = block
	return unpad(plaintext, BLOCK_SIZE)


def pad(message, blocksize):
	#pkcs#7, an aligned message gets a whole block of padding
	_check_blocksize(blocksize)
	return Padding.pad(bytes(message), blocksize, style='pkcs7')


def unpad(message, blocksize):
	_check_blocksize(blocksize)
	return Padding.unpad(bytes(message), blocksize, style='pkcs7')


def _check_blocksize(blocksize):
	if type(blocksize) != int:
		raise TypeError('blocksize must be an int')
	if not 0 < blocksize <= 0xff:
		raise ValueError('blocksize must be between 1 and 255')

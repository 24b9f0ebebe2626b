import argparse
import logging
import sys

from breaklib.blocks import detect_ecb_lines
from breaklib.cipher import decrypt_ecb
from breaklib.codec import base64_decode, hex_decode, hex_encode
from breaklib.errors import BreakError
from breaklib.keysize import KEY_SIZE_RANGE
from breaklib.scoring import englishness
from breaklib.xor import break_single_byte_xor, decrypt_repeating_key_xor, detect_single_byte_xor_line, repeating_key_xor


def eprint(*a, **k): print(*a, file=sys.stderr, **k)


def read_lines(path):
	with open(path, 'r', encoding='ascii') as f:
		return [line.strip() for line in f if line.strip()]


def show(data):
	return data.decode('latin1')


def cmd_single(args):
	key, value, plaintext = break_single_byte_xor(hex_decode(args.ciphertext))
	print('key: 0x%02x  score: %d  englishness: %.2f%%' % (key, value, englishness(plaintext)))
	print(show(plaintext))


def cmd_detect_xor(args):
	lines = [hex_decode(line) for line in read_lines(args.file)]
	index, key, value, plaintext = detect_single_byte_xor_line(lines)
	print('line: %d  key: 0x%02x  score: %d' % (index, key, value))
	print(show(plaintext).rstrip('\n'))


def cmd_repeating(args):
	with open(args.file, 'r', encoding='ascii') as f:
		ciphertext = base64_decode(f.read())
	size_range = range(args.min_size, args.max_size + 1)
	key, plaintext = decrypt_repeating_key_xor(ciphertext, size_range, args.workers)
	print('key (%d bytes): %s' % (len(key), show(key)))
	print('englishness: %.2f%%' % englishness(plaintext))
	print(show(plaintext))


def cmd_detect_ecb(args):
	lines = [hex_decode(line) for line in read_lines(args.file)]
	hits = detect_ecb_lines(lines, args.block_size)
	for index, line in hits:
		print('%d: %s' % (index, line.hex()))
	if not hits:
		print('no ecb-looking lines')


def cmd_decrypt_ecb(args):
	with open(args.file, 'r', encoding='ascii') as f:
		ciphertext = base64_decode(f.read())
	print(show(decrypt_ecb(ciphertext, args.key.encode('utf-8'))))


def cmd_xor_encrypt(args):
	with open(args.file, 'rb') as f:
		plaintext = f.read()
	print(hex_encode(repeating_key_xor(plaintext, args.key.encode('utf-8'))))


def build_parser():
	ap = argparse.ArgumentParser(prog='breaklib', description='Break single-byte XOR, repeating-key XOR and spot ECB ciphertext.')
	ap.add_argument('-v', '--verbose', action='store_true', help='debug logging')
	sub = ap.add_subparsers(dest='command', required=True)

	p = sub.add_parser('single', help='break single-byte XOR of a hex string')
	p.add_argument('ciphertext')
	p.set_defaults(func=cmd_single)

	p = sub.add_parser('detect-xor', help='find the single-byte XOR line in a file of hex lines')
	p.add_argument('file')
	p.set_defaults(func=cmd_detect_xor)

	p = sub.add_parser('repeating', help='break repeating-key XOR of a base64 file')
	p.add_argument('file')
	p.add_argument('--min-size', type=int, default=KEY_SIZE_RANGE.start)
	p.add_argument('--max-size', type=int, default=KEY_SIZE_RANGE.stop - 1)
	p.add_argument('--workers', type=int, default=None, help='threads for the key size scan')
	p.set_defaults(func=cmd_repeating)

	p = sub.add_parser('detect-ecb', help='list hex lines with repeated blocks')
	p.add_argument('file')
	p.add_argument('--block-size', type=int, default=16)
	p.set_defaults(func=cmd_detect_ecb)

	p = sub.add_parser('decrypt-ecb', help='decrypt an AES-128-ECB base64 file with a known key')
	p.add_argument('file')
	p.add_argument('key')
	p.set_defaults(func=cmd_decrypt_ecb)

	p = sub.add_parser('xor-encrypt', help='repeating-key XOR a file, print hex')
	p.add_argument('file')
	p.add_argument('key')
	p.set_defaults(func=cmd_xor_encrypt)
	return ap


def main(argv=None):
	args = build_parser().parse_args(argv)
	logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
						format='%(levelname)s %(name)s: %(message)s')
	try:
		args.func(args)
	except (BreakError, OSError, ValueError) as e:
		#ValueError: bad aes key length or padding
		eprint('%s: %s' % (args.command, e))
		return 1
	return 0


if __name__ == '__main__':
	sys.exit(main())

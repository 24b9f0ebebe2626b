import base64
import binascii
import re

from breaklib.errors import CodecError

WHITESPACE = re.compile(rb'\s+')


def _as_bytes(text):
	if isinstance(text, str):
		try:
			return text.encode('ascii')
		except UnicodeEncodeError:
			raise CodecError('encoded text must be ascii')
	return bytes(text)


def hex_encode(data):
	return binascii.hexlify(bytes(data)).decode('ascii')


def hex_decode(text):
	#odd length and non-hex digits are rejected, not repaired
	text = _as_bytes(text)
	try:
		return binascii.unhexlify(text)
	except binascii.Error as e:
		raise CodecError('invalid hex: %s' % e)


def base64_encode(data):
	return base64.b64encode(bytes(data)).decode('ascii')


def base64_decode(text):
	#line breaks from multi-line files are dropped, everything else must be valid
	text = WHITESPACE.sub(b'', _as_bytes(text))
	try:
		return base64.b64decode(text, validate=True)
	except binascii.Error as e:
		raise CodecError('invalid base64: %s' % e)

"""Exceptions raised by breaklib."""


class BreakError(Exception):
	pass


class EmptyInput(BreakError, ValueError):
	#zero-length buffer where a key byte is needed
	pass


class NoKeyFound(BreakError):
	pass


class AmbiguousKeySize(BreakError):
	pass


class NotEcbMode(BreakError):
	pass


class AttackAborted(BreakError):
	pass


class CodecError(BreakError, ValueError):
	pass


class DictionaryMiss(Exception):
	"""
	Raised inside the byte-at-a-time loop when no dictionary entry matches
	the target block. This is how the loop learns it has walked past the
	secret; recover_secret() never lets it escape.
	"""
	pass

import random

import pytest

ENGLISH = (
	b"The lighthouse keeper had lived on the island for almost thirty years, and in all that "
	b"time he had never once missed lighting the lamp at dusk. Every evening he climbed the "
	b"narrow stairs, trimmed the wick, polished the great lens and watched the beam sweep out "
	b"across the water. Ships that passed in the night would never know his name, but they "
	b"trusted the light, and that was enough for him. In the mornings he walked along the "
	b"rocky shore collecting driftwood, shells and the occasional bottle that the tide had "
	b"carried in from distant places. Some of the bottles held letters, written by people who "
	b"wanted to be heard by somebody, anybody, on the other side of the sea. He kept every one "
	b"of them in a wooden chest beside his bed, and on stormy nights, when the wind howled "
	b"against the windows and the waves crashed over the breakwater, he would take them out "
	b"and read them again by the light of a small oil lamp. There was a letter from a sailor "
	b"who missed his mother, a letter from a girl who wanted to see the mountains, and a "
	b"letter from an old man who simply wrote that he had been happy. The keeper liked that "
	b"one best of all. When the supply boat came at the end of each month, the young captain "
	b"would ask him whether he was lonely out there, with nothing but the gulls and the "
	b"weather for company. The keeper would smile and shake his head, and point at the chest "
	b"of letters, and say that he had more friends than most people ever meet in a lifetime."
)


@pytest.fixture
def english():
	return ENGLISH


@pytest.fixture
def rng():
	return random.Random(1337)

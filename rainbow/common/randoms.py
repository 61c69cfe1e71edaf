import random
import string
from threading import local
from typing import Iterator, Optional

from rainbow.common.environments import env, optional_int

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits

__thread_state = local()


def current() -> random.Random:
    """ Get the random number generator of the current thread

        Each thread gets its own generator so that concurrent callers never share a random state. When
        RAINBOW_RANDOM_SEED is set, every generator starts from that seed.
    """
    rng = getattr(__thread_state, 'rng', None)

    if rng is None:
        seed = env('RAINBOW_RANDOM_SEED',
                   transform=optional_int,
                   description='Seed of the thread-local random number generators')
        rng = random.Random(seed)
        __thread_state.rng = rng

    return rng


def ints(lower: int, upper: int, rng: Optional[random.Random] = None) -> Iterator[int]:
    """ Infinite iterator of random integers within [lower, upper) """
    if lower >= upper:
        raise ValueError(f'The upper bound ({upper}) must be greater than the lower bound ({lower}).')

    rng = rng or current()

    def generate():
        while True:
            yield rng.randrange(lower, upper)

    return generate()


def verify_code(length: int = 5, alphabet: str = ALPHANUMERIC, rng: Optional[random.Random] = None) -> str:
    if length < 0:
        raise ValueError(f'The length of the code must not be negative ({length} given).')
    if not alphabet:
        raise ValueError('The alphabet must not be empty.')

    indexes = ints(0, len(alphabet), rng)

    return ''.join(alphabet[next(indexes)] for __ in range(length))

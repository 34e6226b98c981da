import numpy as np


class RandomSource:
    """Seeded shuffles and choices backed by a numpy Generator."""

    def __init__(self, seed=None):
        if isinstance(seed, np.random.SeedSequence):
            self.seed_sequence = seed
        else:
            self.seed_sequence = np.random.SeedSequence(seed)
        self.generator = np.random.default_rng(self.seed_sequence)

    def permutation(self, items):
        """Returns a uniformly shuffled copy of `items` as a list."""
        return self.generator.permutation(np.asarray(items)).tolist()

    def shuffle(self, items):
        self.generator.shuffle(items)

    def choice(self, items):
        return items[int(self.generator.integers(0, len(items)))]

    def spawn(self, n):
        """Independent child sources; same parent seed gives the same children."""
        return [RandomSource(child) for child in self.seed_sequence.spawn(n)]
